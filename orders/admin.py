from django.contrib import admin
from .models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    fields = ('menu_item', 'quantity', 'unit_price', 'total_price', 'notes')
    readonly_fields = ('total_price',)


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ('order_number', 'location', 'customer', 'status', 'total_price', 'order_date')
    list_filter = ('status', 'location')
    search_fields = ('order_number', 'customer__name', 'customer__email')
    readonly_fields = ('order_number', 'total_price', 'delivered_at', 'created_at', 'updated_at')
    inlines = [OrderItemInline]
