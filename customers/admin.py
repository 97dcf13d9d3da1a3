from django.contrib import admin
from .models import Customer


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ('name', 'email', 'location', 'contact_number', 'account_status')
    list_filter = ('account_status', 'location')
    search_fields = ('name', 'email', 'contact_number')
    readonly_fields = ('created_at', 'updated_at')
