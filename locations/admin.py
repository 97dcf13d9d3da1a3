# locations/admin.py
from django.contrib import admin
from .models import Location


@admin.register(Location)
class LocationAdmin(admin.ModelAdmin):
    list_display = ('name', 'location_type', 'currency', 'phone', 'status', 'created_at')
    list_filter = ('status', 'currency')
    search_fields = ('name', 'address', 'phone')
    readonly_fields = ('created_at', 'updated_at')
    fieldsets = (
        ('Basic Information', {
            'fields': ('name', 'location_type', 'currency', 'status')
        }),
        ('Contact Information', {
            'fields': ('address', 'phone')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
