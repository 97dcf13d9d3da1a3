from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from django.utils.translation import gettext_lazy as _

from .models import CustomUser


@admin.register(CustomUser)
class CustomUserAdmin(UserAdmin):
    list_display = ('email', 'name', 'role', 'location', 'account_status', 'created_at')
    list_filter = ('role', 'account_status', 'location')
    list_select_related = ('location',)
    search_fields = ('email', 'name', 'contact_number')
    ordering = ('-created_at',)
    readonly_fields = ('created_at', 'updated_at', 'last_login')

    fieldsets = (
        (None, {'fields': ('email', 'username', 'password')}),
        (_('Profile'), {'fields': ('name', 'contact_number')}),
        (_('Access'), {'fields': ('location', 'role', 'account_status', 'is_superuser')}),
        (_('Activity'), {'fields': ('last_login', 'created_at', 'updated_at')}),
    )
    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'username', 'name', 'password1', 'password2',
                       'location', 'role'),
        }),
    )

    actions = ['activate_accounts', 'suspend_accounts']

    @admin.action(description=_('Mark selected accounts active'))
    def activate_accounts(self, request, queryset):
        self.message_user(request, f"{queryset.update(account_status='active')} accounts activated.")

    @admin.action(description=_('Suspend selected accounts'))
    def suspend_accounts(self, request, queryset):
        # Superusers keep access
        updated = queryset.filter(is_superuser=False).update(account_status='suspended')
        self.message_user(request, f"{updated} accounts suspended.")
