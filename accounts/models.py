import uuid

from django.contrib.auth.models import AbstractUser
from django.db import models

from locations.models import Location


class CustomUser(AbstractUser):
    ROLE_CHOICES = [
        ('admin', 'Admin'),
        ('manager', 'Manager'),
        ('staff', 'Staff'),
        ('kitchen_staff', 'Kitchen Staff'),
    ]

    STATUS_CHOICES = [
        ('active', 'Active'),
        ('inactive', 'Inactive'),
        ('suspended', 'Suspended'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, blank=True)
    role = models.CharField(
        max_length=20, choices=ROLE_CHOICES, default='staff')
    location = models.ForeignKey(
        Location,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='users'
    )
    contact_number = models.CharField(max_length=20, blank=True)
    account_status = models.CharField(
        max_length=10, choices=STATUS_CHOICES, default='active')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        verbose_name = 'user'

    def __str__(self):
        return f"{self.email or self.username} ({self.get_role_display()})"

    @property
    def effective_role(self):
        """Superusers created from the CLI act as admins"""
        return 'admin' if self.is_superuser else self.role

    @property
    def can_sign_in(self):
        return self.is_active and self.account_status == 'active'
