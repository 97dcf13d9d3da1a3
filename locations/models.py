from django.db import models

from core.models import BaseModel


class Location(BaseModel):
    """
    Top-level tenant scope: every customer, user, menu item and order
    belongs to exactly one location.
    """
    STATUS_CHOICES = [
        ('active', 'Active'),
        ('inactive', 'Inactive'),
    ]

    name = models.CharField(max_length=255, unique=True)
    currency = models.CharField(max_length=10, default='LKR')
    location_type = models.CharField(max_length=100, blank=True)
    address = models.TextField(blank=True)
    phone = models.CharField(max_length=20, blank=True)
    status = models.CharField(
        max_length=10, choices=STATUS_CHOICES, default='active')

    class Meta:
        ordering = ['name']

    def __str__(self):
        return self.name

    @property
    def is_active(self):
        return self.status == 'active'
