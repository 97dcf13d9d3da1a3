from django.db import models

from core.models import BaseModel


class Customer(BaseModel):
    """A meal-prep customer registered at one location"""
    STATUS_CHOICES = [
        ('active', 'Active'),
        ('inactive', 'Inactive'),
        ('suspended', 'Suspended'),
    ]

    location = models.ForeignKey(
        'locations.Location', on_delete=models.PROTECT, related_name='customers')
    name = models.CharField(max_length=255)
    email = models.EmailField()
    contact_number = models.CharField(max_length=20, blank=True)
    address = models.TextField(blank=True)
    account_status = models.CharField(
        max_length=20, choices=STATUS_CHOICES, default='active')

    class Meta:
        ordering = ['name']
        unique_together = ['location', 'email']

    def __str__(self):
        return f"{self.name} <{self.email}>"

    @property
    def total_preps(self):
        return self.orders.count()
