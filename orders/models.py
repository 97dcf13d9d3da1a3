from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from core.models import BaseModel


class Order(BaseModel):
    """A customer's meal-prep order at one location"""
    STATUS_CHOICES = [
        ('received', 'Received'),
        ('preparing', 'Preparing'),
        ('ready', 'Ready'),
        ('delivered', 'Delivered'),
        ('cancelled', 'Cancelled'),
    ]

    location = models.ForeignKey(
        'locations.Location', on_delete=models.PROTECT, related_name='orders')
    customer = models.ForeignKey(
        'customers.Customer', on_delete=models.PROTECT,
        null=True, blank=True, related_name='orders')
    order_number = models.CharField(max_length=20, unique=True, blank=True)
    status = models.CharField(
        max_length=20, choices=STATUS_CHOICES, default='received')
    total_price = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    notes = models.TextField(blank=True)

    order_date = models.DateTimeField(default=timezone.now)
    delivered_at = models.DateTimeField(blank=True, null=True)

    class Meta:
        ordering = ['-order_date']
        indexes = [
            models.Index(fields=['location', 'order_date'], name='order_location_date_idx'),
            models.Index(fields=['status', 'order_date'], name='order_status_date_idx'),
        ]

    def __str__(self):
        return f"Order #{self.order_number}"

    def save(self, *args, **kwargs):
        # Generate order number if not exists
        if not self.order_number:
            self.order_number = self.generate_order_number()
        super().save(*args, **kwargs)

    def generate_order_number(self):
        """Date-prefixed running number: YYMMDD0001, YYMMDD0002, ..."""
        date_str = timezone.localtime(self.order_date).strftime('%y%m%d')

        last_order = Order.objects.filter(
            order_number__startswith=date_str
        ).order_by('-order_number').first()

        if last_order:
            new_num = int(last_order.order_number[-4:]) + 1
        else:
            new_num = 1

        return f"{date_str}{new_num:04d}"

    def calculate_total(self):
        """Plain sum of the item totals, no tax or service charge"""
        self.total_price = sum(
            (item.total_price for item in self.items.all()), Decimal('0.00'))
        self.save(update_fields=['total_price', 'updated_at'])
        return self.total_price

    def set_status(self, status):
        self.status = status
        if status == 'delivered':
            self.delivered_at = timezone.now()
        elif self.delivered_at is not None:
            self.delivered_at = None
        self.save(update_fields=['status', 'delivered_at', 'updated_at'])


class OrderItem(BaseModel):
    order = models.ForeignKey(
        Order, on_delete=models.CASCADE, related_name='items')
    menu_item = models.ForeignKey(
        'menu.MenuItem', on_delete=models.SET_NULL,
        null=True, blank=True, related_name='order_items')
    quantity = models.PositiveIntegerField(
        default=1, validators=[MinValueValidator(1)])
    # Price at time of order
    unit_price = models.DecimalField(
        max_digits=10, decimal_places=2, validators=[MinValueValidator(0)])
    total_price = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    notes = models.TextField(blank=True)

    class Meta:
        ordering = ['created_at']

    def __str__(self):
        name = self.menu_item.name if self.menu_item else 'Custom item'
        return f"{self.quantity}x {name} (Order #{self.order.order_number})"

    def save(self, *args, **kwargs):
        # Store current menu item price
        if self.unit_price is None and self.menu_item is not None:
            self.unit_price = self.menu_item.price
        self.total_price = self.unit_price * self.quantity
        super().save(*args, **kwargs)
