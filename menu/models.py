from django.core.validators import MinValueValidator
from django.db import models
from django.db.models.functions import Length

from core.models import BaseModel


class MenuItem(BaseModel):
    """
    A dish offered at one location, classified by the taxonomy. Items start
    as drafts and are promoted to active once filled in.
    """
    STATUS_CHOICES = [
        ('draft', 'Draft'),
        ('active', 'Active'),
    ]

    location = models.ForeignKey(
        'locations.Location', on_delete=models.PROTECT, related_name='menu_items')
    display_id = models.CharField(max_length=20, blank=True)
    name = models.CharField(max_length=255)

    food_category = models.ForeignKey(
        'taxonomy.FoodCategory', on_delete=models.PROTECT,
        null=True, blank=True, related_name='menu_items')
    food_type = models.ForeignKey(
        'taxonomy.FoodType', on_delete=models.PROTECT,
        null=True, blank=True, related_name='menu_items')
    specification = models.ForeignKey(
        'taxonomy.Specification', on_delete=models.PROTECT,
        null=True, blank=True, related_name='menu_items')
    cook_type = models.ForeignKey(
        'taxonomy.CookType', on_delete=models.PROTECT,
        null=True, blank=True, related_name='menu_items')

    # Free text, deliberately not linked to an ingredient's quantity schedule
    quantity = models.CharField(max_length=100, blank=True)
    description = models.TextField(blank=True)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=0,
        validators=[MinValueValidator(0)]
    )
    tags = models.TextField(blank=True)
    prep_workout = models.TextField(blank=True)
    status = models.CharField(
        max_length=10, choices=STATUS_CHOICES, default='draft')

    class Meta:
        ordering = ['-created_at']
        verbose_name = 'menu item'
        indexes = [
            models.Index(fields=['location', 'status'], name='menu_location_status_idx'),
        ]

    def __str__(self):
        return f"{self.name} - {self.price}"

    def save(self, *args, **kwargs):
        # Generate display id if not exists
        if not self.display_id:
            self.display_id = self.generate_display_id()
        super().save(*args, **kwargs)

    def generate_display_id(self):
        """Next per-location display id: M0001, M0002, ..."""
        last_item = MenuItem.objects.filter(
            location_id=self.location_id,
            display_id__startswith='M'
        ).order_by(Length('display_id').desc(), '-display_id').first()

        if last_item:
            try:
                new_num = int(last_item.display_id[1:]) + 1
            except ValueError:
                new_num = MenuItem.objects.filter(location_id=self.location_id).count() + 1
        else:
            new_num = 1

        return f"M{new_num:04d}"


class MenuItemPhoto(BaseModel):
    menu_item = models.ForeignKey(
        MenuItem, on_delete=models.CASCADE, related_name='photos')
    # Data URL or absolute URL
    photo_url = models.TextField()
    display_order = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ['display_order', 'created_at']

    def __str__(self):
        return f"Photo {self.display_order} of {self.menu_item.name}"


class MenuItemIngredient(BaseModel):
    """Association of a menu item with an ingredient and optionally one of its quantities"""
    menu_item = models.ForeignKey(
        MenuItem, on_delete=models.CASCADE, related_name='ingredients')
    ingredient = models.ForeignKey(
        'ingredients.Ingredient', on_delete=models.PROTECT, related_name='menu_item_links')
    ingredient_quantity = models.ForeignKey(
        'ingredients.IngredientQuantity', on_delete=models.SET_NULL,
        null=True, blank=True, related_name='menu_item_links')
    custom_quantity = models.CharField(max_length=100, blank=True)

    class Meta:
        ordering = ['created_at']
        verbose_name = 'menu item ingredient'

    def __str__(self):
        return f"{self.menu_item.name} - {self.ingredient}"
