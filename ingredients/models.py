# ingredients/models.py
from django.core.validators import MinValueValidator
from django.db import models

from core.models import BaseModel


class Ingredient(BaseModel):
    """
    An ingredient classified by the taxonomy, with its own
    quantity/price schedule
    """
    food_type = models.ForeignKey(
        'taxonomy.FoodType', on_delete=models.PROTECT, related_name='ingredients')
    specification = models.ForeignKey(
        'taxonomy.Specification', on_delete=models.PROTECT,
        null=True, blank=True, related_name='ingredients')
    cook_type = models.ForeignKey(
        'taxonomy.CookType', on_delete=models.PROTECT,
        null=True, blank=True, related_name='ingredients')

    name = models.CharField(max_length=200, blank=True)
    description = models.TextField(blank=True)
    is_active = models.BooleanField(default=True)

    class Meta:
        ordering = ['food_type__name', 'name', 'created_at']

    def __str__(self):
        return self.display_name

    @property
    def category(self):
        return self.food_type.category

    @property
    def display_name(self):
        """Explicit name, else the taxonomy path it was built from"""
        if self.name:
            return self.name
        parts = [self.food_type.name]
        if self.specification_id:
            parts.append(self.specification.name)
        if self.cook_type_id:
            parts.append(self.cook_type.name)
        return ' '.join(parts)

    @property
    def available_quantities(self):
        return self.quantities.filter(is_available=True)


class IngredientQuantity(BaseModel):
    """One row of an ingredient's quantity/price schedule"""
    ingredient = models.ForeignKey(
        Ingredient, on_delete=models.CASCADE, related_name='quantities')
    quantity_value = models.CharField(max_length=50)
    quantity_grams = models.PositiveIntegerField(null=True, blank=True)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=0,
        validators=[MinValueValidator(0)]
    )
    is_available = models.BooleanField(default=True)
    position = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ['position', 'created_at']
        unique_together = ['ingredient', 'quantity_value']
        verbose_name_plural = 'ingredient quantities'

    def __str__(self):
        return f"{self.ingredient} - {self.quantity_value} @ {self.price}"
