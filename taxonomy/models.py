from django.db import models

from core.models import BaseModel


class FoodCategory(BaseModel):
    """
    Root of the taxonomy. The two flags gate whether specification and cook
    type selection is offered wherever the category is in scope.
    """
    name = models.CharField(max_length=100, unique=True)
    display_order = models.IntegerField(default=0)
    show_specification = models.BooleanField(default=True)
    show_cook_type = models.BooleanField(default=True)

    class Meta:
        ordering = ['display_order', 'created_at']
        verbose_name = 'food category'
        verbose_name_plural = 'food categories'

    def __str__(self):
        return self.name


class FoodType(BaseModel):
    category = models.ForeignKey(
        FoodCategory, on_delete=models.PROTECT, related_name='food_types')
    name = models.CharField(max_length=100)

    class Meta:
        ordering = ['name']
        unique_together = ['category', 'name']
        verbose_name = 'food type'

    def __str__(self):
        return f"{self.name} ({self.category.name})"


class Specification(BaseModel):
    food_type = models.ForeignKey(
        FoodType, on_delete=models.PROTECT, related_name='specifications')
    name = models.CharField(max_length=100)

    class Meta:
        ordering = ['name']
        unique_together = ['food_type', 'name']

    def __str__(self):
        return f"{self.name} ({self.food_type.name})"


class CookType(BaseModel):
    """Keyed off the category directly, not the food type"""
    category = models.ForeignKey(
        FoodCategory, on_delete=models.PROTECT, related_name='cook_types')
    name = models.CharField(max_length=100)

    class Meta:
        ordering = ['name']
        unique_together = ['category', 'name']
        verbose_name = 'cook type'

    def __str__(self):
        return f"{self.name} ({self.category.name})"
