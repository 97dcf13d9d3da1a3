from django.contrib import admin
from .models import Ingredient, IngredientQuantity


class IngredientQuantityInline(admin.TabularInline):
    model = IngredientQuantity
    extra = 0
    fields = ('quantity_value', 'quantity_grams', 'price', 'is_available', 'position')


@admin.register(Ingredient)
class IngredientAdmin(admin.ModelAdmin):
    list_display = ('display_name', 'food_type', 'specification', 'cook_type', 'is_active')
    list_filter = ('is_active', 'food_type__category')
    search_fields = ('name', 'food_type__name', 'description')
    inlines = [IngredientQuantityInline]
