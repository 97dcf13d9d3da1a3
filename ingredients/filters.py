import django_filters

from .models import Ingredient


class IngredientFilter(django_filters.FilterSet):
    category_id = django_filters.UUIDFilter(field_name='food_type__category_id')
    food_type_id = django_filters.UUIDFilter(field_name='food_type_id')
    is_active = django_filters.BooleanFilter()

    class Meta:
        model = Ingredient
        fields = ['category_id', 'food_type_id', 'is_active']
