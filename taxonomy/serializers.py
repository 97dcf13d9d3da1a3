from rest_framework import serializers

from core.exceptions import ConflictError
from core.serializers import StrictPrimaryKeyRelatedField

from .models import FoodCategory, FoodType, Specification, CookType


class NameMixin:
    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError("Name cannot be blank")
        return value.strip()


class FoodCategorySerializer(NameMixin, serializers.ModelSerializer):
    food_type_count = serializers.SerializerMethodField()

    class Meta:
        model = FoodCategory
        fields = [
            'id', 'name', 'display_order', 'show_specification',
            'show_cook_type', 'food_type_count', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'created_at', 'updated_at', 'food_type_count']

    def get_food_type_count(self, obj):
        return obj.food_types.count()


class FoodTypeSerializer(NameMixin, serializers.ModelSerializer):
    category_id = StrictPrimaryKeyRelatedField(
        source='category', queryset=FoodCategory.objects.all())
    category_name = serializers.CharField(source='category.name', read_only=True)

    class Meta:
        model = FoodType
        fields = ['id', 'category_id', 'category_name', 'name',
                  'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']
        validators = []

    def validate(self, attrs):
        category = attrs.get('category', getattr(self.instance, 'category', None))
        name = attrs.get('name', getattr(self.instance, 'name', None))
        duplicates = FoodType.objects.filter(category=category, name__iexact=name)
        if self.instance is not None:
            duplicates = duplicates.exclude(pk=self.instance.pk)
        if duplicates.exists():
            raise ConflictError(f"Food type '{name}' already exists in this category.")

        # A type in use stays in its category
        if self.instance is not None and category != self.instance.category:
            if self.instance.ingredients.exists() or self.instance.menu_items.exists():
                raise ConflictError(
                    'Cannot move a food type that is still used by ingredients or menu items.')
        return attrs


class SpecificationSerializer(NameMixin, serializers.ModelSerializer):
    food_type_id = StrictPrimaryKeyRelatedField(
        source='food_type', queryset=FoodType.objects.select_related('category'))
    food_type_name = serializers.CharField(source='food_type.name', read_only=True)
    category_id = serializers.UUIDField(source='food_type.category_id', read_only=True)
    category_name = serializers.CharField(source='food_type.category.name', read_only=True)

    class Meta:
        model = Specification
        fields = ['id', 'food_type_id', 'food_type_name', 'category_id',
                  'category_name', 'name', 'created_at']
        read_only_fields = ['id', 'created_at']
        validators = []

    def validate(self, attrs):
        food_type = attrs.get('food_type', getattr(self.instance, 'food_type', None))
        name = attrs.get('name', getattr(self.instance, 'name', None))
        duplicates = Specification.objects.filter(food_type=food_type, name__iexact=name)
        if self.instance is not None:
            duplicates = duplicates.exclude(pk=self.instance.pk)
        if duplicates.exists():
            raise ConflictError(f"Specification '{name}' already exists for this food type.")
        return attrs


class CookTypeSerializer(NameMixin, serializers.ModelSerializer):
    category_id = StrictPrimaryKeyRelatedField(
        source='category', queryset=FoodCategory.objects.all())
    category_name = serializers.CharField(source='category.name', read_only=True)

    class Meta:
        model = CookType
        fields = ['id', 'category_id', 'category_name', 'name', 'created_at']
        read_only_fields = ['id', 'created_at']
        validators = []

    def validate(self, attrs):
        category = attrs.get('category', getattr(self.instance, 'category', None))
        name = attrs.get('name', getattr(self.instance, 'name', None))
        duplicates = CookType.objects.filter(category=category, name__iexact=name)
        if self.instance is not None:
            duplicates = duplicates.exclude(pk=self.instance.pk)
        if duplicates.exists():
            raise ConflictError(f"Cook type '{name}' already exists in this category.")
        return attrs
