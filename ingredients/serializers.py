# ingredients/serializers.py
from rest_framework import serializers

from core.serializers import StrictPrimaryKeyRelatedField
from taxonomy.models import FoodType, Specification, CookType

from .business_logic import IngredientBusinessLogic
from .models import Ingredient, IngredientQuantity


class IngredientQuantitySerializer(serializers.ModelSerializer):
    ingredient_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = IngredientQuantity
        fields = ['id', 'ingredient_id', 'quantity_value', 'quantity_grams',
                  'price', 'is_available', 'created_at']
        read_only_fields = ['id', 'ingredient_id', 'created_at']
        validators = []

    def validate_quantity_value(self, value):
        if not value.strip():
            raise serializers.ValidationError("Quantity label cannot be blank")
        return value.strip()

    def validate_price(self, value):
        if value < 0:
            raise serializers.ValidationError("Price cannot be negative")
        return value


class IngredientSerializer(serializers.ModelSerializer):
    """Read shape with the denormalized taxonomy names used for listing"""
    food_type_id = serializers.UUIDField(read_only=True)
    food_type_name = serializers.CharField(source='food_type.name', read_only=True)
    category_id = serializers.UUIDField(source='food_type.category_id', read_only=True)
    category_name = serializers.CharField(source='food_type.category.name', read_only=True)
    specification_id = serializers.UUIDField(read_only=True)
    specification_name = serializers.CharField(
        source='specification.name', read_only=True, default=None)
    cook_type_id = serializers.UUIDField(read_only=True)
    cook_type_name = serializers.CharField(
        source='cook_type.name', read_only=True, default=None)
    quantities = IngredientQuantitySerializer(many=True, read_only=True)

    class Meta:
        model = Ingredient
        fields = [
            'id', 'food_type_id', 'food_type_name', 'category_id', 'category_name',
            'specification_id', 'specification_name', 'cook_type_id',
            'cook_type_name', 'name', 'description', 'is_active',
            'quantities', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class IngredientWriteSerializer(serializers.ModelSerializer):
    food_type_id = StrictPrimaryKeyRelatedField(
        source='food_type', queryset=FoodType.objects.select_related('category'))
    specification_id = StrictPrimaryKeyRelatedField(
        source='specification', queryset=Specification.objects.all(),
        required=False, allow_null=True)
    cook_type_id = StrictPrimaryKeyRelatedField(
        source='cook_type', queryset=CookType.objects.all(),
        required=False, allow_null=True)
    quantities = IngredientQuantitySerializer(many=True, required=False)

    class Meta:
        model = Ingredient
        fields = ['food_type_id', 'specification_id', 'cook_type_id',
                  'name', 'description', 'is_active', 'quantities']

    def validate_quantities(self, value):
        labels = [row['quantity_value'] for row in value]
        duplicates = sorted({label for label in labels if labels.count(label) > 1})
        if duplicates:
            raise serializers.ValidationError(
                f"Duplicate quantity labels: {', '.join(duplicates)}")
        return value

    def validate(self, attrs):
        instance = self.instance
        food_type = attrs.get('food_type', getattr(instance, 'food_type', None))

        # A new food type invalidates the stored specification unless one is sent
        if instance is not None and 'food_type' in attrs and 'specification' not in attrs:
            if instance.specification_id and instance.specification.food_type_id != food_type.pk:
                attrs['specification'] = None

        specification = attrs.get('specification', getattr(instance, 'specification', None))
        cook_type = attrs.get('cook_type', getattr(instance, 'cook_type', None))

        errors = IngredientBusinessLogic.taxonomy_path_errors(
            food_type, specification, cook_type)
        if errors:
            raise serializers.ValidationError(errors)
        return attrs

    def create(self, validated_data):
        quantities = validated_data.pop('quantities', [])
        ingredient = Ingredient.objects.create(**validated_data)
        IngredientBusinessLogic.sync_quantities(ingredient, quantities)
        return ingredient

    def update(self, instance, validated_data):
        quantities = validated_data.pop('quantities', None)

        for field, value in validated_data.items():
            setattr(instance, field, value)
        instance.save()

        if quantities is not None:
            IngredientBusinessLogic.sync_quantities(instance, quantities)
        return instance
