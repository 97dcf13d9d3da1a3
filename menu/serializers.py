from rest_framework import serializers

from core.serializers import StrictPrimaryKeyRelatedField
from ingredients.models import Ingredient, IngredientQuantity
from locations.models import Location
from taxonomy.models import FoodCategory, FoodType, Specification, CookType

from .business_logic import MenuBusinessLogic
from .models import MenuItem, MenuItemPhoto, MenuItemIngredient


class MenuItemPhotoSerializer(serializers.ModelSerializer):
    menu_item_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = MenuItemPhoto
        fields = ['id', 'menu_item_id', 'photo_url', 'display_order', 'created_at']
        read_only_fields = fields


class MenuItemIngredientSerializer(serializers.ModelSerializer):
    menu_item_id = serializers.UUIDField(read_only=True)
    ingredient_id = serializers.UUIDField(read_only=True)
    ingredient_quantity_id = serializers.UUIDField(read_only=True)
    ingredient_name = serializers.CharField(source='ingredient.display_name', read_only=True)
    food_type_name = serializers.CharField(source='ingredient.food_type.name', read_only=True)
    quantity_value = serializers.CharField(
        source='ingredient_quantity.quantity_value', read_only=True, default=None)
    quantity_price = serializers.DecimalField(
        source='ingredient_quantity.price', max_digits=10, decimal_places=2,
        read_only=True, default=None)

    class Meta:
        model = MenuItemIngredient
        fields = ['id', 'menu_item_id', 'ingredient_id', 'ingredient_quantity_id',
                  'custom_quantity', 'ingredient_name', 'food_type_name',
                  'quantity_value', 'quantity_price', 'created_at']
        read_only_fields = fields


class MenuItemSerializer(serializers.ModelSerializer):
    location_id = serializers.UUIDField(read_only=True)
    location_name = serializers.CharField(source='location.name', read_only=True)
    food_category_id = serializers.UUIDField(read_only=True)
    category_name = serializers.CharField(
        source='food_category.name', read_only=True, default=None)
    food_type_id = serializers.UUIDField(read_only=True)
    food_type_name = serializers.CharField(
        source='food_type.name', read_only=True, default=None)
    specification_id = serializers.UUIDField(read_only=True)
    specification_name = serializers.CharField(
        source='specification.name', read_only=True, default=None)
    cook_type_id = serializers.UUIDField(read_only=True)
    cook_type_name = serializers.CharField(
        source='cook_type.name', read_only=True, default=None)
    photos = MenuItemPhotoSerializer(many=True, read_only=True)
    ingredients = MenuItemIngredientSerializer(many=True, read_only=True)

    class Meta:
        model = MenuItem
        fields = [
            'id', 'location_id', 'location_name', 'display_id', 'name',
            'food_category_id', 'category_name', 'food_type_id', 'food_type_name',
            'specification_id', 'specification_name', 'cook_type_id',
            'cook_type_name', 'quantity', 'description', 'price', 'tags',
            'prep_workout', 'status', 'photos', 'ingredients',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields


class MenuItemIngredientWriteSerializer(serializers.Serializer):
    ingredient_id = StrictPrimaryKeyRelatedField(
        source='ingredient', queryset=Ingredient.objects.all())
    ingredient_quantity_id = StrictPrimaryKeyRelatedField(
        source='ingredient_quantity', queryset=IngredientQuantity.objects.all(),
        required=False, allow_null=True)
    custom_quantity = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, max_length=100)

    def validate(self, attrs):
        quantity = attrs.get('ingredient_quantity')
        if quantity is not None and quantity.ingredient_id != attrs['ingredient'].pk:
            raise serializers.ValidationError({
                'ingredient_quantity_id': 'Quantity does not belong to the selected ingredient.'
            })
        return attrs


class MenuItemWriteSerializer(serializers.ModelSerializer):
    location_id = StrictPrimaryKeyRelatedField(
        source='location', queryset=Location.objects.all())
    food_category_id = StrictPrimaryKeyRelatedField(
        source='food_category', queryset=FoodCategory.objects.all(),
        required=False, allow_null=True)
    food_type_id = StrictPrimaryKeyRelatedField(
        source='food_type', queryset=FoodType.objects.all(),
        required=False, allow_null=True)
    specification_id = StrictPrimaryKeyRelatedField(
        source='specification', queryset=Specification.objects.all(),
        required=False, allow_null=True)
    cook_type_id = StrictPrimaryKeyRelatedField(
        source='cook_type', queryset=CookType.objects.all(),
        required=False, allow_null=True)
    photos = serializers.ListField(
        child=serializers.CharField(), required=False)
    ingredients = MenuItemIngredientWriteSerializer(many=True, required=False)

    class Meta:
        model = MenuItem
        fields = [
            'location_id', 'name', 'food_category_id', 'food_type_id',
            'specification_id', 'cook_type_id', 'quantity', 'description',
            'price', 'tags', 'prep_workout', 'status', 'photos', 'ingredients'
        ]
        extra_kwargs = {
            'quantity': {'allow_null': True},
            'description': {'allow_null': True},
            'tags': {'allow_null': True},
            'prep_workout': {'allow_null': True},
        }

    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError("Name cannot be blank")
        return value.strip()

    def validate_price(self, value):
        if value < 0:
            raise serializers.ValidationError("Price cannot be negative")
        return value

    def validate_tags(self, value):
        return MenuBusinessLogic.join_tags(value)

    def validate_prep_workout(self, value):
        return MenuBusinessLogic.join_tags(value)

    def validate_photos(self, value):
        for url in value:
            if url.startswith('data:') and not url.startswith('data:image/'):
                raise serializers.ValidationError("Only image uploads are accepted")
        return value

    def validate(self, attrs):
        # Null text fields are stored as empty strings
        for field in ('quantity', 'description', 'tags', 'prep_workout'):
            if field in attrs and attrs[field] is None:
                attrs[field] = ''

        if self.instance is not None and 'location' in attrs \
                and attrs['location'] != self.instance.location:
            raise serializers.ValidationError(
                {'location_id': 'A menu item cannot be moved to another location.'})

        # Changing an ancestor drops stored descendants that were not resent
        instance = self.instance
        if instance is not None:
            if 'food_category' in attrs and attrs['food_category'] != instance.food_category:
                for child in ('food_type', 'specification', 'cook_type'):
                    attrs.setdefault(child, None)
            if 'food_type' in attrs and attrs['food_type'] != instance.food_type:
                attrs.setdefault('specification', None)

        def current(field):
            return attrs.get(field, getattr(self.instance, field, None))

        errors = MenuBusinessLogic.taxonomy_path_errors(
            current('food_category'), current('food_type'),
            current('specification'), current('cook_type'))
        if errors:
            raise serializers.ValidationError(errors)
        return attrs

    def create(self, validated_data):
        photos = validated_data.pop('photos', [])
        ingredients = validated_data.pop('ingredients', [])

        menu_item = MenuItem.objects.create(**validated_data)
        MenuBusinessLogic.replace_photos(menu_item, photos)
        MenuBusinessLogic.replace_ingredients(menu_item, ingredients)
        return menu_item

    def update(self, instance, validated_data):
        photos = validated_data.pop('photos', None)
        ingredients = validated_data.pop('ingredients', None)

        for field, value in validated_data.items():
            setattr(instance, field, value)
        instance.save()

        if photos is not None:
            MenuBusinessLogic.replace_photos(instance, photos)
        if ingredients is not None:
            MenuBusinessLogic.replace_ingredients(instance, ingredients)
        return instance
