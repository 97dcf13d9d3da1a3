from rest_framework import serializers

from core.serializers import StrictPrimaryKeyRelatedField
from customers.models import Customer
from locations.models import Location
from menu.models import MenuItem

from .business_logic import OrderBusinessLogic
from .models import Order, OrderItem


class OrderItemSerializer(serializers.ModelSerializer):
    order_id = serializers.UUIDField(read_only=True)
    menu_item_id = serializers.UUIDField(read_only=True)
    menu_item_name = serializers.CharField(
        source='menu_item.name', read_only=True, default=None)
    menu_item_description = serializers.CharField(
        source='menu_item.description', read_only=True, default=None)

    class Meta:
        model = OrderItem
        fields = ['id', 'order_id', 'menu_item_id', 'quantity', 'unit_price',
                  'total_price', 'notes', 'created_at', 'menu_item_name',
                  'menu_item_description']
        read_only_fields = fields


class OrderSummarySerializer(serializers.ModelSerializer):
    """Order without its items, for embedding in customer detail"""
    location_id = serializers.UUIDField(read_only=True)
    customer_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Order
        fields = ['id', 'location_id', 'customer_id', 'order_number', 'status',
                  'total_price', 'notes', 'order_date', 'delivered_at',
                  'created_at', 'updated_at']
        read_only_fields = fields


class OrderSerializer(OrderSummarySerializer):
    customer_name = serializers.CharField(
        source='customer.name', read_only=True, default=None)
    customer_email = serializers.CharField(
        source='customer.email', read_only=True, default=None)
    customer_phone = serializers.CharField(
        source='customer.contact_number', read_only=True, default=None)
    location_name = serializers.CharField(source='location.name', read_only=True)
    items = OrderItemSerializer(many=True, read_only=True)

    class Meta(OrderSummarySerializer.Meta):
        fields = OrderSummarySerializer.Meta.fields + [
            'customer_name', 'customer_email', 'customer_phone',
            'location_name', 'items'
        ]
        read_only_fields = fields


class OrderItemWriteSerializer(serializers.Serializer):
    menu_item_id = StrictPrimaryKeyRelatedField(
        source='menu_item', queryset=MenuItem.objects.all(),
        required=False, allow_null=True)
    quantity = serializers.IntegerField(min_value=1, default=1)
    unit_price = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=0, required=False)
    notes = serializers.CharField(required=False, allow_blank=True)

    def validate(self, attrs):
        if attrs.get('menu_item') is None and attrs.get('unit_price') is None:
            raise serializers.ValidationError(
                {'unit_price': 'A unit price is required for items without a menu item.'})
        return attrs


class OrderWriteSerializer(serializers.ModelSerializer):
    location_id = StrictPrimaryKeyRelatedField(
        source='location', queryset=Location.objects.all())
    customer_id = StrictPrimaryKeyRelatedField(
        source='customer', queryset=Customer.objects.all(),
        required=False, allow_null=True)
    items = OrderItemWriteSerializer(many=True, required=False)

    class Meta:
        model = Order
        fields = ['location_id', 'customer_id', 'status', 'notes', 'items']

    def validate_items(self, value):
        if not value:
            raise serializers.ValidationError("An order needs at least one item")
        return value

    def validate(self, attrs):
        if self.instance is None and 'items' not in attrs:
            raise serializers.ValidationError({'items': 'This field is required.'})

        if self.instance is not None and 'location' in attrs \
                and attrs['location'] != self.instance.location:
            raise serializers.ValidationError(
                {'location_id': 'An order cannot be moved to another location.'})

        location = attrs.get('location', getattr(self.instance, 'location', None))
        customer = attrs.get('customer', getattr(self.instance, 'customer', None))
        if customer is not None and customer.location_id != location.pk:
            raise serializers.ValidationError(
                {'customer_id': 'Customer belongs to a different location.'})

        for row in attrs.get('items', []):
            menu_item = row.get('menu_item')
            if menu_item is not None and menu_item.location_id != location.pk:
                raise serializers.ValidationError(
                    {'items': f"Menu item {menu_item.display_id} belongs to a different location."})
        return attrs

    def create(self, validated_data):
        items = validated_data.pop('items')
        status = validated_data.pop('status', None)

        order = Order.objects.create(**validated_data)
        if status and status != order.status:
            order.set_status(status)
        return OrderBusinessLogic.replace_items(order, items)

    def update(self, instance, validated_data):
        items = validated_data.pop('items', None)
        status = validated_data.pop('status', None)

        for field, value in validated_data.items():
            setattr(instance, field, value)
        instance.save()

        if status and status != instance.status:
            instance.set_status(status)
        if items is not None:
            OrderBusinessLogic.replace_items(instance, items)
        return instance


class OrderStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Order.STATUS_CHOICES)
