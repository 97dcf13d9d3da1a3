from rest_framework import serializers

from core.exceptions import ConflictError
from core.serializers import StrictPrimaryKeyRelatedField
from locations.models import Location
from orders.serializers import OrderSummarySerializer

from .models import Customer

RECENT_ORDER_LIMIT = 5


class CustomerSerializer(serializers.ModelSerializer):
    location_id = serializers.UUIDField(read_only=True)
    location_name = serializers.CharField(source='location.name', read_only=True)
    total_preps = serializers.SerializerMethodField()

    class Meta:
        model = Customer
        fields = [
            'id', 'location_id', 'location_name', 'name', 'email',
            'contact_number', 'address', 'account_status', 'total_preps',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields

    def get_total_preps(self, obj):
        # Annotated on list querysets
        annotated = getattr(obj, 'order_count', None)
        return annotated if annotated is not None else obj.total_preps


class CustomerDetailSerializer(CustomerSerializer):
    recent_orders = serializers.SerializerMethodField()

    class Meta(CustomerSerializer.Meta):
        fields = CustomerSerializer.Meta.fields + ['recent_orders']
        read_only_fields = fields

    def get_recent_orders(self, obj):
        orders = obj.orders.order_by('-order_date')[:RECENT_ORDER_LIMIT]
        return OrderSummarySerializer(orders, many=True).data


class CustomerWriteSerializer(serializers.ModelSerializer):
    location_id = StrictPrimaryKeyRelatedField(
        source='location', queryset=Location.objects.all())

    class Meta:
        model = Customer
        fields = ['location_id', 'name', 'email', 'contact_number',
                  'address', 'account_status']
        validators = []

    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError("Name cannot be blank")
        return value.strip()

    def validate_email(self, value):
        return value.strip().lower()

    def validate(self, attrs):
        location = attrs.get('location', getattr(self.instance, 'location', None))
        email = attrs.get('email', getattr(self.instance, 'email', None))

        duplicates = Customer.objects.filter(location=location, email__iexact=email)
        if self.instance is not None:
            duplicates = duplicates.exclude(pk=self.instance.pk)
        if duplicates.exists():
            raise ConflictError(
                f"A customer with email '{email}' already exists at this location.")
        return attrs
