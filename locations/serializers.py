from rest_framework import serializers

from .models import Location


class LocationSerializer(serializers.ModelSerializer):
    menu_item_count = serializers.SerializerMethodField()
    customer_count = serializers.SerializerMethodField()

    class Meta:
        model = Location
        fields = [
            'id', 'name', 'currency', 'location_type', 'address', 'phone',
            'status', 'menu_item_count', 'customer_count',
            'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'created_at', 'updated_at',
                            'menu_item_count', 'customer_count']

    def get_menu_item_count(self, obj):
        return obj.menu_items.count()

    def get_customer_count(self, obj):
        return obj.customers.count()

    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError("Location name cannot be blank")
        return value.strip()
