from rest_framework import serializers
from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from rest_framework.validators import UniqueValidator

from core.serializers import StrictPrimaryKeyRelatedField
from locations.models import Location

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    location_id = serializers.UUIDField(read_only=True)
    location_name = serializers.CharField(
        source='location.name', read_only=True, default=None)

    class Meta:
        model = User
        fields = ['id', 'location_id', 'location_name', 'email', 'name',
                  'contact_number', 'role', 'account_status',
                  'created_at', 'updated_at', 'last_login']
        read_only_fields = fields


class UserWriteSerializer(serializers.ModelSerializer):
    email = serializers.EmailField(
        required=True,
        validators=[UniqueValidator(queryset=User.objects.all(), lookup='iexact')]
    )
    password = serializers.CharField(
        write_only=True,
        required=False,
        validators=[validate_password]
    )
    name = serializers.CharField(required=True, max_length=255)
    location_id = StrictPrimaryKeyRelatedField(
        source='location', queryset=Location.objects.all())

    class Meta:
        model = User
        fields = ['location_id', 'email', 'password', 'name',
                  'contact_number', 'role', 'account_status']

    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError("Name cannot be blank")
        return value.strip()

    def validate(self, attrs):
        if self.instance is None and not attrs.get('password'):
            raise serializers.ValidationError(
                {"password": "Password is required for new users."})
        return attrs

    def create(self, validated_data):
        password = validated_data.pop('password')
        email = validated_data['email'].lower()
        validated_data['email'] = email
        return User.objects.create_user(
            username=email, password=password, **validated_data)

    def update(self, instance, validated_data):
        password = validated_data.pop('password', None)
        if 'email' in validated_data:
            validated_data['email'] = validated_data['email'].lower()
            instance.username = validated_data['email']

        for field, value in validated_data.items():
            setattr(instance, field, value)
        if password:
            instance.set_password(password)

        instance.save()
        return instance


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField(required=True)
    password = serializers.CharField(required=True, write_only=True)
