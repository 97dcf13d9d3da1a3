from rest_framework import serializers


class HealthCheckSerializer(serializers.Serializer):
    status = serializers.CharField()
    timestamp = serializers.DateTimeField()
    database = serializers.CharField()
    service = serializers.CharField()
    version = serializers.CharField()


class StrictPrimaryKeyRelatedField(serializers.PrimaryKeyRelatedField):
    """
    Foreign key field that rejects an empty string instead of coercing it
    to null. A missing selection must be sent as null or omitted.
    """

    def __init__(self, **kwargs):
        # Ids are rendered as strings, the same as the read-only UUIDFields
        kwargs.setdefault('pk_field', serializers.UUIDField(format='hex_verbose'))
        super().__init__(**kwargs)

    def run_validation(self, data=serializers.empty):
        if data == '':
            raise serializers.ValidationError(
                '"" is not a valid UUID.', code='invalid')
        return super().run_validation(data)
