# core/viewsets.py
import logging

from django.db import transaction
from rest_framework import status, viewsets

from .exceptions import MissingScopeError
from .responses import success_response

logger = logging.getLogger(__name__)

UUID_LOOKUP_REGEX = '[0-9a-fA-F-]{36}'


def get_required_param(request, name):
    """Return a mandatory scoping query parameter or reject the request"""
    value = request.query_params.get(name, '').strip()
    if not value:
        raise MissingScopeError(name)
    return value


class EnvelopeModelViewSet(viewsets.ModelViewSet):
    """
    ModelViewSet whose responses use the {success, data, count, message}
    envelope. PUT behaves as a partial update so clients may send only the
    fields they changed.
    """
    lookup_value_regex = UUID_LOOKUP_REGEX
    pagination_class = None

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        serializer = self.get_serializer(queryset, many=True)
        return success_response(serializer.data, count=len(serializer.data))

    def retrieve(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_object())
        return success_response(serializer.data)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        with transaction.atomic():
            self.perform_create(serializer)
        logger.info(f"Created {self.get_model_label()} {serializer.instance.pk}")
        return success_response(
            self.get_output_data(serializer.instance), status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        kwargs['partial'] = True
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        with transaction.atomic():
            self.perform_update(serializer)
        logger.info(f"Updated {self.get_model_label()} {instance.pk}")
        return success_response(self.get_output_data(serializer.instance))

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        pk = instance.pk
        with transaction.atomic():
            self.perform_destroy(instance)
        label = self.get_model_label()
        logger.info(f"Deleted {label} {pk}")
        return success_response({'message': f'{label.capitalize()} deleted successfully'})

    def get_model_label(self):
        return str(self.get_queryset().model._meta.verbose_name)

    def get_output_data(self, instance):
        """Serialize a saved instance with the read serializer"""
        read_class = getattr(self, 'read_serializer_class', None) or self.get_serializer_class()
        instance.refresh_from_db()
        return read_class(instance, context=self.get_serializer_context()).data
