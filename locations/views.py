from django.db.models import Q
from rest_framework.decorators import action

from accounts.permissions import IsManagerOrReadOnly
from core.responses import success_response
from core.viewsets import EnvelopeModelViewSet

from .models import Location
from .serializers import LocationSerializer


class LocationViewSet(EnvelopeModelViewSet):
    """ViewSet for location management"""
    queryset = Location.objects.all()
    serializer_class = LocationSerializer
    permission_classes = [IsManagerOrReadOnly]

    def get_queryset(self):
        queryset = Location.objects.all()

        search = self.request.query_params.get('search')
        if search:
            queryset = queryset.filter(
                Q(name__icontains=search) |
                Q(address__icontains=search) |
                Q(phone__icontains=search)
            )

        status_filter = self.request.query_params.get('status')
        if status_filter:
            queryset = queryset.filter(status=status_filter)

        return queryset

    @action(detail=True, methods=['post'], url_path='toggle-status')
    def toggle_status(self, request, pk=None):
        """Toggle location active status"""
        location = self.get_object()
        location.status = 'inactive' if location.is_active else 'active'
        location.save(update_fields=['status', 'updated_at'])

        return success_response(
            LocationSerializer(location).data,
            message=f'Location {location.status}'
        )
