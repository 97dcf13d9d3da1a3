from django.db.models import Count, Q

from accounts.permissions import IsStaffOrHigher
from core.viewsets import EnvelopeModelViewSet, get_required_param

from .models import Customer
from .serializers import (
    CustomerSerializer, CustomerDetailSerializer, CustomerWriteSerializer
)


class CustomerViewSet(EnvelopeModelViewSet):
    """Customers of one location; listing requires ?location_id="""
    permission_classes = [IsStaffOrHigher]
    read_serializer_class = CustomerDetailSerializer

    def get_serializer_class(self):
        if self.action in ['create', 'update', 'partial_update']:
            return CustomerWriteSerializer
        if self.action == 'retrieve':
            return CustomerDetailSerializer
        return CustomerSerializer

    def get_queryset(self):
        queryset = Customer.objects.select_related('location')

        if self.action != 'list':
            return queryset

        location_id = get_required_param(self.request, 'location_id')
        queryset = queryset.filter(location_id=location_id).annotate(
            order_count=Count('orders'))

        search = self.request.query_params.get('search')
        if search:
            queryset = queryset.filter(
                Q(name__icontains=search) |
                Q(email__icontains=search) |
                Q(contact_number__icontains=search)
            )

        status_filter = self.request.query_params.get('status')
        if status_filter:
            queryset = queryset.filter(account_status=status_filter)

        return queryset
