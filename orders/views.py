from datetime import date

from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError

from accounts.permissions import IsStaffOrHigher
from core.responses import success_response
from core.viewsets import EnvelopeModelViewSet, get_required_param

from .business_logic import OrderBusinessLogic
from .filters import OrderFilter
from .models import Order
from .serializers import OrderSerializer, OrderWriteSerializer, OrderStatusSerializer


def parse_date(value, param):
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValidationError({param: [f'{param} must be a YYYY-MM-DD date']})


class OrderViewSet(EnvelopeModelViewSet):
    """Orders of one location; listing and stats require ?location_id="""
    permission_classes = [IsStaffOrHigher]
    read_serializer_class = OrderSerializer
    filterset_class = OrderFilter

    def get_serializer_class(self):
        if self.action in ['create', 'update', 'partial_update']:
            return OrderWriteSerializer
        if self.action == 'update_status':
            return OrderStatusSerializer
        return OrderSerializer

    def get_queryset(self):
        queryset = Order.objects.select_related(
            'location', 'customer'
        ).prefetch_related('items__menu_item')

        if self.action != 'list':
            return queryset

        location_id = get_required_param(self.request, 'location_id')
        return queryset.filter(location_id=location_id)

    @action(detail=True, methods=['patch'], url_path='status')
    def update_status(self, request, pk=None):
        order = self.get_object()
        serializer = OrderStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order.set_status(serializer.validated_data['status'])
        return success_response(
            OrderSerializer(order).data,
            message=f'Order {order.order_number} is now {order.status}'
        )

    @action(detail=False, methods=['get'])
    def stats(self, request):
        location_id = get_required_param(request, 'location_id')
        day = request.query_params.get('date')
        day = parse_date(day, 'date') if day else None
        return success_response(OrderBusinessLogic.daily_stats(location_id, day))
