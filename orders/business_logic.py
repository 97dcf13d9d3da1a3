import logging
from decimal import Decimal

from django.db.models import Count, Q, Sum
from django.utils import timezone

from .models import Order, OrderItem

logger = logging.getLogger(__name__)


class OrderBusinessLogic:
    @staticmethod
    def replace_items(order, rows):
        """Recreate the order's items and recompute its total"""
        order.items.all().delete()
        for row in rows:
            OrderItem.objects.create(
                order=order,
                menu_item=row.get('menu_item'),
                quantity=row.get('quantity', 1),
                unit_price=row.get('unit_price'),
                notes=row.get('notes') or '',
            )
        total = order.calculate_total()
        logger.info(f"Order {order.order_number} has {len(rows)} items totalling {total}")
        return order

    @staticmethod
    def daily_stats(location_id, day=None):
        """Counts and earnings for one location on one calendar day"""
        day = day or timezone.localdate()
        orders = Order.objects.filter(location_id=location_id, order_date__date=day)

        totals = orders.aggregate(
            received=Count('id', filter=~Q(status='cancelled')),
            delivered=Count('id', filter=Q(status='delivered')),
            earnings=Sum('total_price', filter=~Q(status='cancelled')),
        )
        return {
            'preps_received': totals['received'],
            'preps_delivered': totals['delivered'],
            'total_earnings': totals['earnings'] or Decimal('0.00'),
            'date': day.isoformat(),
        }
