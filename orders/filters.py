import django_filters

from .models import Order


class OrderFilter(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=Order.STATUS_CHOICES)
    customer_id = django_filters.UUIDFilter(field_name='customer_id')
    date_from = django_filters.DateFilter(field_name='order_date', lookup_expr='date__gte')
    date_to = django_filters.DateFilter(field_name='order_date', lookup_expr='date__lte')

    class Meta:
        model = Order
        fields = ['status', 'customer_id', 'date_from', 'date_to']
