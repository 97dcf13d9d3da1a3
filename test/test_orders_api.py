from datetime import timedelta
from decimal import Decimal

from django.test import TestCase
from django.utils import timezone

from customers.models import Customer
from factories import make_location, make_user, make_menu_item, api_client_for
from orders.models import Order, OrderItem


class CustomerAPITest(TestCase):
    def setUp(self):
        self.location = make_location()
        self.client = api_client_for(make_user(role='staff', location=self.location))

    def test_list_requires_location(self):
        response = self.client.get('/api/customers')

        self.assertEqual(response.status_code, 400)

    def test_create_and_list_with_order_count(self):
        response = self.client.post('/api/customers', {
            'location_id': str(self.location.id),
            'name': 'Nimal Perera',
            'email': 'Nimal@Example.com',
        }, format='json')
        self.assertEqual(response.status_code, 201)
        customer = Customer.objects.get(pk=response.data['data']['id'])
        self.assertEqual(customer.email, 'nimal@example.com')
        Order.objects.create(location=self.location, customer=customer)

        listed = self.client.get('/api/customers', {'location_id': str(self.location.id)})

        self.assertEqual(listed.data['data'][0]['total_preps'], 1)

    def test_duplicate_email_at_location_is_conflict(self):
        Customer.objects.create(location=self.location, name='A', email='a@example.com')

        response = self.client.post('/api/customers', {
            'location_id': str(self.location.id), 'name': 'B', 'email': 'A@example.com',
        }, format='json')

        self.assertEqual(response.status_code, 409)

    def test_same_email_at_other_location_is_allowed(self):
        Customer.objects.create(location=self.location, name='A', email='a@example.com')
        other = make_location(name='Second Kitchen')

        response = self.client.post('/api/customers', {
            'location_id': str(other.id), 'name': 'A', 'email': 'a@example.com',
        }, format='json')

        self.assertEqual(response.status_code, 201)

    def test_retrieve_carries_five_recent_orders(self):
        customer = Customer.objects.create(location=self.location, name='A', email='a@example.com')
        now = timezone.now()
        for days in range(7):
            Order.objects.create(location=self.location, customer=customer,
                                 order_date=now - timedelta(days=days))

        response = self.client.get(f'/api/customers/{customer.id}')

        self.assertEqual(response.data['data']['total_preps'], 7)
        self.assertEqual(len(response.data['data']['recent_orders']), 5)

    def test_delete_customer_with_orders_is_conflict(self):
        customer = Customer.objects.create(location=self.location, name='A', email='a@example.com')
        Order.objects.create(location=self.location, customer=customer)

        response = self.client.delete(f'/api/customers/{customer.id}')

        self.assertEqual(response.status_code, 409)


class OrderAPITest(TestCase):
    def setUp(self):
        self.location = make_location()
        self.client = api_client_for(make_user(role='kitchen_staff', location=self.location))
        self.bowl = make_menu_item(self.location, name='Chicken Bowl', price='1500.00')
        self.customer = Customer.objects.create(
            location=self.location, name='A', email='a@example.com')

    def create_order(self, **fields):
        payload = {
            'location_id': str(self.location.id),
            'customer_id': str(self.customer.id),
            'items': [
                {'menu_item_id': str(self.bowl.id), 'quantity': 2},
                {'quantity': 1, 'unit_price': '250.50', 'notes': 'Extra sauce'},
            ],
        }
        payload.update(fields)
        return self.client.post('/api/orders', payload, format='json')

    def test_total_is_sum_of_items(self):
        response = self.create_order()

        self.assertEqual(response.status_code, 201)
        order = response.data['data']
        self.assertEqual(order['total_price'], '3250.50')
        self.assertEqual(order['status'], 'received')
        self.assertEqual(order['items'][0]['unit_price'], '1500.00')
        self.assertEqual(order['items'][0]['total_price'], '3000.00')
        self.assertEqual(order['customer_name'], 'A')

    def test_order_number_is_date_prefixed(self):
        first = self.create_order().data['data']['order_number']
        second = self.create_order().data['data']['order_number']

        prefix = timezone.localtime().strftime('%y%m%d')
        self.assertEqual(first, f'{prefix}0001')
        self.assertEqual(second, f'{prefix}0002')

    def test_order_needs_items(self):
        response = self.create_order(items=[])

        self.assertEqual(response.status_code, 400)

    def test_custom_item_needs_price(self):
        response = self.create_order(items=[{'quantity': 1}])

        self.assertEqual(response.status_code, 400)

    def test_customer_from_other_location_is_rejected(self):
        other = make_location(name='Second Kitchen')
        stranger = Customer.objects.create(location=other, name='B', email='b@example.com')

        response = self.create_order(customer_id=str(stranger.id))

        self.assertEqual(response.status_code, 400)

    def test_order_cannot_move_to_other_location(self):
        order_id = self.create_order().data['data']['id']
        other = make_location(name='Second Kitchen')

        response = self.client.patch(f'/api/orders/{order_id}',
                                     {'location_id': str(other.id)}, format='json')

        self.assertEqual(response.status_code, 400)
        self.assertIn('location_id', response.data['details'])
        self.assertEqual(str(Order.objects.get(pk=order_id).location_id), str(self.location.id))

    def test_status_change_to_delivered_sets_timestamp(self):
        order_id = self.create_order().data['data']['id']

        response = self.client.patch(f'/api/orders/{order_id}/status',
                                     {'status': 'delivered'}, format='json')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['data']['status'], 'delivered')
        self.assertIsNotNone(response.data['data']['delivered_at'])

    def test_unknown_status_is_rejected(self):
        order_id = self.create_order().data['data']['id']

        response = self.client.patch(f'/api/orders/{order_id}/status',
                                     {'status': 'served'}, format='json')

        self.assertEqual(response.status_code, 400)

    def test_list_filters(self):
        self.create_order()
        delivered = Order.objects.create(location=self.location, status='delivered')

        response = self.client.get('/api/orders', {'location_id': str(self.location.id),
                                                   'status': 'delivered'})

        self.assertEqual([o['id'] for o in response.data['data']], [str(delivered.id)])

    def test_list_requires_location(self):
        response = self.client.get('/api/orders')

        self.assertEqual(response.status_code, 400)

    def test_daily_stats(self):
        self.create_order()
        delivered = Order.objects.create(location=self.location)
        OrderItem.objects.create(order=delivered, menu_item=self.bowl, quantity=1)
        delivered.calculate_total()
        delivered.set_status('delivered')
        Order.objects.create(location=self.location, status='cancelled', total_price=Decimal('99'))

        response = self.client.get('/api/orders/stats', {'location_id': str(self.location.id)})

        self.assertEqual(response.status_code, 200)
        stats = response.data['data']
        self.assertEqual(stats['preps_received'], 2)
        self.assertEqual(stats['preps_delivered'], 1)
        self.assertEqual(stats['total_earnings'], Decimal('4750.50'))
        self.assertEqual(stats['date'], timezone.localdate().isoformat())

    def test_menu_item_deletion_keeps_order_items(self):
        order_id = self.create_order().data['data']['id']

        self.bowl.delete()

        order = Order.objects.get(pk=order_id)
        self.assertEqual(order.items.count(), 2)
        self.assertEqual(order.total_price, Decimal('3250.50'))
