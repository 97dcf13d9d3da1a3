from django.test import TestCase

from customers.models import Customer
from factories import make_location, make_user, make_menu_item, api_client_for


class LocationAPITest(TestCase):
    def setUp(self):
        self.location = make_location()
        self.manager = make_user(email='manager@example.com', role='manager')
        self.client = api_client_for(self.manager)

    def test_create_location_with_default_currency(self):
        response = self.client.post('/api/locations', {'name': 'Colombo 07'}, format='json')

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data['data']['currency'], 'LKR')
        self.assertEqual(response.data['data']['status'], 'active')

    def test_counts_and_search(self):
        make_menu_item(self.location)
        Customer.objects.create(location=self.location, name='A', email='a@example.com')
        make_location(name='Kandy')

        response = self.client.get('/api/locations', {'search': 'main'})

        self.assertEqual(response.data['count'], 1)
        self.assertEqual(response.data['data'][0]['menu_item_count'], 1)
        self.assertEqual(response.data['data'][0]['customer_count'], 1)

    def test_toggle_status(self):
        response = self.client.post(f'/api/locations/{self.location.id}/toggle-status')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['data']['status'], 'inactive')

    def test_staff_cannot_create_location(self):
        staff = make_user(email='staff@example.com', role='staff', location=self.location)

        response = api_client_for(staff).post('/api/locations', {'name': 'X'}, format='json')

        self.assertEqual(response.status_code, 403)

    def test_location_with_menu_items_cannot_be_deleted(self):
        make_menu_item(self.location)

        response = self.client.delete(f'/api/locations/{self.location.id}')

        self.assertEqual(response.status_code, 409)

    def test_blank_name_is_rejected(self):
        response = self.client.post('/api/locations', {'name': ' '}, format='json')

        self.assertEqual(response.status_code, 400)
