from django.test import TestCase

from factories import make_location, make_user, make_taxonomy, make_ingredient, api_client_for
from taxonomy.models import FoodCategory, FoodType


class FoodCategoryAPITest(TestCase):
    def setUp(self):
        self.location = make_location()
        self.client = api_client_for(make_user(location=self.location))

    def test_categories_listed_by_display_order_then_creation(self):
        for name, order in [('Veg', 2), ('Meat', 1), ('Fish', 2), ('Grains', 0)]:
            response = self.client.post('/api/settings/categories',
                                        {'name': name, 'display_order': order}, format='json')
            self.assertEqual(response.status_code, 201)

        response = self.client.get('/api/settings/categories')

        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.data['success'])
        self.assertEqual([c['name'] for c in response.data['data']],
                         ['Grains', 'Meat', 'Veg', 'Fish'])
        self.assertEqual(response.data['count'], 4)

    def test_delete_category_with_food_type_is_conflict(self):
        category, *_ = make_taxonomy()

        response = self.client.delete(f'/api/settings/categories/{category.id}')

        self.assertEqual(response.status_code, 409)
        self.assertFalse(response.data['success'])
        self.assertIn('still in use', response.data['error'])
        self.assertTrue(FoodCategory.objects.filter(pk=category.pk).exists())

    def test_delete_unused_category(self):
        category = FoodCategory.objects.create(name='Desserts')

        response = self.client.delete(f'/api/settings/categories/{category.id}')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['data']['message'], 'Food category deleted successfully')
        self.assertFalse(FoodCategory.objects.filter(pk=category.pk).exists())

    def test_duplicate_category_name_is_conflict(self):
        FoodCategory.objects.create(name='Meat')

        response = self.client.post('/api/settings/categories', {'name': 'Meat'}, format='json')

        self.assertEqual(response.status_code, 409)

    def test_staff_cannot_change_taxonomy(self):
        staff = make_user(email='staff@example.com', role='staff', location=self.location)

        response = api_client_for(staff).post(
            '/api/settings/categories', {'name': 'Soups'}, format='json')

        self.assertEqual(response.status_code, 403)

    def test_unauthenticated_request_is_rejected(self):
        self.client.force_authenticate(user=None)

        response = self.client.get('/api/settings/categories')

        self.assertEqual(response.status_code, 401)
        self.assertFalse(response.data['success'])


class FoodTypeAPITest(TestCase):
    def setUp(self):
        self.client = api_client_for(make_user(location=make_location()))
        self.category, self.food_type, self.specification, self.cook_type = make_taxonomy()

    def test_types_filtered_by_category(self):
        other = FoodCategory.objects.create(name='Fish')
        FoodType.objects.create(category=other, name='Salmon')

        response = self.client.get('/api/settings/types', {'category_id': str(self.category.id)})

        self.assertEqual([t['name'] for t in response.data['data']], ['Chicken'])
        self.assertEqual(response.data['data'][0]['category_id'], str(self.category.id))

    def test_type_requires_category(self):
        response = self.client.post('/api/settings/types', {'name': 'Beef'}, format='json')

        self.assertEqual(response.status_code, 400)
        self.assertIn('category_id', response.data['details'])

    def test_empty_string_category_is_rejected(self):
        response = self.client.post('/api/settings/types',
                                    {'category_id': '', 'name': 'Beef'}, format='json')

        self.assertEqual(response.status_code, 400)
        self.assertIn('not a valid UUID', response.data['error'])

    def test_duplicate_type_name_is_conflict(self):
        response = self.client.post('/api/settings/types',
                                    {'category_id': str(self.category.id), 'name': 'chicken'},
                                    format='json')

        self.assertEqual(response.status_code, 409)

    def test_moving_referenced_type_is_conflict(self):
        make_ingredient(self.food_type)
        other = FoodCategory.objects.create(name='Poultry')

        response = self.client.put(f'/api/settings/types/{self.food_type.id}',
                                   {'category_id': str(other.id)}, format='json')

        self.assertEqual(response.status_code, 409)
        self.food_type.refresh_from_db()
        self.assertEqual(self.food_type.category_id, self.category.id)

    def test_delete_specification_used_by_ingredient_is_conflict(self):
        make_ingredient(self.food_type, specification=self.specification)

        response = self.client.delete(f'/api/settings/specifications/{self.specification.id}')

        self.assertEqual(response.status_code, 409)

    def test_specifications_filtered_by_food_type(self):
        response = self.client.get('/api/settings/specifications',
                                   {'food_type_id': str(self.food_type.id)})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['data'][0]['name'], 'Breast')
        self.assertEqual(response.data['data'][0]['category_name'], 'Meat')

    def test_cook_types_filtered_by_category(self):
        response = self.client.get('/api/settings/cook-types',
                                   {'category_id': str(self.category.id)})

        self.assertEqual([c['name'] for c in response.data['data']], ['Grilled'])
