from django.test import TestCase

from factories import (
    make_location, make_user, make_taxonomy, make_ingredient, make_menu_item, api_client_for
)
from menu.business_logic import MenuBusinessLogic
from menu.models import MenuItem
from taxonomy.models import FoodCategory, FoodType

PHOTO = 'data:image/png;base64,iVBORw0KGgo='


class MenuItemAPITest(TestCase):
    def setUp(self):
        self.location = make_location()
        self.client = api_client_for(make_user(role='staff', location=self.location))
        self.category, self.food_type, self.specification, self.cook_type = make_taxonomy()

    def create_item(self, **fields):
        payload = {'location_id': str(self.location.id), 'name': 'Chicken Bowl'}
        payload.update(fields)
        return self.client.post('/api/menu', payload, format='json')

    def test_list_requires_location(self):
        response = self.client.get('/api/menu')

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data['error'], 'location_id: location_id is required')

    def test_list_is_scoped_to_location(self):
        other = make_location(name='Second Kitchen')
        make_menu_item(self.location, name='Here')
        make_menu_item(other, name='There')

        response = self.client.get('/api/menu', {'location_id': str(self.location.id)})

        self.assertEqual([m['name'] for m in response.data['data']], ['Here'])

    def test_draft_created_with_sequential_display_id(self):
        first = self.create_item().data['data']
        second = self.create_item(name='Beef Bowl').data['data']

        self.assertEqual(first['status'], 'draft')
        self.assertEqual(first['display_id'], 'M0001')
        self.assertEqual(second['display_id'], 'M0002')
        self.assertIsNone(first['food_category_id'])

    def test_blank_name_is_rejected(self):
        response = self.create_item(name='   ')

        self.assertEqual(response.status_code, 400)
        self.assertIn('name', response.data['details'])

    def test_empty_string_foreign_key_is_rejected(self):
        response = self.create_item(food_category_id='')

        self.assertEqual(response.status_code, 400)
        self.assertIn('food_category_id', response.data['details'])

    def test_full_item_with_photos_ingredients_and_tags(self):
        ingredient = make_ingredient(self.food_type, quantities=[('100g', '200')])
        quantity = ingredient.quantities.get()

        response = self.create_item(
            food_category_id=str(self.category.id),
            food_type_id=str(self.food_type.id),
            specification_id=str(self.specification.id),
            cook_type_id=str(self.cook_type.id),
            price='1500.00',
            tags='spicy, keto,spicy,',
            prep_workout='marinate, grill',
            photos=[PHOTO],
            ingredients=[{'ingredient_id': str(ingredient.id),
                          'ingredient_quantity_id': str(quantity.id)}],
        )

        self.assertEqual(response.status_code, 201)
        item = response.data['data']
        self.assertEqual(item['tags'], 'spicy,keto')
        self.assertEqual(item['prep_workout'], 'marinate,grill')
        self.assertEqual(item['category_name'], 'Meat')
        self.assertEqual(item['photos'][0]['photo_url'], PHOTO)
        self.assertEqual(item['ingredients'][0]['quantity_value'], '100g')
        self.assertEqual(item['ingredients'][0]['quantity_price'], '200.00')

    def test_update_replaces_photos_and_ingredients(self):
        ingredient = make_ingredient(self.food_type)
        item_id = self.create_item(
            photos=[PHOTO, PHOTO],
            ingredients=[{'ingredient_id': str(ingredient.id)}],
        ).data['data']['id']

        response = self.client.put(f'/api/menu/{item_id}', {
            'photos': ['data:image/jpeg;base64,/9j/'],
            'ingredients': [],
        }, format='json')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.data['data']['photos']), 1)
        self.assertEqual(response.data['data']['ingredients'], [])

    def test_non_image_upload_is_rejected(self):
        response = self.create_item(photos=['data:text/plain;base64,aGk='])

        self.assertEqual(response.status_code, 400)

    def test_quantity_of_another_ingredient_is_rejected(self):
        first = make_ingredient(self.food_type, name='First')
        second = make_ingredient(self.food_type, name='Second')

        response = self.create_item(ingredients=[{
            'ingredient_id': str(first.id),
            'ingredient_quantity_id': str(second.quantities.get().id),
        }])

        self.assertEqual(response.status_code, 400)

    def test_food_type_outside_category_is_rejected(self):
        fish = FoodCategory.objects.create(name='Fish')

        response = self.create_item(food_category_id=str(fish.id),
                                    food_type_id=str(self.food_type.id))

        self.assertEqual(response.status_code, 400)
        self.assertIn('food_type_id', response.data['details'])

    def test_changing_category_clears_descendants(self):
        item_id = self.create_item(
            food_category_id=str(self.category.id),
            food_type_id=str(self.food_type.id),
            specification_id=str(self.specification.id),
            cook_type_id=str(self.cook_type.id),
        ).data['data']['id']
        fish = FoodCategory.objects.create(name='Fish')

        response = self.client.put(f'/api/menu/{item_id}',
                                   {'food_category_id': str(fish.id)}, format='json')

        self.assertEqual(response.status_code, 200)
        item = response.data['data']
        self.assertEqual(item['food_category_id'], str(fish.id))
        self.assertIsNone(item['food_type_id'])
        self.assertIsNone(item['specification_id'])
        self.assertIsNone(item['cook_type_id'])

    def test_changing_food_type_clears_specification_only(self):
        item_id = self.create_item(
            food_category_id=str(self.category.id),
            food_type_id=str(self.food_type.id),
            specification_id=str(self.specification.id),
            cook_type_id=str(self.cook_type.id),
        ).data['data']['id']
        beef = FoodType.objects.create(category=self.category, name='Beef')

        item = self.client.put(f'/api/menu/{item_id}',
                               {'food_type_id': str(beef.id)}, format='json').data['data']

        self.assertEqual(item['food_type_id'], str(beef.id))
        self.assertIsNone(item['specification_id'])
        self.assertEqual(item['cook_type_id'], str(self.cook_type.id))

    def test_toggle_status(self):
        item = make_menu_item(self.location)

        response = self.client.patch(f'/api/menu/{item.id}/toggle-status')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['data']['status'], 'active')
        item.refresh_from_db()
        self.assertEqual(item.status, 'active')

    def test_filter_by_status_and_search(self):
        make_menu_item(self.location, name='Chicken Bowl', status='active')
        make_menu_item(self.location, name='Beef Bowl', status='draft')

        response = self.client.get('/api/menu', {'location_id': str(self.location.id),
                                                 'status': 'active', 'search': 'bowl'})

        self.assertEqual([m['name'] for m in response.data['data']], ['Chicken Bowl'])

    def test_delete_menu_item(self):
        item = make_menu_item(self.location)

        response = self.client.delete(f'/api/menu/{item.id}')

        self.assertEqual(response.status_code, 200)
        self.assertFalse(MenuItem.objects.filter(pk=item.pk).exists())


class MenuBusinessLogicTest(TestCase):
    def test_tags_are_deduplicated_in_order(self):
        self.assertEqual(MenuBusinessLogic.split_tags(' a, b ,a,,c '), ['a', 'b', 'c'])
        self.assertEqual(MenuBusinessLogic.join_tags(['b', 'a', 'b']), 'b,a')

    def test_display_id_is_per_location(self):
        first = make_location(name='One')
        second = make_location(name='Two')
        make_menu_item(first)

        self.assertEqual(make_menu_item(second).display_id, 'M0001')
        self.assertEqual(make_menu_item(first).display_id, 'M0002')

    def test_display_id_keeps_counting_past_four_digits(self):
        location = make_location()
        make_menu_item(location, display_id='M9999')

        self.assertEqual(make_menu_item(location).display_id, 'M10000')
        self.assertEqual(make_menu_item(location).display_id, 'M10001')
