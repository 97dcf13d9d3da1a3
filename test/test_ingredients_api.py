from django.test import TestCase

from factories import (
    make_location, make_user, make_taxonomy, make_ingredient, make_menu_item, api_client_for
)
from ingredients.models import Ingredient
from menu.models import MenuItemIngredient
from taxonomy.models import FoodCategory, FoodType, Specification


class IngredientAPITest(TestCase):
    def setUp(self):
        self.location = make_location()
        self.client = api_client_for(make_user(location=self.location))
        self.category, self.food_type, self.specification, self.cook_type = make_taxonomy()

    def test_meat_chicken_breast_scenario(self):
        category = self.client.post('/api/settings/categories', {
            'name': 'Poultry', 'show_specification': True, 'show_cook_type': False
        }, format='json').data['data']
        food_type = self.client.post('/api/settings/types', {
            'category_id': category['id'], 'name': 'Chicken'
        }, format='json').data['data']

        response = self.client.post('/api/ingredients', {
            'food_type_id': food_type['id'],
            'name': 'Breast',
            'quantities': [{'quantity_value': '100g', 'price': 200, 'is_available': True}],
        }, format='json')

        self.assertEqual(response.status_code, 201)
        created = response.data['data']
        self.assertEqual(created['category_name'], 'Poultry')
        self.assertEqual(created['quantities'][0]['quantity_value'], '100g')

        listed = self.client.get('/api/ingredients', {'category_id': category['id']})
        self.assertEqual([i['id'] for i in listed.data['data']], [created['id']])

    def test_specification_from_other_food_type_is_rejected(self):
        beef = FoodType.objects.create(category=self.category, name='Beef')
        brisket = Specification.objects.create(food_type=beef, name='Brisket')

        response = self.client.post('/api/ingredients', {
            'food_type_id': str(self.food_type.id),
            'specification_id': str(brisket.id),
        }, format='json')

        self.assertEqual(response.status_code, 400)
        self.assertIn('specification_id', response.data['details'])

    def test_cook_type_from_other_category_is_rejected(self):
        fish = FoodCategory.objects.create(name='Fish')
        steamed = fish.cook_types.create(name='Steamed')

        response = self.client.post('/api/ingredients', {
            'food_type_id': str(self.food_type.id),
            'cook_type_id': str(steamed.id),
        }, format='json')

        self.assertEqual(response.status_code, 400)
        self.assertIn('cook_type_id', response.data['details'])

    def test_blank_quantity_label_is_rejected(self):
        response = self.client.post('/api/ingredients', {
            'food_type_id': str(self.food_type.id),
            'quantities': [{'quantity_value': '  ', 'price': 10}],
        }, format='json')

        self.assertEqual(response.status_code, 400)

    def test_update_replaces_quantities_keeping_matching_rows(self):
        ingredient = make_ingredient(self.food_type, quantities=[('100g', '200'), ('200g', '350')])
        kept_id = ingredient.quantities.get(quantity_value='200g').id

        response = self.client.put(f'/api/ingredients/{ingredient.id}', {
            'quantities': [
                {'quantity_value': '200g', 'price': 400},
                {'quantity_value': '500g', 'price': 900},
            ],
        }, format='json')

        self.assertEqual(response.status_code, 200)
        rows = response.data['data']['quantities']
        self.assertEqual([r['quantity_value'] for r in rows], ['200g', '500g'])
        self.assertEqual(rows[0]['id'], str(kept_id))
        self.assertEqual(rows[0]['price'], '400.00')

    def test_changing_food_type_clears_stale_specification(self):
        ingredient = make_ingredient(self.food_type, specification=self.specification)
        beef = FoodType.objects.create(category=self.category, name='Beef')

        response = self.client.put(f'/api/ingredients/{ingredient.id}',
                                   {'food_type_id': str(beef.id)}, format='json')

        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.data['data']['specification_id'])

    def test_delete_ingredient_used_by_menu_item_is_conflict(self):
        ingredient = make_ingredient(self.food_type)
        MenuItemIngredient.objects.create(
            menu_item=make_menu_item(self.location), ingredient=ingredient)

        response = self.client.delete(f'/api/ingredients/{ingredient.id}')

        self.assertEqual(response.status_code, 409)
        self.assertTrue(Ingredient.objects.filter(pk=ingredient.pk).exists())

    def test_by_category_groups_in_display_order(self):
        fish = FoodCategory.objects.create(name='Fish', display_order=-1)
        salmon = FoodType.objects.create(category=fish, name='Salmon')
        make_ingredient(salmon, name='Salmon fillet')
        make_ingredient(self.food_type, name='Chicken breast')

        response = self.client.get('/api/ingredients/by-category')

        self.assertEqual(response.status_code, 200)
        groups = response.data['data']
        self.assertEqual([g['category']['name'] for g in groups], ['Fish', 'Meat'])
        self.assertEqual([i['name'] for i in groups[0]['ingredients']], ['Salmon fillet'])

    def test_filter_by_active_flag(self):
        make_ingredient(self.food_type, name='Active')
        make_ingredient(self.food_type, name='Retired', is_active=False)

        response = self.client.get('/api/ingredients', {'is_active': 'false'})

        self.assertEqual([i['name'] for i in response.data['data']], ['Retired'])
