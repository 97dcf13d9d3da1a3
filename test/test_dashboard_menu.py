import os
import tempfile
import unittest
from unittest import mock

from dashboard.api import ApiClient
from dashboard.exceptions import Invalid, ValidationFailure
from dashboard.menu import MenuComposer, MenuItemDraft, PLACEHOLDER_NAME
from dashboard.photos import encode_photos
from dashboard.services import CustomerService, OrderService, UserService
from dashboard.utils import to_unique_by_id

PNG = 'data:image/png;base64,iVBORw0KGgo='

RECORD = {
    'id': 'm1',
    'location_id': 'loc1',
    'name': 'Chicken Bowl',
    'food_category_id': 'meat',
    'food_type_id': 'chicken',
    'specification_id': 'breast',
    'cook_type_id': 'grilled',
    'price': '1500.00',
    'tags': 'spicy,keto',
    'prep_workout': '',
    'status': 'draft',
    'photos': [{'photo_url': PNG}],
    'ingredients': [{'ingredient_id': 'i1', 'ingredient_quantity_id': None,
                     'custom_quantity': ''}],
}


class MenuItemDraftTest(unittest.TestCase):
    def setUp(self):
        self.draft = MenuItemDraft.from_record(RECORD)

    def test_blank_or_duplicate_tags_are_ignored(self):
        for tag in ['', '   ', 'spicy']:
            self.assertFalse(self.draft.add_tag(tag))
        self.assertEqual(self.draft.tags, ['spicy', 'keto'])

        self.assertTrue(self.draft.add_tag(' Spicy '))
        self.assertEqual(self.draft.tags, ['spicy', 'keto', 'Spicy'])

    def test_tag_with_separator_survives_reload(self):
        self.assertTrue(self.draft.add_tag('spicy,vegan'))
        self.assertFalse(self.draft.add_tag('keto, ,vegan'))
        self.assertEqual(self.draft.tags, ['spicy', 'keto', 'vegan'])

        reloaded = MenuItemDraft.from_record(dict(RECORD, tags=self.draft.to_payload()['tags']))

        self.assertEqual(reloaded.tags, self.draft.tags)

    def test_remove_tag_by_position(self):
        self.draft.remove_tag(0)

        self.assertEqual(self.draft.tags, ['keto'])

    def test_add_photos_skips_non_images(self):
        added = self.draft.add_photos(['data:text/plain;base64,aGk=', PNG, 'not-a-photo'])

        self.assertEqual(added, 1)
        self.assertEqual(self.draft.photos, [PNG, PNG])
        self.draft.remove_photo(0)
        self.assertEqual(len(self.draft.photos), 1)

    def test_category_change_clears_selection_in_one_step(self):
        self.draft.select('category_id', 'fish')

        payload = self.draft.to_payload()
        self.assertEqual(payload['food_category_id'], 'fish')
        self.assertIsNone(payload['food_type_id'])
        self.assertIsNone(payload['specification_id'])
        self.assertIsNone(payload['cook_type_id'])

    def test_payload_joins_tags(self):
        self.draft.add_prep_step('grill')
        self.draft.add_prep_step('grill')

        payload = self.draft.to_payload()
        self.assertEqual(payload['tags'], 'spicy,keto')
        self.assertEqual(payload['prep_workout'], 'grill')
        self.assertEqual(payload['ingredients'], [
            {'ingredient_id': 'i1', 'ingredient_quantity_id': None, 'custom_quantity': ''}])


class MenuComposerTest(unittest.TestCase):
    def setUp(self):
        self.api = mock.Mock(spec=ApiClient)
        self.composer = MenuComposer(self.api)

    def test_blank_name_rejected_without_request(self):
        with self.assertRaises(ValidationFailure):
            self.composer.create('loc1', name='')
        with self.assertRaises(ValidationFailure):
            self.composer.save(MenuItemDraft(location_id='loc1', name='  '))
        self.api.post.assert_not_called()

    def test_create_uses_placeholder_name(self):
        self.api.post.return_value = dict(RECORD, name=PLACEHOLDER_NAME,
                                          food_category_id=None, food_type_id=None,
                                          specification_id=None, cook_type_id=None)

        draft = self.composer.create('loc1')

        self.api.post.assert_called_once_with(
            'menu', {'location_id': 'loc1', 'name': PLACEHOLDER_NAME, 'status': 'draft'})
        self.assertEqual(draft.name, PLACEHOLDER_NAME)
        self.assertIsNone(draft.selection.category_id)

    def test_create_needs_location(self):
        with self.assertRaises(Invalid):
            self.composer.create(None)
        with self.assertRaises(Invalid):
            self.composer.list('')
        self.api.post.assert_not_called()
        self.api.get.assert_not_called()

    def test_update_never_sends_empty_string_keys(self):
        self.api.put.return_value = RECORD

        self.composer.update('m1', {'food_category_id': '', 'food_type_id': '',
                                    'specification_id': None, 'name': 'Bowl'})

        self.api.put.assert_called_once_with(
            'menu/m1', {'specification_id': None, 'name': 'Bowl'})

    def test_promote_sends_active_status(self):
        self.api.put.return_value = dict(RECORD, status='active')
        draft = MenuItemDraft.from_record(RECORD)

        promoted = self.composer.promote(draft)

        self.assertEqual(self.api.put.call_args[0][1]['status'], 'active')
        self.assertEqual(promoted.status, 'active')

    def test_list_deduplicates(self):
        self.api.get.return_value = [RECORD, RECORD]

        self.assertEqual(len(self.composer.list('loc1')), 1)


class ServicesTest(unittest.TestCase):
    def setUp(self):
        self.api = mock.Mock(spec=ApiClient)

    def test_scoped_listings_need_location(self):
        for service in (CustomerService(self.api), OrderService(self.api), UserService(self.api)):
            with self.assertRaises(Invalid):
                service.list(None)
        self.api.get.assert_not_called()

    def test_order_calls(self):
        orders = OrderService(self.api)
        self.api.get.return_value = []

        orders.list('loc1', status='received')
        orders.stats('loc1', date='2024-05-01')
        orders.update_status('o1', 'delivered')

        self.assertEqual(self.api.get.call_args_list, [
            mock.call('orders', params={'status': 'received', 'location_id': 'loc1'}),
            mock.call('orders/stats', params={'location_id': 'loc1', 'date': '2024-05-01'}),
        ])
        self.api.patch.assert_called_once_with('orders/o1/status', {'status': 'delivered'})

    def test_order_create_needs_location(self):
        with self.assertRaises(Invalid):
            OrderService(self.api).create({'items': []})
        self.api.post.assert_not_called()


class UtilsTest(unittest.TestCase):
    def test_to_unique_by_id_keeps_first_occurrence(self):
        items = [{'id': 1, 'v': 'a'}, {'id': 2}, {'id': 1, 'v': 'b'}, {'name': 'no id'}]

        self.assertEqual(to_unique_by_id(items), [{'id': 1, 'v': 'a'}, {'id': 2}, {'name': 'no id'}])
        self.assertEqual(to_unique_by_id(None), [])


class EncodePhotosTest(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def write(self, name, content):
        path = os.path.join(self.tmp.name, name)
        with open(path, 'wb') as handle:
            handle.write(content)
        return path

    def test_batch_keeps_order(self):
        first = self.write('a.png', b'\x89PNG')
        second = self.write('b.jpg', b'\xff\xd8')

        urls = encode_photos([first, second])

        self.assertEqual(urls, ['data:image/png;base64,iVBORw==', 'data:image/jpeg;base64,/9g='])

    def test_one_failure_fails_batch(self):
        good = self.write('a.png', b'\x89PNG')

        with self.assertRaises(ValidationFailure) as ctx:
            encode_photos([good, os.path.join(self.tmp.name, 'missing.png')])

        self.assertEqual(len(ctx.exception.errors['photos']), 1)

    def test_empty_batch(self):
        self.assertEqual(encode_photos([]), [])
