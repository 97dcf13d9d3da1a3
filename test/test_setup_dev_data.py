from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from accounts.models import CustomUser
from taxonomy.models import FoodCategory, Specification, CookType


class SetupDevDataCommandTest(TestCase):
    def test_seeds_once(self):
        call_command('setup_dev_data', stdout=StringIO())
        call_command('setup_dev_data', stdout=StringIO())

        admin = CustomUser.objects.get(email='admin@mealprep.local')
        self.assertEqual(admin.effective_role, 'admin')
        self.assertTrue(admin.check_password('admin123'))
        self.assertEqual(FoodCategory.objects.count(), 1)
        self.assertEqual(sorted(Specification.objects.values_list('name', flat=True)),
                         ['Breast', 'Thigh'])
        self.assertEqual(CookType.objects.count(), 2)
