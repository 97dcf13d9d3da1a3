from django.core.management.base import BaseCommand
from django.db import transaction

from accounts.models import CustomUser
from locations.models import Location
from taxonomy.models import FoodCategory, FoodType, Specification, CookType


class Command(BaseCommand):
    help = 'Create development data: a location, an admin user and a starter taxonomy'

    def add_arguments(self, parser):
        parser.add_argument('--email', default='admin@mealprep.local')
        parser.add_argument('--password', default='admin123')

    @transaction.atomic
    def handle(self, *args, **options):
        # Create a demo location
        location, created = Location.objects.get_or_create(
            name="Main Kitchen",
            defaults={
                'location_type': "Central kitchen",
                'address': "123 Main Street",
                'phone': "+94112223344",
            }
        )

        if created:
            self.stdout.write(self.style.SUCCESS('Created location "Main Kitchen"'))

        # Create admin user if not exists
        email = options['email'].lower()
        admin_user, created = CustomUser.objects.get_or_create(
            username=email,
            defaults={
                'email': email,
                'name': 'Admin',
                'role': 'admin',
                'location': location,
                'is_staff': True,
                'is_superuser': True
            }
        )

        if created:
            admin_user.set_password(options['password'])
            admin_user.save()
            self.stdout.write(self.style.SUCCESS(
                f"Created admin user {email} (password: {options['password']})"))

        meat, created = FoodCategory.objects.get_or_create(
            name="Meat",
            defaults={'display_order': 1, 'show_specification': True, 'show_cook_type': True}
        )
        if created:
            self.stdout.write(self.style.SUCCESS('Created food category "Meat"'))

        chicken, _ = FoodType.objects.get_or_create(category=meat, name="Chicken")
        for name in ("Breast", "Thigh"):
            Specification.objects.get_or_create(food_type=chicken, name=name)
        for name in ("Grilled", "Fried"):
            CookType.objects.get_or_create(category=meat, name=name)

        self.stdout.write(self.style.SUCCESS('Development data setup complete!'))
