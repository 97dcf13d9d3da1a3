# menu/business_logic.py
import logging

from .models import MenuItemPhoto, MenuItemIngredient

logger = logging.getLogger(__name__)

TAG_SEPARATOR = ','


class MenuBusinessLogic:
    @staticmethod
    def split_tags(value):
        """Comma-joined string -> de-duplicated tags in first-seen order"""
        tags = []
        for raw in (value or '').split(TAG_SEPARATOR):
            tag = raw.strip()
            if tag and tag not in tags:
                tags.append(tag)
        return tags

    @staticmethod
    def join_tags(value):
        """Normalize a tag string or list to the stored comma-joined form"""
        if isinstance(value, (list, tuple)):
            value = TAG_SEPARATOR.join(str(v) for v in value)
        return TAG_SEPARATOR.join(MenuBusinessLogic.split_tags(value))

    @staticmethod
    def taxonomy_path_errors(food_category, food_type, specification, cook_type):
        """Field errors for selections that do not hang off their parent"""
        errors = {}
        if food_type is not None:
            if food_category is None:
                errors['food_category_id'] = 'A food category is required when a food type is set.'
            elif food_type.category_id != food_category.pk:
                errors['food_type_id'] = 'Food type does not belong to the selected category.'
        if specification is not None:
            if food_type is None or specification.food_type_id != food_type.pk:
                errors['specification_id'] = (
                    'Specification does not belong to the selected food type.')
        if cook_type is not None:
            if food_category is None or cook_type.category_id != food_category.pk:
                errors['cook_type_id'] = 'Cook type does not belong to the selected category.'
        return errors

    @staticmethod
    def replace_photos(menu_item, photo_urls):
        menu_item.photos.all().delete()
        MenuItemPhoto.objects.bulk_create([
            MenuItemPhoto(menu_item=menu_item, photo_url=url, display_order=index)
            for index, url in enumerate(photo_urls)
        ])
        logger.info(f"Menu item {menu_item.pk} now has {len(photo_urls)} photos")

    @staticmethod
    def replace_ingredients(menu_item, rows):
        menu_item.ingredients.all().delete()
        for row in rows:
            MenuItemIngredient.objects.create(
                menu_item=menu_item,
                ingredient=row['ingredient'],
                ingredient_quantity=row.get('ingredient_quantity'),
                custom_quantity=row.get('custom_quantity') or '',
            )
        logger.info(f"Menu item {menu_item.pk} now uses {len(rows)} ingredients")

    @staticmethod
    def toggle_status(menu_item):
        menu_item.status = 'draft' if menu_item.status == 'active' else 'active'
        menu_item.save(update_fields=['status', 'updated_at'])
        logger.info(f"Menu item {menu_item.pk} is now {menu_item.status}")
        return menu_item
