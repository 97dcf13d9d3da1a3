# ingredients/business_logic.py
import logging

from taxonomy.models import FoodCategory

from .models import Ingredient, IngredientQuantity

logger = logging.getLogger(__name__)


class IngredientBusinessLogic:
    @staticmethod
    def taxonomy_path_errors(food_type, specification=None, cook_type=None):
        """Return field errors for a specification/cook type outside the food type's branch"""
        errors = {}
        if specification is not None and specification.food_type_id != food_type.pk:
            errors['specification_id'] = (
                'Specification does not belong to the selected food type.')
        if cook_type is not None and cook_type.category_id != food_type.category_id:
            errors['cook_type_id'] = (
                'Cook type does not belong to the food type\'s category.')
        return errors

    @staticmethod
    def sync_quantities(ingredient, rows):
        """
        Replace an ingredient's schedule with ``rows``.

        Rows are matched to existing quantities by label so that ids held by
        menu item associations survive an edit; labels no longer present are
        removed. Row order becomes the schedule order.
        """
        existing = {q.quantity_value: q for q in ingredient.quantities.all()}
        kept_ids = []

        for position, row in enumerate(rows):
            label = row['quantity_value']
            quantity = existing.get(label)
            if quantity is None:
                quantity = IngredientQuantity(ingredient=ingredient, quantity_value=label)
            quantity.quantity_grams = row.get('quantity_grams')
            quantity.price = row.get('price', 0)
            quantity.is_available = row.get('is_available', True)
            quantity.position = position
            quantity.save()
            kept_ids.append(quantity.pk)

        removed = ingredient.quantities.exclude(pk__in=kept_ids)
        removed_count = removed.count()
        if removed_count:
            removed.delete()

        logger.info(
            f"Synced {len(kept_ids)} quantities for ingredient {ingredient.pk} "
            f"({removed_count} removed)")
        return ingredient.quantities.all()

    @staticmethod
    def group_by_category(queryset=None):
        """Ingredients grouped under their food category, in category display order"""
        if queryset is None:
            queryset = Ingredient.objects.all()
        queryset = queryset.select_related(
            'food_type__category', 'specification', 'cook_type'
        ).prefetch_related('quantities')

        groups = []
        for category in FoodCategory.objects.order_by('display_order', 'created_at', 'id'):
            groups.append({
                'category': category,
                'ingredients': [
                    ing for ing in queryset if ing.food_type.category_id == category.pk
                ],
            })
        return groups
