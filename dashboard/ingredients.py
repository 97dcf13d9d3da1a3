"""
Ingredient catalog.

Ingredient records from the backend are not always denormalized the same
way, so category membership is decided by an ordered chain of match
strategies. The chain is a compatibility shim: once every payload carries a
resolvable ``food_type_id`` only the first strategy is needed.
"""
import logging
from dataclasses import dataclass, field
from typing import Optional

from . import selection as cascade
from .exceptions import ValidationFailure
from .quantities import QuantitySchedule
from .selection import Selection
from .utils import to_unique_by_id, strip_blank_keys

logger = logging.getLogger(__name__)

OPTIONAL_FKS = ('specification_id', 'cook_type_id')


def match_by_food_type(ingredient, category, food_types):
    food_type = food_types.get(ingredient.get('food_type_id'))
    if food_type is None:
        return None
    return food_type.get('category_id') == category['id']


def match_by_category_name(ingredient, category, food_types):
    name = ingredient.get('category_name')
    if not name:
        return None
    return name.strip().lower() == (category.get('name') or '').strip().lower()


def match_by_category_id(ingredient, category, food_types):
    category_id = ingredient.get('category_id')
    if not category_id:
        return None
    return category_id == category['id']


# Tried in order; the first strategy that applies decides
MATCH_STRATEGIES = (match_by_food_type, match_by_category_name, match_by_category_id)


def belongs_to_category(ingredient, category, food_types, strategies=MATCH_STRATEGIES):
    for strategy in strategies:
        decision = strategy(ingredient, category, food_types)
        if decision is not None:
            return decision
    return False


@dataclass
class IngredientDraft:
    """
    Editable form state of one ingredient. The category is only form state
    used to narrow the food types on offer; the backend stores the food type.
    """
    id: Optional[str] = None
    name: str = ''
    description: str = ''
    is_active: bool = True
    selection: Selection = field(default_factory=Selection)
    schedule: QuantitySchedule = field(default_factory=QuantitySchedule.default)

    @classmethod
    def from_record(cls, record):
        return cls(
            id=record.get('id'),
            name=record.get('name') or '',
            description=record.get('description') or '',
            is_active=bool(record.get('is_active', True)),
            selection=Selection.from_record(record),
            schedule=QuantitySchedule.from_records(record.get('quantities')),
        )

    def select(self, name, value):
        self.selection = cascade.apply(self.selection, name, value)
        return self.selection

    def fields(self):
        return {
            'name': self.name.strip(),
            'description': self.description,
            'is_active': self.is_active,
            'food_type_id': self.selection.food_type_id,
            'specification_id': self.selection.specification_id,
            'cook_type_id': self.selection.cook_type_id,
        }


class IngredientCatalog:
    def __init__(self, api, taxonomy):
        self.api = api
        self.taxonomy = taxonomy

    def new_schedule(self):
        return QuantitySchedule.default()

    def list(self, category_id=None, food_type_id=None, is_active=None):
        params = {'category_id': category_id, 'food_type_id': food_type_id,
                  'is_active': is_active}
        return to_unique_by_id(self.api.get('ingredients', params=params))

    def list_by_category(self, category_id, ingredients=None):
        category = self.taxonomy.get_category(category_id)
        if category is None:
            return []
        if ingredients is None:
            ingredients = self.list()
        food_types = {t['id']: t for t in self.taxonomy.list_all_types()}
        return [ingredient for ingredient in ingredients
                if belongs_to_category(ingredient, category, food_types)]

    def get(self, ingredient_id):
        return self.api.get(f'ingredients/{ingredient_id}')

    def build_payload(self, data, schedule=None):
        payload = strip_blank_keys(data, OPTIONAL_FKS)
        if schedule is not None:
            quantities = schedule.to_payload()
            if not quantities:
                raise ValidationFailure(
                    'Select at least one available quantity',
                    {'quantities': 'No available quantity with a label'})
            payload['quantities'] = quantities
        return payload

    def create(self, data, schedule=None):
        """Create from a draft, or from field data plus its quantity schedule"""
        if isinstance(data, IngredientDraft):
            data, schedule = data.fields(), data.schedule
        if not data.get('food_type_id'):
            raise ValidationFailure('Food type is required',
                                    {'food_type_id': 'This field is required'})
        if schedule is None:
            schedule = QuantitySchedule()
        created = self.api.post('ingredients', self.build_payload(data, schedule))
        logger.info(f"Created ingredient {created.get('id')}")
        return created

    def update(self, ingredient_id, data, schedule=None):
        if isinstance(data, IngredientDraft):
            data, schedule = data.fields(), data.schedule
        if 'food_type_id' in data and not data['food_type_id']:
            raise ValidationFailure('Food type is required',
                                    {'food_type_id': 'This field is required'})
        updated = self.api.put(f'ingredients/{ingredient_id}',
                               self.build_payload(data, schedule))
        logger.info(f"Updated ingredient {ingredient_id}")
        return updated

    def new_draft(self):
        return IngredientDraft()

    def get_draft(self, ingredient_id):
        return IngredientDraft.from_record(self.get(ingredient_id))

    def save(self, draft):
        if draft.id is None:
            return IngredientDraft.from_record(self.create(draft))
        return IngredientDraft.from_record(self.update(draft.id, draft))

    def delete(self, ingredient_id):
        self.api.delete(f'ingredients/{ingredient_id}')
        logger.info(f"Deleted ingredient {ingredient_id}")
