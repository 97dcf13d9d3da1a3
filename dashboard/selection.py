"""
Cascading category -> food type -> specification / cook type selection.

Everything here is a pure function of a ``Selection`` and, for the option
lists, a ``TaxonomyStore``. Changing an ancestor clears its descendants in
the same returned value.
"""
from dataclasses import dataclass, replace
from typing import Optional

from .utils import blank_to_none

FIELDS = ('category_id', 'food_type_id', 'specification_id', 'cook_type_id')

# field -> descendants cleared when it changes
DESCENDANTS = {
    'category_id': ('food_type_id', 'specification_id', 'cook_type_id'),
    'food_type_id': ('specification_id',),
    'specification_id': (),
    'cook_type_id': (),
}


@dataclass(frozen=True)
class Selection:
    category_id: Optional[str] = None
    food_type_id: Optional[str] = None
    specification_id: Optional[str] = None
    cook_type_id: Optional[str] = None

    @classmethod
    def from_record(cls, record, category_field='category_id'):
        return cls(
            category_id=blank_to_none(record.get(category_field)),
            food_type_id=blank_to_none(record.get('food_type_id')),
            specification_id=blank_to_none(record.get('specification_id')),
            cook_type_id=blank_to_none(record.get('cook_type_id')),
        )


def apply(selection, field, value):
    """Return the selection after setting ``field``, with descendants cleared"""
    if field not in DESCENDANTS:
        raise KeyError(field)
    value = blank_to_none(value)
    if getattr(selection, field) == value:
        return selection
    changes = {name: None for name in DESCENDANTS[field]}
    changes[field] = value
    return replace(selection, **changes)


def set_category(selection, category_id):
    return apply(selection, 'category_id', category_id)


def set_food_type(selection, food_type_id):
    return apply(selection, 'food_type_id', food_type_id)


def set_specification(selection, specification_id):
    return apply(selection, 'specification_id', specification_id)


def set_cook_type(selection, cook_type_id):
    return apply(selection, 'cook_type_id', cook_type_id)


def options_for_food_type(selection, store):
    if selection.category_id is None:
        return []
    return [t for t in store.list_types(selection.category_id)
            if t.get('category_id') == selection.category_id]


def options_for_specification(selection, store):
    if selection.food_type_id is None:
        return []
    category = store.get_category(selection.category_id)
    if category is None or not category.get('show_specification'):
        return []
    return [s for s in store.list_specifications(selection.food_type_id)
            if s.get('food_type_id') == selection.food_type_id]


def options_for_cook_type(selection, store):
    if selection.category_id is None:
        return []
    category = store.get_category(selection.category_id)
    if category is None or not category.get('show_cook_type'):
        return []
    return [c for c in store.list_cook_types(selection.category_id)
            if c.get('category_id') == selection.category_id]
