import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

from . import selection as cascade
from .exceptions import ValidationFailure
from .photos import is_image
from .selection import Selection
from .utils import strip_blank_keys, require, to_unique_by_id

logger = logging.getLogger(__name__)

PLACEHOLDER_NAME = 'Untitled item'
TAG_SEPARATOR = ','
OPTIONAL_FKS = ('food_category_id', 'food_type_id', 'specification_id', 'cook_type_id')

# draft selection field -> menu item payload field
SELECTION_FIELDS = {
    'category_id': 'food_category_id',
    'food_type_id': 'food_type_id',
    'specification_id': 'specification_id',
    'cook_type_id': 'cook_type_id',
}


def split_tags(value):
    tags = []
    for raw in (value or '').split(TAG_SEPARATOR):
        tag = raw.strip()
        if tag and tag not in tags:
            tags.append(tag)
    return tags


def add_to_set(values, value):
    """
    Append each separator-delimited part of ``value`` that is not blank and
    not already present. True if anything was added.
    """
    added = [tag for tag in split_tags(value) if tag not in values]
    values.extend(added)
    return bool(added)


@dataclass
class MenuItemDraft:
    """Editable form state of one menu item"""
    location_id: str
    id: Optional[str] = None
    name: str = PLACEHOLDER_NAME
    selection: Selection = field(default_factory=Selection)
    quantity: str = ''
    description: str = ''
    price: Decimal = Decimal('0')
    tags: List[str] = field(default_factory=list)
    prep_workout: List[str] = field(default_factory=list)
    status: str = 'draft'
    photos: List[str] = field(default_factory=list)
    ingredients: List[dict] = field(default_factory=list)

    @classmethod
    def from_record(cls, record):
        return cls(
            location_id=record['location_id'],
            id=record.get('id'),
            name=record.get('name') or '',
            selection=Selection.from_record(record, category_field='food_category_id'),
            quantity=record.get('quantity') or '',
            description=record.get('description') or '',
            price=Decimal(str(record.get('price') or 0)),
            tags=split_tags(record.get('tags')),
            prep_workout=split_tags(record.get('prep_workout')),
            status=record.get('status') or 'draft',
            photos=[photo['photo_url'] for photo in record.get('photos') or []],
            ingredients=[
                {
                    'ingredient_id': link['ingredient_id'],
                    'ingredient_quantity_id': link.get('ingredient_quantity_id'),
                    'custom_quantity': link.get('custom_quantity') or '',
                }
                for link in record.get('ingredients') or []
            ],
        )

    def select(self, name, value):
        self.selection = cascade.apply(self.selection, name, value)
        return self.selection

    def add_tag(self, tag):
        return add_to_set(self.tags, tag)

    def remove_tag(self, index):
        return self.tags.pop(index)

    def add_prep_step(self, step):
        return add_to_set(self.prep_workout, step)

    def remove_prep_step(self, index):
        return self.prep_workout.pop(index)

    def add_photos(self, blobs):
        """Append image blobs in order, skipping anything that is not an image"""
        accepted = [blob for blob in blobs if is_image(blob)]
        self.photos.extend(accepted)
        return len(accepted)

    def remove_photo(self, index):
        return self.photos.pop(index)

    def validate(self):
        if not (self.name or '').strip():
            raise ValidationFailure('Name is required', {'name': 'This field is required'})

    def to_payload(self):
        payload = {
            'location_id': self.location_id,
            'name': self.name.strip(),
            'quantity': self.quantity,
            'description': self.description,
            'price': str(self.price),
            'tags': TAG_SEPARATOR.join(self.tags),
            'prep_workout': TAG_SEPARATOR.join(self.prep_workout),
            'status': self.status,
            'photos': list(self.photos),
            'ingredients': [strip_blank_keys(row, ('ingredient_quantity_id',))
                            for row in self.ingredients],
        }
        for name, payload_field in SELECTION_FIELDS.items():
            payload[payload_field] = getattr(self.selection, name)
        return payload


class MenuComposer:
    """Creates, edits and publishes menu items for an explicit location"""

    def __init__(self, api):
        self.api = api

    def list(self, location_id, status=None, search=None, category_id=None):
        params = {'location_id': require(location_id, 'location_id'),
                  'status': status, 'search': search, 'category_id': category_id}
        return to_unique_by_id(self.api.get('menu', params=params))

    def get(self, menu_item_id):
        return MenuItemDraft.from_record(self.api.get(f'menu/{menu_item_id}'))

    def create(self, location_id, name=PLACEHOLDER_NAME):
        """Start a draft item with empty taxonomy fields"""
        draft = MenuItemDraft(location_id=require(location_id, 'location_id'), name=name)
        draft.validate()
        record = self.api.post('menu', {'location_id': location_id,
                                        'name': draft.name.strip(),
                                        'status': 'draft'})
        logger.info(f"Created menu item {record.get('id')} at location {location_id}")
        return MenuItemDraft.from_record(record)

    def update(self, menu_item_id, patch):
        if 'name' in patch and not (patch['name'] or '').strip():
            raise ValidationFailure('Name is required', {'name': 'This field is required'})
        record = self.api.put(f'menu/{menu_item_id}', strip_blank_keys(patch, OPTIONAL_FKS))
        logger.info(f"Updated menu item {menu_item_id}")
        return MenuItemDraft.from_record(record)

    def save(self, draft):
        """Validate locally, then create or update the whole draft"""
        draft.validate()
        require(draft.location_id, 'location_id')
        payload = draft.to_payload()
        if draft.id is None:
            record = self.api.post('menu', payload)
            logger.info(f"Created menu item {record.get('id')} at location {draft.location_id}")
            return MenuItemDraft.from_record(record)
        return self.update(draft.id, payload)

    def promote(self, draft):
        draft.status = 'active'
        return self.save(draft)

    def toggle_status(self, menu_item_id):
        return MenuItemDraft.from_record(self.api.patch(f'menu/{menu_item_id}/toggle-status'))

    def delete(self, menu_item_id):
        self.api.delete(f'menu/{menu_item_id}')
        logger.info(f"Deleted menu item {menu_item_id}")
