import logging
from datetime import datetime, timezone

from .utils import to_unique_by_id, require

logger = logging.getLogger(__name__)

# Records without a readable timestamp sort first and keep server order
EARLIEST = datetime.min.replace(tzinfo=timezone.utc)

# kind -> (endpoint, parent query parameter)
ENDPOINTS = {
    'categories': ('settings/categories', None),
    'types': ('settings/types', 'category_id'),
    'specifications': ('settings/specifications', 'food_type_id'),
    'cook_types': ('settings/cook-types', 'category_id'),
}


def parse_timestamp(value):
    """ISO 8601 timestamp as an aware datetime, or EARLIEST when unreadable"""
    if not value:
        return EARLIEST
    try:
        parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
    except (TypeError, ValueError):
        return EARLIEST
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class TaxonomyStore:
    """
    Categories, food types, specifications and cook types, with dependent
    listings cached per ``(kind, parent_id)`` until a mutation touches them.
    """

    def __init__(self, api):
        self.api = api
        self._cache = {}

    # ---- listings ----

    def _list(self, kind, parent_id=None):
        key = (kind, parent_id)
        if key not in self._cache:
            path, parent_param = ENDPOINTS[kind]
            params = {parent_param: parent_id} if parent_param and parent_id else None
            self._cache[key] = to_unique_by_id(self.api.get(path, params=params))
        return self._cache[key]

    def list_categories(self):
        """Categories by display_order, ties kept in creation then input order"""
        categories = self._list('categories')
        return sorted(categories, key=lambda c: (c.get('display_order') or 0,
                                                 parse_timestamp(c.get('created_at'))))

    def get_category(self, category_id):
        if category_id is None:
            return None
        for category in self.list_categories():
            if category['id'] == category_id:
                return category
        return None

    def list_types(self, category_id):
        return self._list('types', require(category_id, 'category_id'))

    def list_all_types(self):
        return self._list('types')

    def list_specifications(self, food_type_id):
        return self._list('specifications', require(food_type_id, 'food_type_id'))

    def list_cook_types(self, category_id):
        return self._list('cook_types', require(category_id, 'category_id'))

    # ---- cache ----

    def invalidate(self, kind, parent_id=None):
        self._cache.pop((kind, parent_id), None)

    def clear(self):
        self._cache.clear()

    def _cached_parent(self, kind, entity_id, parent_field):
        """Parent id of an entity as last seen in any cached listing"""
        for (cached_kind, _), rows in self._cache.items():
            if cached_kind != kind:
                continue
            for row in rows:
                if row.get('id') == entity_id:
                    return row.get(parent_field)
        return None

    def _invalidate_for(self, kind, entity_id=None, parents=()):
        self.invalidate(kind)
        for parent_id in parents:
            if parent_id:
                self.invalidate(kind, parent_id)
        if kind == 'categories' and entity_id:
            self.invalidate('types', entity_id)
            self.invalidate('cook_types', entity_id)
        elif kind == 'types' and entity_id:
            self.invalidate('specifications', entity_id)

    # ---- mutations ----

    def _create(self, kind, data, parent_field=None):
        if parent_field:
            require(data.get(parent_field), parent_field)
        path, _ = ENDPOINTS[kind]
        created = self.api.post(path, data)
        parents = [data.get(parent_field)] if parent_field else []
        self._invalidate_for(kind, created.get('id'), parents)
        logger.info(f"Created {kind} {created.get('id')}")
        return created

    def _update(self, kind, entity_id, data, parent_field=None):
        path, _ = ENDPOINTS[kind]
        parents = []
        if parent_field:
            parents = [self._cached_parent(kind, entity_id, parent_field),
                       data.get(parent_field)]
        updated = self.api.put(f'{path}/{entity_id}', data)
        if parent_field:
            parents.append(updated.get(parent_field))
        self._invalidate_for(kind, entity_id, parents)
        logger.info(f"Updated {kind} {entity_id}")
        return updated

    def _delete(self, kind, entity_id, parent_field=None):
        path, _ = ENDPOINTS[kind]
        parents = [self._cached_parent(kind, entity_id, parent_field)] if parent_field else []
        # A Conflict propagates before anything is invalidated
        self.api.delete(f'{path}/{entity_id}')
        self._invalidate_for(kind, entity_id, parents)
        logger.info(f"Deleted {kind} {entity_id}")

    def create_category(self, data):
        return self._create('categories', data)

    def update_category(self, category_id, data):
        return self._update('categories', category_id, data)

    def delete_category(self, category_id):
        self._delete('categories', category_id)

    def create_type(self, data):
        return self._create('types', data, 'category_id')

    def update_type(self, food_type_id, data):
        return self._update('types', food_type_id, data, 'category_id')

    def delete_type(self, food_type_id):
        self._delete('types', food_type_id, 'category_id')

    def create_specification(self, data):
        return self._create('specifications', data, 'food_type_id')

    def update_specification(self, specification_id, data):
        return self._update('specifications', specification_id, data, 'food_type_id')

    def delete_specification(self, specification_id):
        self._delete('specifications', specification_id, 'food_type_id')

    def create_cook_type(self, data):
        return self._create('cook_types', data, 'category_id')

    def update_cook_type(self, cook_type_id, data):
        return self._update('cook_types', cook_type_id, data, 'category_id')

    def delete_cook_type(self, cook_type_id):
        self._delete('cook_types', cook_type_id, 'category_id')
