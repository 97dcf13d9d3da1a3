import logging

from .utils import require, to_unique_by_id

logger = logging.getLogger(__name__)


class ResourceService:
    """CRUD over one backend collection"""
    path = None
    # Listing refuses to run without this parameter when set
    scope_param = None

    def __init__(self, api):
        self.api = api

    def list(self, scope=None, **filters):
        params = dict(filters)
        if self.scope_param:
            params[self.scope_param] = require(scope, self.scope_param)
        return to_unique_by_id(self.api.get(self.path, params=params))

    def get(self, entity_id):
        return self.api.get(f'{self.path}/{entity_id}')

    def create(self, data):
        created = self.api.post(self.path, data)
        logger.info(f"Created {self.path} {created.get('id')}")
        return created

    def update(self, entity_id, data):
        updated = self.api.put(f'{self.path}/{entity_id}', data)
        logger.info(f"Updated {self.path} {entity_id}")
        return updated

    def delete(self, entity_id):
        self.api.delete(f'{self.path}/{entity_id}')
        logger.info(f"Deleted {self.path} {entity_id}")


class LocationService(ResourceService):
    path = 'locations'

    def toggle_status(self, location_id):
        return self.api.post(f'locations/{location_id}/toggle-status')


class CustomerService(ResourceService):
    path = 'customers'
    scope_param = 'location_id'

    def create(self, data):
        require(data.get('location_id'), 'location_id')
        return super().create(data)


class OrderService(ResourceService):
    """Orders; totals are always computed by the backend"""
    path = 'orders'
    scope_param = 'location_id'

    def create(self, data):
        require(data.get('location_id'), 'location_id')
        return super().create(data)

    def stats(self, location_id, date=None):
        params = {'location_id': require(location_id, 'location_id'), 'date': date}
        return self.api.get('orders/stats', params=params)

    def update_status(self, order_id, status):
        updated = self.api.patch(f'orders/{order_id}/status', {'status': status})
        logger.info(f"Order {order_id} moved to {status}")
        return updated


class UserService(ResourceService):
    path = 'users'
    scope_param = 'location_id'

    def me(self):
        return self.api.get('users/me')
