from .api import ApiClient
from .exceptions import (
    DashboardError, ValidationFailure, SubmissionFailure, Conflict, Invalid, NotFound
)
from .ingredients import IngredientCatalog, IngredientDraft
from .menu import MenuComposer, MenuItemDraft
from .quantities import QuantityOption, QuantitySchedule
from .selection import Selection
from .services import LocationService, CustomerService, OrderService, UserService
from .taxonomy import TaxonomyStore

__all__ = [
    'ApiClient', 'DashboardError', 'ValidationFailure', 'SubmissionFailure',
    'Conflict', 'Invalid', 'NotFound', 'IngredientCatalog', 'IngredientDraft',
    'MenuComposer', 'MenuItemDraft', 'QuantityOption', 'QuantitySchedule', 'Selection',
    'LocationService', 'CustomerService', 'OrderService', 'UserService',
    'TaxonomyStore',
]
