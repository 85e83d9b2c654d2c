"""Services for catalog business logic."""

from .exceptions import (
    ServiceNotFoundError,
    ServiceOwnershipError,
    InvalidServiceDataError,
    InvalidPromotionError,
)
from .service_management import (
    get_owned_service,
    create_service,
    update_service,
    delete_service,
    toggle_service_status,
    get_service,
    get_provider_services,
)
from .service_search import search_services
from .promotions import (
    promotion_cost,
    promote_service,
    expire_lapsed_promotions,
    recompute_featured_priority,
)
from .ranking import get_featured_slides, get_trending_services

__all__ = [
    # Exceptions
    'ServiceNotFoundError',
    'ServiceOwnershipError',
    'InvalidServiceDataError',
    'InvalidPromotionError',
    # Service management
    'get_owned_service',
    'create_service',
    'update_service',
    'delete_service',
    'toggle_service_status',
    'get_service',
    'get_provider_services',
    'search_services',
    # Promotions & ranking
    'promotion_cost',
    'promote_service',
    'expire_lapsed_promotions',
    'recompute_featured_priority',
    'get_featured_slides',
    'get_trending_services',
]
