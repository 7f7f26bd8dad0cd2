"""
Domain services package.

Services orchestrate domain logic that doesn't naturally belong to a single
entity. They depend only on domain entities, value objects, and port
protocols (never on concrete implementations).
"""

from .pricing_service import PricingService
from .selection_service import (
    dependent_service_to_remove,
    deselect_service,
    is_selection_blocked,
    select_service,
    update_selected_services,
)

__all__ = [
    "PricingService",
    "update_selected_services",
    "select_service",
    "deselect_service",
    "is_selection_blocked",
    "dependent_service_to_remove",
]
