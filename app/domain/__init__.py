"""
Domain layer - Core business logic and entities.

This layer contains the price catalog model, the bundle discount rules and
the ports (interfaces) that the infrastructure layer must implement.

It has NO dependencies on external frameworks.
"""

from .entities import Discount
from .exceptions import ConfigurationError, PriceNotFoundError
from .value_objects import (
    ActionType,
    PriceList,
    PriceQuote,
    SelectionAction,
    ServiceType,
    ServiceYear,
)

__all__ = [
    # Entities
    "Discount",
    # Value Objects
    "ServiceYear",
    "ServiceType",
    "ActionType",
    "PriceList",
    "PriceQuote",
    "SelectionAction",
    # Errors
    "ConfigurationError",
    "PriceNotFoundError",
]
