"""
Singleton wiring of the pricing components.

This module provides the shared catalog, discount rules and services for
the library entry points and for FastAPI's Depends() system.

Note: We use module-level singletons instead of @lru_cache with Depends()
parameters, which is an antipattern that can cause unexpected behavior.
"""

from typing import Optional

from app.domain.ports import DiscountRepository, PriceCatalog
from app.domain.services import PricingService
from app.infrastructure.catalog import StaticDiscountRepository, StaticPriceCatalog

# Module-level singletons (initialized lazily)
_price_catalog: Optional[PriceCatalog] = None
_discount_repository: Optional[DiscountRepository] = None
_pricing_service: Optional[PricingService] = None


def get_price_catalog() -> PriceCatalog:
    """Provide a singleton instance of the price catalog."""
    global _price_catalog
    if _price_catalog is None:
        _price_catalog = StaticPriceCatalog()
    return _price_catalog


def get_discount_repository() -> DiscountRepository:
    """Provide a singleton instance of the discount rules."""
    global _discount_repository
    if _discount_repository is None:
        _discount_repository = StaticDiscountRepository()
    return _discount_repository


def get_pricing_service() -> PricingService:
    """Provide the Pricing Service with all dependencies wired."""
    global _pricing_service
    if _pricing_service is None:
        _pricing_service = PricingService(
            price_catalog=get_price_catalog(),
            discount_repository=get_discount_repository(),
        )
    return _pricing_service


def reset_dependencies() -> None:
    """
    Reset all singletons. Useful for testing.

    This allows tests to inject other tables by resetting the module
    state between test cases.
    """
    global _price_catalog, _discount_repository, _pricing_service

    _price_catalog = None
    _discount_repository = None
    _pricing_service = None
