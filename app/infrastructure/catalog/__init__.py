# Catalog infrastructure package
"""
Catalog infrastructure adapters.

This package contains:
- StaticPriceCatalog: the published price lists, one per service year
- StaticDiscountRepository: the published bundle discount rules

Both are built once from in-code tables and are read-only afterwards.
"""

from .static_discount_repository import StaticDiscountRepository
from .static_price_catalog import StaticPriceCatalog

__all__ = [
    "StaticPriceCatalog",
    "StaticDiscountRepository",
]
