"""
Port interfaces (protocols) for the domain layer.

Ports define the contracts between the domain and infrastructure layers.
The pricing services only see these protocols, so the price tables can be
provided by any adapter (static tables in production, fakes in tests).
"""

from typing import List, Protocol

from .entities import Discount
from .value_objects import PriceList, ServiceType, ServiceYear


class PriceCatalog(Protocol):
    """
    Port for looking up base prices by service year.

    Implementations hold one complete PriceList per supported year and
    never change it after construction.
    """

    def price_of(self, year: ServiceYear, service: ServiceType) -> int:
        """
        Get the base price of a service in a given year.

        Args:
            year: The service year
            service: The service to price

        Returns:
            The base price

        Raises:
            PriceNotFoundError: If the year, or the service in that year, is not priced
        """
        ...

    def get_price_list(self, year: ServiceYear) -> PriceList:
        """
        Get the full price list for a year.

        Raises:
            PriceNotFoundError: If no price list exists for the year
        """
        ...

    def supported_years(self) -> List[ServiceYear]:
        """Years that have a price list, in ascending order."""
        ...

    def is_ready(self) -> bool:
        """Check if at least one price list is available."""
        ...


class DiscountRepository(Protocol):
    """
    Port for the bundle discount rules.

    The order of get_all() is the declaration order of the rules; the
    pricing service relies on it to break ties between equal discounts.
    """

    def get_all(self) -> List[Discount]:
        """Get every discount rule, for all years."""
        ...

    def get_for_year(self, year: ServiceYear) -> List[Discount]:
        """Get the discount rules valid in a single year."""
        ...

    def count(self) -> int:
        """Get the total number of discount rules."""
        ...
