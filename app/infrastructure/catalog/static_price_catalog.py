"""
Price catalog backed by the in-code price tables.

Implements the PriceCatalog port. The default tables hold the published
base prices for every supported service year.
"""

import logging
from typing import Dict, Iterable, List, Optional

from app.domain.exceptions import ConfigurationError, PriceNotFoundError
from app.domain.value_objects import PriceList, ServiceType, ServiceYear

logger = logging.getLogger(__name__)


DEFAULT_PRICE_LISTS: List[PriceList] = [
    PriceList(
        year=ServiceYear.Y2020,
        prices={
            ServiceType.PHOTOGRAPHY: 1700,
            ServiceType.VIDEO_RECORDING: 1700,
            ServiceType.BLURAY_PACKAGE: 300,
            ServiceType.TWO_DAY_EVENT: 400,
            ServiceType.WEDDING_SESSION: 600,
        },
    ),
    PriceList(
        year=ServiceYear.Y2021,
        prices={
            ServiceType.PHOTOGRAPHY: 1800,
            ServiceType.VIDEO_RECORDING: 1800,
            ServiceType.BLURAY_PACKAGE: 300,
            ServiceType.TWO_DAY_EVENT: 400,
            ServiceType.WEDDING_SESSION: 600,
        },
    ),
    PriceList(
        year=ServiceYear.Y2022,
        prices={
            ServiceType.PHOTOGRAPHY: 1900,
            ServiceType.VIDEO_RECORDING: 1900,
            ServiceType.BLURAY_PACKAGE: 300,
            ServiceType.TWO_DAY_EVENT: 400,
            ServiceType.WEDDING_SESSION: 600,
        },
    ),
]


class StaticPriceCatalog:
    """
    Read-only PriceCatalog over a fixed set of price lists.

    Example:
        >>> catalog = StaticPriceCatalog()
        >>> catalog.price_of(ServiceYear.Y2021, ServiceType.PHOTOGRAPHY)
        1800
    """

    def __init__(self, price_lists: Optional[Iterable[PriceList]] = None) -> None:
        """
        Initialize the catalog.

        Args:
            price_lists: Price lists to serve. Defaults to the published tables.

        Raises:
            ConfigurationError: If two price lists are given for the same year
        """
        self._price_lists: Dict[ServiceYear, PriceList] = {}
        for price_list in (DEFAULT_PRICE_LISTS if price_lists is None else price_lists):
            if price_list.year in self._price_lists:
                raise ConfigurationError(
                    f"Duplicate price list for year {int(price_list.year)}"
                )
            self._price_lists[price_list.year] = price_list

        logger.debug(f"Price catalog loaded for years: {[int(y) for y in self.supported_years()]}")

    def get_price_list(self, year: ServiceYear) -> PriceList:
        price_list = self._price_lists.get(year)
        if price_list is None:
            raise PriceNotFoundError(f"No price list for year {year!r}")
        return price_list

    def price_of(self, year: ServiceYear, service: ServiceType) -> int:
        price_list = self.get_price_list(year)
        try:
            return price_list.price_of(service)
        except KeyError:
            raise PriceNotFoundError(
                f"No price for service {service!r} in year {int(year)}"
            ) from None

    def supported_years(self) -> List[ServiceYear]:
        return sorted(self._price_lists)

    def is_ready(self) -> bool:
        """Check if at least one price list is available."""
        return bool(self._price_lists)
