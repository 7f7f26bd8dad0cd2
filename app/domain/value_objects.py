"""
Value objects for the domain layer.

Value objects are immutable objects that represent descriptive aspects
of the domain with no conceptual identity.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Mapping, Optional, TYPE_CHECKING

from .exceptions import ConfigurationError

if TYPE_CHECKING:
    from .entities import Discount


class ServiceYear(IntEnum):
    """Years for which a price list is published."""

    Y2020 = 2020
    Y2021 = 2021
    Y2022 = 2022


class ServiceType(str, Enum):
    """The bookable services. Values are the names callers use."""

    PHOTOGRAPHY = "Photography"
    VIDEO_RECORDING = "VideoRecording"
    BLURAY_PACKAGE = "BlurayPackage"
    TWO_DAY_EVENT = "TwoDayEvent"
    WEDDING_SESSION = "WeddingSession"


class ActionType(str, Enum):
    """Kinds of change a user can make to a selection."""

    SELECT = "Select"
    DESELECT = "Deselect"


@dataclass(frozen=True)
class PriceList:
    """
    Base prices of every service for one service year.

    A price list must cover all services; an incomplete list is a
    configuration mistake and is rejected at construction time.
    """

    year: ServiceYear
    """The service year these prices are valid for"""

    prices: Mapping[ServiceType, int]
    """Base price per service"""

    def __post_init__(self) -> None:
        """Validate that every service is priced and freeze the prices."""
        object.__setattr__(self, "prices", MappingProxyType(dict(self.prices)))

        missing = [service.value for service in ServiceType if service not in self.prices]
        if missing:
            raise ConfigurationError(
                f"Price list for {int(self.year)} is missing prices for: {', '.join(missing)}"
            )

        negative = [service.value for service, price in self.prices.items() if price < 0]
        if negative:
            raise ConfigurationError(
                f"Price list for {int(self.year)} has negative prices for: {', '.join(negative)}"
            )

    def __hash__(self) -> int:
        """Hash based on year and prices."""
        return hash((self.year, tuple(sorted(self.prices.items()))))

    def price_of(self, service: ServiceType) -> int:
        return self.prices[service]


@dataclass(frozen=True)
class SelectionAction:
    """A single Select/Deselect request against the current selection."""

    type: str
    """'Select' or 'Deselect'; anything else is ignored by the selection rules"""

    service: ServiceType
    """The service the action targets"""


@dataclass(frozen=True)
class PriceQuote:
    """
    Result of pricing a selection.

    final_price is base_price minus the best discount and is deliberately
    not clamped, so it can be negative when a discount exceeds the base.
    """

    base_price: int = 0
    """Sum of catalog prices of the selected services"""

    final_price: int = 0
    """Price after the single best discount"""

    applied_discount: Optional["Discount"] = None
    """The discount that was granted, if any"""

    @property
    def savings(self) -> int:
        return self.base_price - self.final_price
