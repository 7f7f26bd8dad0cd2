"""
Domain entities for the bundle pricing system.

A discount is a named pricing rule: the same rule name can be published
for several years, each with its own value, so a rule is identified by
its name together with the year it applies to.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable

from .value_objects import ServiceType, ServiceYear


@dataclass(frozen=True)
class Discount:
    """
    A bundle discount granted when all of its services are booked together.

    The selection may contain more services than the rule requires;
    supersets still qualify.
    """

    name: str
    """Rule name, shared by the yearly variants of the same bundle"""

    required_services: FrozenSet[ServiceType]
    """Services that must all be selected for the discount to apply"""

    for_year: ServiceYear
    """The only service year in which this discount is valid"""

    discount_value: int
    """Amount subtracted from the base price"""

    def __post_init__(self) -> None:
        """Validate discount data."""
        if not isinstance(self.required_services, frozenset):
            object.__setattr__(self, "required_services", frozenset(self.required_services))

        if not self.name or not self.name.strip():
            raise ValueError("Discount name cannot be empty")

        if not self.required_services:
            raise ValueError(f"Discount '{self.name}' must require at least one service")

        if self.discount_value < 0:
            raise ValueError(
                f"discount_value cannot be negative, got {self.discount_value}"
            )

    def can_apply(self, selected_services: Iterable[ServiceType], selected_year: ServiceYear) -> bool:
        """Check if the discount is valid for the year and all its services are selected."""
        if selected_year != self.for_year:
            return False
        return self.required_services.issubset(selected_services)

    @staticmethod
    def create(
        name: str,
        required_services: Iterable[ServiceType],
        for_year: ServiceYear,
        discount_value: int,
    ) -> "Discount":
        """Build a discount from any iterable of services."""
        return Discount(
            name=name,
            required_services=frozenset(required_services),
            for_year=for_year,
            discount_value=discount_value,
        )
