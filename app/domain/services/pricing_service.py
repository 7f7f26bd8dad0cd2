"""
Pricing service: base price of a selection and the best bundle discount.

Only one discount is ever granted per quote. When several bundles match
the selection, the one with the largest value wins; discounts are never
added together.
"""

from typing import Iterable, List, Optional
import logging

from ..entities import Discount
from ..exceptions import ConfigurationError, PriceNotFoundError
from ..ports import DiscountRepository, PriceCatalog
from ..value_objects import PriceQuote, ServiceType, ServiceYear

logger = logging.getLogger(__name__)


class PricingService:
    """
    Computes price quotes for a selection of services in a service year.

    The service is stateless between calls: identical inputs always give
    identical quotes.
    """

    def __init__(
        self,
        price_catalog: PriceCatalog,
        discount_repository: DiscountRepository,
    ) -> None:
        """
        Initialize the pricing service and check the discount rules against the catalog.

        Args:
            price_catalog: Source of base prices per year
            discount_repository: Source of bundle discount rules

        Raises:
            ConfigurationError: If a discount requires a service that has no
                price in the discount's year
        """
        self._catalog = price_catalog
        self._discounts = discount_repository
        self._check_discounts_are_priced()

    def _check_discounts_are_priced(self) -> None:
        for discount in self._discounts.get_all():
            for service in discount.required_services:
                try:
                    self._catalog.price_of(discount.for_year, service)
                except PriceNotFoundError as e:
                    raise ConfigurationError(
                        f"Discount '{discount.name}' ({int(discount.for_year)}) "
                        f"requires an unpriced service: {e}"
                    ) from e

    def calculate_price(
        self,
        selected_services: List[ServiceType],
        selected_year: ServiceYear,
    ) -> PriceQuote:
        """
        Price a selection, applying the single best applicable discount.

        An empty selection costs nothing and performs no catalog lookup.
        The final price is not clamped at zero.

        Args:
            selected_services: Services chosen by the user
            selected_year: Service year to price in

        Returns:
            PriceQuote with base price, final price and the applied discount

        Raises:
            PriceNotFoundError: If the year or one of the services is not priced
        """
        if not selected_services:
            return PriceQuote(base_price=0, final_price=0)

        base_price = sum(
            self._catalog.price_of(selected_year, service) for service in selected_services
        )

        best = self.best_discount(selected_services, selected_year)
        if best is None:
            return PriceQuote(base_price=base_price, final_price=base_price)

        final_price = base_price - best.discount_value
        if final_price < 0:
            logger.warning(
                f"Discount '{best.name}' ({best.discount_value}) exceeds base price "
                f"{base_price}; final price is {final_price}"
            )

        return PriceQuote(
            base_price=base_price,
            final_price=final_price,
            applied_discount=best,
        )

    def select_applicable(
        self,
        selected_services: Iterable[ServiceType],
        selected_year: ServiceYear,
    ) -> List[Discount]:
        """Get all discounts that apply to the selection, in declaration order."""
        selected = set(selected_services)
        return [
            discount
            for discount in self._discounts.get_all()
            if discount.can_apply(selected, selected_year)
        ]

    def best_discount(
        self,
        selected_services: Iterable[ServiceType],
        selected_year: ServiceYear,
    ) -> Optional[Discount]:
        """
        Get the applicable discount with the largest value.

        Ties go to the first declared rule. Returns None when nothing applies.
        """
        applicable = self.select_applicable(selected_services, selected_year)
        if not applicable:
            logger.debug(f"No discount applies for year {int(selected_year)}")
            return None

        best = max(applicable, key=lambda discount: discount.discount_value)
        logger.debug(
            f"{len(applicable)} discount(s) apply, granting '{best.name}' "
            f"worth {best.discount_value}"
        )
        return best
