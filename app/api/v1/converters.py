"""
Converters between domain entities/value objects and API schemas.

This module centralizes all conversion logic between the domain layer
and the API layer, maintaining clean separation of concerns.
"""

from typing import List

from app.domain import entities as domain
from app.domain import value_objects as domain_vo
from app.api.v1 import schemas as api


def domain_discount_to_api(discount: domain.Discount) -> api.Discount:
    """
    Convert a domain Discount entity to an API Discount model.

    Required services are listed in catalog order so responses are stable.

    Args:
        discount: Domain Discount entity

    Returns:
        API Discount model
    """
    return api.Discount(
        name=discount.name,
        required_services=[
            service for service in domain_vo.ServiceType
            if service in discount.required_services
        ],
        for_year=discount.for_year,
        discount_value=discount.discount_value,
    )


def domain_quote_to_api(quote: domain_vo.PriceQuote) -> api.PriceResponse:
    """
    Convert a domain PriceQuote value object to an API PriceResponse model.

    Args:
        quote: Domain PriceQuote value object

    Returns:
        API PriceResponse model
    """
    applied = None
    if quote.applied_discount is not None:
        applied = domain_discount_to_api(quote.applied_discount)

    return api.PriceResponse(
        base_price=quote.base_price,
        final_price=quote.final_price,
        savings=quote.savings,
        applied_discount=applied,
    )


def api_action_to_domain(action: api.SelectionActionBody) -> domain_vo.SelectionAction:
    return domain_vo.SelectionAction(type=action.type, service=action.service)


def domain_price_list_to_api(price_list: domain_vo.PriceList) -> api.PriceListResponse:
    return api.PriceListResponse(year=price_list.year, prices=dict(price_list.prices))


def domain_discounts_to_api(discounts: List[domain.Discount]) -> api.DiscountListResponse:
    return api.DiscountListResponse(
        discounts=[domain_discount_to_api(discount) for discount in discounts],
        total=len(discounts),
    )
