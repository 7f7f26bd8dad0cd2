"""
API endpoints for bundle pricing.

This module defines the FastAPI routes for pricing a selection, applying
selection changes and browsing the catalog. It handles HTTP concerns and
delegates to domain services.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.domain.exceptions import ConfigurationError, PriceNotFoundError
from app.domain.ports import DiscountRepository, PriceCatalog
from app.domain.services import PricingService, update_selected_services
from app.api.v1 import schemas as api
from app.api.v1.converters import (
    api_action_to_domain,
    domain_discounts_to_api,
    domain_price_list_to_api,
    domain_quote_to_api,
)
from app.pricing import to_service_year
from app.wiring.dependencies import (
    get_discount_repository,
    get_price_catalog,
    get_pricing_service,
)

router = APIRouter()


@router.post("/price", response_model=api.PriceResponse)
def calculate_price(
    request: api.PriceRequest,
    service: PricingService = Depends(get_pricing_service),
) -> api.PriceResponse:
    """
    Price a selection of services for a service year.

    The single best applicable bundle discount is applied. An empty
    selection is priced at zero.

    Args:
        request: Selected services and service year

    Returns:
        PriceResponse with base price, final price and applied discount
    """
    try:
        quote = service.calculate_price(request.selected_services, request.selected_year)
        return domain_quote_to_api(quote)
    except ConfigurationError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )


@router.post("/selection", response_model=api.SelectionUpdateResponse)
def update_selection(request: api.SelectionUpdateRequest) -> api.SelectionUpdateResponse:
    """
    Apply a Select/Deselect action to a selection.

    Blocked selections (Blu-ray while video recording is selected) leave
    the selection unchanged. Deselecting photography may also remove the
    two-day event add-on.
    """
    selected = update_selected_services(
        request.previous_selection,
        api_action_to_domain(request.action),
    )
    return api.SelectionUpdateResponse(selected_services=selected)


@router.get("/catalog/{year}", response_model=api.PriceListResponse)
def get_price_list(
    year: int,
    catalog: PriceCatalog = Depends(get_price_catalog),
) -> api.PriceListResponse:
    """
    Get the published price list for a year.

    Raises:
        404: No price list for the year
    """
    try:
        price_list = catalog.get_price_list(to_service_year(year))
    except PriceNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )

    return domain_price_list_to_api(price_list)


@router.get("/discounts", response_model=api.DiscountListResponse)
def list_discounts(
    year: Optional[int] = Query(default=None, description="Only rules valid in this year"),
    repository: DiscountRepository = Depends(get_discount_repository),
) -> api.DiscountListResponse:
    """
    List bundle discount rules, optionally for a single year.

    An unsupported year simply has no rules.
    """
    if year is None:
        discounts = repository.get_all()
    else:
        discounts = repository.get_for_year(year)

    return domain_discounts_to_api(discounts)


@router.get("/health")
def health_check(
    catalog: PriceCatalog = Depends(get_price_catalog),
    repository: DiscountRepository = Depends(get_discount_repository),
) -> dict:
    """
    Check that the price catalog and discount rules are loaded.
    """
    catalog_ready = catalog.is_ready()
    discount_count = repository.count()
    overall = catalog_ready and discount_count > 0

    return {
        "status": "ok" if overall else "degraded",
        "components": {
            "price_catalog": catalog_ready,
            "discount_rules": discount_count > 0,
        },
        "supported_years": [int(year) for year in catalog.supported_years()],
        "discount_count": discount_count,
        "overall": overall,
    }
