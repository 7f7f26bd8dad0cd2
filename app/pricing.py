"""
Library entry points for bundle pricing.

These functions accept either the domain enums or their raw values
("Photography", 2021), so callers holding plain data can use them
directly:

    >>> calculate_price(["Photography", "VideoRecording"], 2021)
    PriceQuote(base_price=3600, final_price=2300, applied_discount=...)

    >>> update_selected_services([], {"type": "Select", "service": "BlurayPackage"})
    [<ServiceType.BLURAY_PACKAGE: 'BlurayPackage'>]
"""

from typing import Any, Iterable, List, Mapping, Union

from app.domain.exceptions import PriceNotFoundError
from app.domain.services import selection_service
from app.domain.value_objects import PriceQuote, SelectionAction, ServiceType, ServiceYear
from app.wiring.dependencies import get_pricing_service


def to_service_type(value: Union[ServiceType, str]) -> ServiceType:
    """
    Coerce a raw service name to a ServiceType.

    Raises:
        ValueError: If the name is not a known service
    """
    try:
        return ServiceType(value)
    except ValueError:
        raise ValueError(f"Unknown service: {value!r}") from None


def to_service_year(value: Union[ServiceYear, int]) -> ServiceYear:
    """
    Coerce a raw year to a ServiceYear.

    Raises:
        PriceNotFoundError: If no price list is published for the year
    """
    try:
        return ServiceYear(value)
    except ValueError:
        raise PriceNotFoundError(f"No price list for year {value!r}") from None


def to_selection_action(action: Union[SelectionAction, Mapping[str, Any]]) -> SelectionAction:
    """Build a SelectionAction from a mapping with 'type' and 'service' keys."""
    if isinstance(action, SelectionAction):
        return SelectionAction(type=action.type, service=to_service_type(action.service))
    return SelectionAction(type=action["type"], service=to_service_type(action["service"]))


def calculate_price(
    selected_services: Iterable[Union[ServiceType, str]],
    selected_year: Union[ServiceYear, int],
) -> PriceQuote:
    """
    Price a selection of services in a service year.

    An empty selection is free and is not checked against the catalog.

    Raises:
        ValueError: If a service name is unknown
        PriceNotFoundError: If the year is not supported
    """
    services = [to_service_type(service) for service in selected_services]
    if not services:
        return PriceQuote(base_price=0, final_price=0)

    return get_pricing_service().calculate_price(services, to_service_year(selected_year))


def update_selected_services(
    previous_selection: Iterable[Union[ServiceType, str]],
    action: Union[SelectionAction, Mapping[str, Any]],
) -> List[ServiceType]:
    """Apply a Select/Deselect action and return the new selection."""
    services = [to_service_type(service) for service in previous_selection]
    return selection_service.update_selected_services(services, to_selection_action(action))
