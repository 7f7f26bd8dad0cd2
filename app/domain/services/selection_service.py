"""
Co-selection rules for the service picker.

Two rules shape what a user can hold at once:
- a Blu-ray package cannot be added while video recording is selected;
- removing photography also removes the two-day event add-on, unless
  video recording is still selected to carry it.

All functions are pure: they take the current selection and return a new
list, never mutating their input.
"""

from typing import List, Optional, Sequence
import logging

from ..value_objects import ActionType, SelectionAction, ServiceType

logger = logging.getLogger(__name__)


def is_selection_blocked(selected_services: Sequence[ServiceType], service: ServiceType) -> bool:
    """Check if selecting a service is forbidden by the current selection."""
    return (
        service == ServiceType.BLURAY_PACKAGE
        and ServiceType.VIDEO_RECORDING in selected_services
    )


def dependent_service_to_remove(
    selected_services: Sequence[ServiceType],
    service: ServiceType,
) -> Optional[ServiceType]:
    """
    Get the service that must be removed together with a deselected one.

    Returns None when deselecting the service drags nothing else with it.
    """
    if (
        service == ServiceType.PHOTOGRAPHY
        and ServiceType.TWO_DAY_EVENT in selected_services
        and ServiceType.VIDEO_RECORDING not in selected_services
    ):
        return ServiceType.TWO_DAY_EVENT
    return None


def select_service(selected_services: Sequence[ServiceType], service: ServiceType) -> List[ServiceType]:
    """Add a service to the selection, keeping order and dropping duplicates."""
    if is_selection_blocked(selected_services, service):
        logger.debug(f"Selecting {service.value} is blocked by the current selection")
        return list(selected_services)

    return list(dict.fromkeys([*selected_services, service]))


def deselect_service(selected_services: Sequence[ServiceType], service: ServiceType) -> List[ServiceType]:
    """Remove a service, plus its dependent add-on when the rules require it."""
    result = list(selected_services)

    dependent = dependent_service_to_remove(result, service)
    if dependent is not None:
        logger.debug(f"Deselecting {service.value} also removes {dependent.value}")
        result.remove(dependent)

    if service in result:
        result.remove(service)

    return result


def update_selected_services(
    previous_selection: Sequence[ServiceType],
    action: SelectionAction,
) -> List[ServiceType]:
    """
    Apply a Select/Deselect action to the previous selection.

    Blocked selections and unknown action types leave the selection
    unchanged; the result is always a new list.

    Args:
        previous_selection: The services currently selected
        action: What the user did

    Returns:
        The new selection
    """
    if action.type == ActionType.SELECT:
        return select_service(previous_selection, action.service)

    if action.type == ActionType.DESELECT:
        return deselect_service(previous_selection, action.service)

    logger.debug(f"Ignoring unknown selection action type: {action.type!r}")
    return list(previous_selection)
