"""
API schemas for the pricing endpoints.

These pydantic models describe the HTTP request and response bodies.
They are mapped to and from domain objects in converters.py.
"""

from typing import Literal

from pydantic import BaseModel, Field

from app.domain.value_objects import ServiceType, ServiceYear


# request body of post /price
class PriceRequest(BaseModel):
    """
    Request body for POST /price endpoint.
    """
    selected_services: list[ServiceType] = Field(
        default_factory=list,
        description="Services to price, e.g. ['Photography', 'VideoRecording']",
    )
    selected_year: ServiceYear = Field(description="Service year (2020-2022)")


class Discount(BaseModel):
    """
    API representation of a bundle discount rule.
    """
    name: str = Field(description="Rule name, shared across years")
    required_services: list[ServiceType] = Field(description="Services that must all be selected")
    for_year: ServiceYear = Field(description="Year the rule is valid in")
    discount_value: int = Field(description="Amount subtracted from the base price")


# response body of post /price
class PriceResponse(BaseModel):
    """
    Response body for POST /price endpoint.

    final_price can be negative if a discount exceeds the base price.
    """
    base_price: int = Field(description="Sum of catalog prices of the selected services")
    final_price: int = Field(description="Price after the single best discount")
    savings: int = Field(default=0, description="base_price - final_price")
    applied_discount: Discount | None = Field(
        default=None,
        description="The discount that was granted, if any",
    )


class SelectionActionBody(BaseModel):
    type: Literal["Select", "Deselect"] = Field(description="What the user did")
    service: ServiceType = Field(description="The service the action targets")


class SelectionUpdateRequest(BaseModel):
    """
    Request body for POST /selection endpoint.
    """
    previous_selection: list[ServiceType] = Field(
        default_factory=list,
        description="Services selected before the action",
    )
    action: SelectionActionBody


class SelectionUpdateResponse(BaseModel):
    selected_services: list[ServiceType] = Field(description="Selection after the action")


class PriceListResponse(BaseModel):
    """
    A published price list.
    """
    year: ServiceYear
    prices: dict[ServiceType, int] = Field(description="Base price per service")


class DiscountListResponse(BaseModel):
    discounts: list[Discount] = Field(default_factory=list)
    total: int = Field(default=0, description="Number of discount rules returned")
