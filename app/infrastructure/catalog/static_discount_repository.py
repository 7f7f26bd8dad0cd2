"""
Discount rules backed by the in-code discount table.

Implements the DiscountRepository port. Each bundle is published once per
service year with a year-specific value.
"""

from typing import Iterable, List, Optional

from app.domain.entities import Discount
from app.domain.value_objects import ServiceType, ServiceYear

PHOTO_VIDEO = (ServiceType.PHOTOGRAPHY, ServiceType.VIDEO_RECORDING)
PHOTO_WEDDING = (ServiceType.PHOTOGRAPHY, ServiceType.WEDDING_SESSION)
VIDEO_WEDDING = (ServiceType.VIDEO_RECORDING, ServiceType.WEDDING_SESSION)
PHOTO_VIDEO_WEDDING = (
    ServiceType.VIDEO_RECORDING,
    ServiceType.PHOTOGRAPHY,
    ServiceType.WEDDING_SESSION,
)

DEFAULT_DISCOUNTS: List[Discount] = [
    Discount.create("PhotographyVideoRecording", PHOTO_VIDEO, ServiceYear.Y2020, 1200),
    Discount.create("PhotographyVideoRecording", PHOTO_VIDEO, ServiceYear.Y2021, 1300),
    Discount.create("PhotographyVideoRecording", PHOTO_VIDEO, ServiceYear.Y2022, 1300),
    Discount.create("WeddingAndPhotography", PHOTO_WEDDING, ServiceYear.Y2020, 300),
    Discount.create("WeddingAndPhotography", PHOTO_WEDDING, ServiceYear.Y2021, 300),
    Discount.create("WeddingAndPhotography", PHOTO_WEDDING, ServiceYear.Y2022, 600),
    Discount.create("WeddingVideo", VIDEO_WEDDING, ServiceYear.Y2020, 300),
    Discount.create("WeddingVideo", VIDEO_WEDDING, ServiceYear.Y2021, 300),
    Discount.create("WeddingVideo", VIDEO_WEDDING, ServiceYear.Y2022, 300),
    Discount.create("VideoPhotoWedding", PHOTO_VIDEO_WEDDING, ServiceYear.Y2020, 1500),
    Discount.create("VideoPhotoWedding", PHOTO_VIDEO_WEDDING, ServiceYear.Y2021, 1600),
    Discount.create("VideoPhotoWedding", PHOTO_VIDEO_WEDDING, ServiceYear.Y2022, 1900),
]


class StaticDiscountRepository:
    """Read-only DiscountRepository over a fixed list of rules."""

    def __init__(self, discounts: Optional[Iterable[Discount]] = None) -> None:
        self._discounts: List[Discount] = list(
            DEFAULT_DISCOUNTS if discounts is None else discounts
        )

    def get_all(self) -> List[Discount]:
        return list(self._discounts)

    def get_for_year(self, year: ServiceYear) -> List[Discount]:
        return [discount for discount in self._discounts if discount.for_year == year]

    def count(self) -> int:
        return len(self._discounts)
