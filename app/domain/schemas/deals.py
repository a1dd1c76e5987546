"""
Restaurant deal schemas
Upstream payload models and API response models (camelCase on the wire)
"""

from datetime import time
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.domain.models import ActiveDeal, Deal, DealBounds, PeakRange, Restaurant
from app.utils.time import format_time_of_day, parse_time_of_day


def _parse_optional_time(value):
    if value is None or isinstance(value, time):
        return value
    if isinstance(value, str) and not value.strip():
        return None
    return parse_time_of_day(value)


# ======================
# Upstream payload
# ======================

class DealPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    object_id: Optional[str] = Field(None, alias="objectId")
    discount: Optional[str] = None
    dine_in: bool = Field(False, alias="dineIn")
    lightning: bool = False
    open: Optional[time] = None
    close: Optional[time] = None
    start: Optional[time] = None
    end: Optional[time] = None
    qty_left: Optional[str] = Field(None, alias="qtyLeft")

    @field_validator("open", "close", "start", "end", mode="before")
    @classmethod
    def parse_times(cls, value):
        return _parse_optional_time(value)

    def to_domain(self) -> Deal:
        return Deal(
            object_id=self.object_id,
            discount=self.discount,
            dine_in=self.dine_in,
            lightning=self.lightning,
            qty_left=self.qty_left,
            bounds=DealBounds(open=self.open, close=self.close, start=self.start, end=self.end),
        )


class RestaurantPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    object_id: Optional[str] = Field(None, alias="objectId")
    name: Optional[str] = None
    address1: Optional[str] = None
    suburb: Optional[str] = None
    cuisines: List[str] = Field(default_factory=list)
    image_link: Optional[str] = Field(None, alias="imageLink")
    open: Optional[time] = None
    close: Optional[time] = None
    deals: Optional[List[DealPayload]] = None

    @field_validator("open", "close", mode="before")
    @classmethod
    def parse_times(cls, value):
        return _parse_optional_time(value)

    @field_validator("cuisines", mode="before")
    @classmethod
    def default_cuisines(cls, value):
        return [] if value is None else value

    def to_domain(self) -> Restaurant:
        return Restaurant(
            object_id=self.object_id,
            name=self.name,
            open=self.open,
            close=self.close,
            address1=self.address1,
            suburb=self.suburb,
            cuisines=tuple(self.cuisines),
            image_link=self.image_link,
            deals=tuple(deal.to_domain() for deal in self.deals or []),
        )


# ======================
# API responses
# ======================

class ActiveDealResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    restaurant_object_id: Optional[str] = Field(None, alias="restaurantObjectId")
    restaurant_name: Optional[str] = Field(None, alias="restaurantName")
    restaurant_address1: Optional[str] = Field(None, alias="restaurantAddress1")
    restaurant_suburb: Optional[str] = Field(None, alias="restaurantSuburb")
    restaurant_open: Optional[str] = Field(None, alias="restaurantOpen")
    restaurant_close: Optional[str] = Field(None, alias="restaurantClose")
    deal_object_id: Optional[str] = Field(None, alias="dealObjectId")
    discount: Optional[str] = None
    dine_in: bool = Field(False, alias="dineIn")
    lightning: bool = False
    qty_left: Optional[str] = Field(None, alias="qtyLeft")


class PeakTimeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    peak_time_start: str = Field(..., alias="peakTimeStart")
    peak_time_end: str = Field(..., alias="peakTimeEnd")


def _format_optional(value: Optional[time]) -> Optional[str]:
    return format_time_of_day(value) if value is not None else None


def to_active_deal_response(active: ActiveDeal) -> ActiveDealResponse:
    restaurant, deal = active.restaurant, active.deal
    return ActiveDealResponse(
        restaurant_object_id=restaurant.object_id,
        restaurant_name=restaurant.name,
        restaurant_address1=restaurant.address1,
        restaurant_suburb=restaurant.suburb,
        restaurant_open=_format_optional(restaurant.open),
        restaurant_close=_format_optional(restaurant.close),
        deal_object_id=deal.object_id,
        discount=deal.discount,
        dine_in=deal.dine_in,
        lightning=deal.lightning,
        qty_left=deal.qty_left,
    )


def to_peak_time_response(peak: PeakRange) -> PeakTimeResponse:
    return PeakTimeResponse(
        peak_time_start=format_time_of_day(peak.start),
        peak_time_end=format_time_of_day(peak.end),
    )
