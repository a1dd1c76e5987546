"""
Domain Models - Entities
Pure domain objects with no infrastructure dependencies
"""

from dataclasses import dataclass, field
from datetime import time
from typing import Optional, Tuple


@dataclass(frozen=True)
class OperatingHours:
    """Restaurant opening hours within a single day (open <= close)"""
    open: time
    close: time


@dataclass(frozen=True)
class DealBounds:
    """
    Deal's own time bounds as published upstream.

    Either pair, both or neither may be present; resolution decides
    which one applies.
    """
    open: Optional[time] = None
    close: Optional[time] = None
    start: Optional[time] = None
    end: Optional[time] = None


@dataclass(frozen=True)
class Deal:
    """A promotional deal offered by one restaurant"""
    object_id: Optional[str]
    discount: Optional[str] = None
    dine_in: bool = False
    lightning: bool = False
    qty_left: Optional[str] = None
    bounds: DealBounds = field(default_factory=DealBounds)


@dataclass(frozen=True)
class Restaurant:
    """
    Restaurant with its operating hours and deals.

    ``open``/``close`` may be missing on raw upstream records; such
    restaurants are rejected before reaching the window engine.
    """
    object_id: Optional[str]
    name: Optional[str]
    open: Optional[time]
    close: Optional[time]
    address1: Optional[str] = None
    suburb: Optional[str] = None
    cuisines: Tuple[str, ...] = ()
    image_link: Optional[str] = None
    deals: Tuple[Deal, ...] = ()

    @property
    def hours(self) -> OperatingHours:
        if self.open is None or self.close is None:
            raise ValueError(f"Restaurant {self.object_id} has no operating hours")
        return OperatingHours(open=self.open, close=self.close)


@dataclass(frozen=True)
class ResolvedWindow:
    """Effective active interval of one deal, clipped to operating hours"""
    start: time
    end: time


@dataclass(frozen=True)
class PeakRange:
    """Maximal contiguous run of minutes sharing the day's highest concurrency"""
    start: time
    end: time


@dataclass(frozen=True)
class ActiveDeal:
    """A deal active at the queried time, paired with its restaurant"""
    restaurant: Restaurant
    deal: Deal
    window: ResolvedWindow

