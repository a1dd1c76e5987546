"""
Domain Models Package
Export all domain entities
"""

from .entities import (
    ActiveDeal,
    Deal,
    DealBounds,
    OperatingHours,
    PeakRange,
    ResolvedWindow,
    Restaurant,
)

__all__ = [
    "ActiveDeal",
    "Deal",
    "DealBounds",
    "OperatingHours",
    "PeakRange",
    "ResolvedWindow",
    "Restaurant",
]
