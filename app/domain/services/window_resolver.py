"""
WINDOW RESOLVER
Effective active window of a deal within its restaurant's hours

RESPONSIBILITIES:
- Choose the deal's own bounds (open/close before start/end)
- Fall back to operating hours when the deal has no usable bounds
- Clip the deal window to operating hours
- Closed-interval point containment

RULES:
❌ No overnight (wraparound) windows
❌ No I/O, no shared state
✅ Pure functions, deterministic output
"""

from datetime import time
from typing import Optional, Tuple

from app.domain.models import DealBounds, OperatingHours, ResolvedWindow


def candidate_bounds(hours: OperatingHours, bounds: DealBounds) -> Tuple[time, time]:
    """
    Deal's own window before clipping.

    Each endpoint prefers open/close over start/end. If either endpoint is
    still missing the deal runs for the full operating hours.
    """
    deal_start = bounds.open if bounds.open is not None else bounds.start
    deal_end = bounds.close if bounds.close is not None else bounds.end

    if deal_start is None or deal_end is None:
        return hours.open, hours.close
    return deal_start, deal_end


def has_overlap(hours: OperatingHours, deal_start: time, deal_end: time) -> bool:
    """Closed-interval overlap between the deal window and operating hours"""
    return deal_start <= hours.close and deal_end >= hours.open


def resolve_window(hours: OperatingHours, bounds: DealBounds) -> Optional[ResolvedWindow]:
    """
    Resolve a deal's effective window.

    Args:
        hours: Restaurant operating hours (open <= close)
        bounds: Deal's own optional bounds

    Returns:
        ResolvedWindow clipped to operating hours, or None when the deal
        is inactive for the whole day
    """
    deal_start, deal_end = candidate_bounds(hours, bounds)

    if not has_overlap(hours, deal_start, deal_end):
        return None

    effective_start = max(hours.open, deal_start)
    effective_end = min(hours.close, deal_end)

    # Inverted deal bounds can survive the overlap test
    if effective_start > effective_end:
        return None

    return ResolvedWindow(start=effective_start, end=effective_end)


def is_active_at(query_time: time, window: Optional[ResolvedWindow]) -> bool:
    """True iff ``window.start <= query_time <= window.end``"""
    if window is None:
        return False
    return window.start <= query_time <= window.end
