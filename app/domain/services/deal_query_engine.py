"""
DEAL QUERY ENGINE
Answers the two questions asked of a restaurant catalog

- Which deals are active at time T
- Which time range(s) have the most simultaneously active deals

Restaurants passed in must already carry valid same-day operating hours.
"""

from datetime import time
from typing import Iterable, Iterator, List, Tuple

from app.domain.models import ActiveDeal, Deal, PeakRange, ResolvedWindow, Restaurant
from app.domain.services.peak_finder import build_concurrency_profile, find_peak_ranges
from app.domain.services.window_resolver import is_active_at, resolve_window


def iter_resolved_windows(
    restaurants: Iterable[Restaurant],
) -> Iterator[Tuple[Restaurant, Deal, ResolvedWindow]]:
    """Yield every deal that has an active window, in source order"""
    for restaurant in restaurants:
        hours = restaurant.hours
        for deal in restaurant.deals:
            window = resolve_window(hours, deal.bounds)
            if window is None:
                continue
            yield restaurant, deal, window


def find_active_deals(restaurants: Iterable[Restaurant], query_time: time) -> List[ActiveDeal]:
    """Deals whose resolved window contains ``query_time``, in source order"""
    return [
        ActiveDeal(restaurant=restaurant, deal=deal, window=window)
        for restaurant, deal, window in iter_resolved_windows(restaurants)
        if is_active_at(query_time, window)
    ]


def find_peak_time_ranges(restaurants: Iterable[Restaurant]) -> List[PeakRange]:
    """Maximal time ranges sharing the day's highest deal concurrency"""
    profile = build_concurrency_profile(
        window for _, _, window in iter_resolved_windows(restaurants)
    )
    return find_peak_ranges(profile)
