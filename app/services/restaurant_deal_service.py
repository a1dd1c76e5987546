"""
Restaurant deal service
Fetches the catalog, rejects restaurants the window engine cannot handle,
and runs the active-deal / peak-time queries.
"""

import logging
from datetime import time
from typing import Iterable, List

from app.domain.models import ActiveDeal, PeakRange, Restaurant
from app.domain.services.deal_query_engine import find_active_deals, find_peak_time_ranges
from app.infrastructure.restaurant_data.types import RestaurantDataProvider

logger = logging.getLogger(__name__)


def supported_restaurants(restaurants: Iterable[Restaurant]) -> List[Restaurant]:
    """
    Drop restaurants without same-day operating hours.

    Missing hours and overnight hours (close before open) are both
    unsupported; they are logged and skipped.
    """
    supported: List[Restaurant] = []
    for restaurant in restaurants:
        if restaurant.open is None or restaurant.close is None:
            logger.warning("Skipping restaurant %s: missing operating hours", restaurant.object_id)
            continue
        if restaurant.close < restaurant.open:
            logger.warning(
                "Skipping restaurant %s: overnight hours %s-%s not supported",
                restaurant.object_id, restaurant.open, restaurant.close,
            )
            continue
        supported.append(restaurant)
    return supported


class RestaurantDealService:
    """
    Read-only deal queries over the upstream catalog.
    Holds no state besides the provider; every call fetches fresh data.
    """

    def __init__(self, provider: RestaurantDataProvider):
        self.provider = provider

    async def _load_restaurants(self) -> List[Restaurant]:
        return supported_restaurants(await self.provider.get_restaurants())

    async def get_active_deals(self, query_time: time) -> List[ActiveDeal]:
        restaurants = await self._load_restaurants()
        active = find_active_deals(restaurants, query_time)
        logger.info("%d active deals at %s across %d restaurants", len(active), query_time, len(restaurants))
        return active

    async def get_peak_time_ranges(self) -> List[PeakRange]:
        restaurants = await self._load_restaurants()
        peaks = find_peak_time_ranges(restaurants)
        logger.info("%d peak ranges across %d restaurants", len(peaks), len(restaurants))
        return peaks
