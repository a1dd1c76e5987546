"""
Restaurant data provider factory (settings-driven).
"""

from __future__ import annotations

from app.config import Settings, settings as default_settings
from app.infrastructure.restaurant_data.http_provider import HttpRestaurantDataProvider
from app.infrastructure.restaurant_data.types import RestaurantDataProvider


def get_restaurant_data_provider(settings: Settings = default_settings) -> RestaurantDataProvider:
    if not settings.RESTAURANT_DATA_URL:
        raise RuntimeError("RESTAURANT_DATA_URL is not configured")
    return HttpRestaurantDataProvider(
        url=settings.RESTAURANT_DATA_URL,
        timeout_seconds=settings.RESTAURANT_DATA_TIMEOUT_SECONDS,
        retries=settings.RESTAURANT_DATA_RETRIES,
        backoff_seconds=settings.RESTAURANT_DATA_BACKOFF_SECONDS,
    )
