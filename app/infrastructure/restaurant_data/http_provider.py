"""
Restaurant data over HTTP
Fetches the restaurant/deal catalog from the upstream JSON feed
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from app.domain.errors import RestaurantDataError
from app.domain.models import Restaurant
from app.domain.schemas.deals import RestaurantPayload

logger = logging.getLogger(__name__)


def parse_restaurants(payload: Any) -> List[Restaurant]:
    """
    Validate an upstream payload and convert it to domain restaurants.

    Raises:
        RestaurantDataError: payload has no ``restaurants`` array or a
            record fails validation
    """
    restaurants_node = payload.get("restaurants") if isinstance(payload, dict) else None
    if not isinstance(restaurants_node, list):
        raise RestaurantDataError("Invalid response format: missing or invalid 'restaurants' array")

    try:
        return [RestaurantPayload.model_validate(item).to_domain() for item in restaurants_node]
    except ValidationError as exc:
        raise RestaurantDataError(f"Invalid restaurant record: {exc}") from exc


class HttpRestaurantDataProvider:
    """
    Upstream restaurant feed client.

    A fresh ``httpx.AsyncClient`` is used per fetch; nothing is cached
    between calls.
    """

    def __init__(
        self,
        url: str,
        timeout_seconds: float = 10.0,
        retries: int = 2,
        backoff_seconds: float = 0.4,
    ):
        self.url = url
        self.timeout_seconds = timeout_seconds
        self.retries = max(0, retries)
        self.backoff_seconds = backoff_seconds

    async def _request_json(self) -> Any:
        last_error: Optional[str] = None

        for attempt in range(self.retries + 1):
            if attempt:
                await asyncio.sleep(self.backoff_seconds * (2 ** (attempt - 1)))
            try:
                async with httpx.AsyncClient(
                    timeout=self.timeout_seconds,
                    follow_redirects=True,
                ) as client:
                    response = await client.get(self.url, headers={"Accept": "application/json"})
            except httpx.HTTPError as exc:
                last_error = f"Request to restaurant feed failed: {exc}"
                logger.warning("%s (attempt %d/%d)", last_error, attempt + 1, self.retries + 1)
                continue

            if response.status_code >= 500:
                last_error = f"Unexpected response code: {response.status_code}"
                logger.warning("%s (attempt %d/%d)", last_error, attempt + 1, self.retries + 1)
                continue
            if response.status_code != 200:
                raise RestaurantDataError(f"Unexpected response code: {response.status_code}")

            try:
                return response.json()
            except ValueError as exc:
                raise RestaurantDataError("Restaurant feed returned a non-JSON body") from exc

        raise RestaurantDataError(last_error or "Restaurant feed unavailable")

    async def get_restaurants(self) -> List[Restaurant]:
        payload = await self._request_json()
        restaurants = parse_restaurants(payload)
        logger.info("Fetched %d restaurants from %s", len(restaurants), self.url)
        return restaurants
