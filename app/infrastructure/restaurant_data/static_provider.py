"""
In-memory restaurant data provider (tests, offline reports).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List

from app.domain.errors import RestaurantDataError
from app.domain.models import Restaurant
from app.infrastructure.restaurant_data.http_provider import parse_restaurants


class StaticRestaurantDataProvider:
    def __init__(self, restaurants: Iterable[Restaurant]):
        self._restaurants = list(restaurants)

    @classmethod
    def from_file(cls, path: Path) -> "StaticRestaurantDataProvider":
        """Load an upstream-shaped JSON payload from disk"""
        try:
            payload = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise RestaurantDataError(f"Cannot read restaurant data from {path}: {exc}") from exc
        return cls(parse_restaurants(payload))

    async def get_restaurants(self) -> List[Restaurant]:
        return list(self._restaurants)
