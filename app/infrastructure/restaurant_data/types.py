"""
Restaurant data provider protocol for type hints.
"""

from __future__ import annotations

from typing import List, Protocol

from app.domain.models import Restaurant


class RestaurantDataProvider(Protocol):
    async def get_restaurants(self) -> List[Restaurant]:
        ...
