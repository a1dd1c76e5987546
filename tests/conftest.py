from datetime import time
from typing import AsyncGenerator, Optional

import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport

from app.api.routes import deals, health
from app.domain.errors import RestaurantDataError
from app.domain.models import Deal, DealBounds, Restaurant
from app.infrastructure.restaurant_data.http_provider import parse_restaurants
from app.infrastructure.restaurant_data.static_provider import StaticRestaurantDataProvider
from app.services.restaurant_deal_service import RestaurantDealService


@pytest.fixture
def make_deal():
    """Factory for domain deals"""

    def _make(
        object_id: str,
        open: Optional[time] = None,
        close: Optional[time] = None,
        start: Optional[time] = None,
        end: Optional[time] = None,
        **kwargs,
    ) -> Deal:
        return Deal(
            object_id=object_id,
            bounds=DealBounds(open=open, close=close, start=start, end=end),
            **kwargs,
        )

    return _make


@pytest.fixture
def make_restaurant():
    """Factory for domain restaurants"""

    def _make(object_id: str, open: Optional[time], close: Optional[time], deals=(), **kwargs) -> Restaurant:
        return Restaurant(
            object_id=object_id,
            name=kwargs.pop("name", f"Restaurant {object_id}"),
            open=open,
            close=close,
            deals=tuple(deals),
            **kwargs,
        )

    return _make


@pytest.fixture
def two_deal_restaurant(make_restaurant, make_deal) -> Restaurant:
    """
    Open 09:00-22:00 with
    A open/close 09:00-17:00, B start/end 12:00-20:00, C open/close 18:00-21:00
    """
    return make_restaurant(
        "R1",
        time(9, 0),
        time(22, 0),
        deals=[
            make_deal("A", open=time(9, 0), close=time(17, 0)),
            make_deal("B", start=time(12, 0), end=time(20, 0)),
            make_deal("C", open=time(18, 0), close=time(21, 0)),
        ],
    )


@pytest.fixture
def sample_payload() -> dict:
    """Upstream-shaped payload (times as h:mma strings, loosely typed values)"""
    return {
        "restaurants": [
            {
                "objectId": "R1",
                "name": "Masala Kitchen",
                "address1": "55 Walsh Street",
                "suburb": "Lower East",
                "cuisines": ["Indian", "Takeaway"],
                "imageLink": "https://example.com/masala.jpg",
                "open": "9:00am",
                "close": "10:00pm",
                "deals": [
                    {"objectId": "A", "discount": "50", "dineIn": "false", "lightning": "true",
                     "open": "9:00am", "close": "5:00pm", "qtyLeft": "5"},
                    {"objectId": "B", "discount": 40, "dineIn": True, "lightning": False,
                     "start": "12:00pm", "end": "8:00pm", "qtyLeft": 3},
                    {"objectId": "C", "discount": "30", "dineIn": "true", "lightning": "false",
                     "open": "6:00pm", "close": "9:00pm", "qtyLeft": "1"},
                ],
            },
            {
                "objectId": "R2",
                "name": "Kekou",
                "address1": "396 Bridge Road",
                "suburb": "Richmond",
                "cuisines": ["Japanese"],
                "open": "10:00am",
                "close": "8:00pm",
                "deals": [
                    {"objectId": "D", "discount": "20", "dineIn": "false", "lightning": "false", "qtyLeft": "4"},
                ],
            },
            {
                "objectId": "R3",
                "name": "Night Owl Bar",
                "open": "8:00pm",
                "close": "2:00am",
                "deals": [{"objectId": "E", "discount": "15"}],
            },
            {
                "objectId": "R4",
                "name": "Lunch Only",
                "open": "11:00am",
                "close": "3:00pm",
                "deals": [{"objectId": "F", "discount": "25", "open": "4:00pm", "close": "6:00pm"}],
            },
            {
                "objectId": "R5",
                "name": "No Deals Cafe",
                "open": "7:00am",
                "close": "3:00pm",
                "deals": None,
            },
        ]
    }


class FailingProvider:
    async def get_restaurants(self):
        raise RestaurantDataError("Unexpected response code: 500")


@pytest.fixture
def failing_provider() -> FailingProvider:
    """Provider whose upstream fetch always fails"""
    return FailingProvider()


@pytest.fixture
def sample_restaurants(sample_payload):
    return parse_restaurants(sample_payload)


@pytest.fixture
def deal_service(sample_restaurants) -> RestaurantDealService:
    return RestaurantDealService(StaticRestaurantDataProvider(sample_restaurants))


@pytest.fixture()
async def app(deal_service) -> FastAPI:
    app = FastAPI()
    app.include_router(health.router, tags=["Health"])
    app.include_router(deals.router, prefix="/api/v1/restaurants/deals", tags=["Deals"])
    app.state.deal_service = deal_service
    return app


@pytest.fixture()
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
