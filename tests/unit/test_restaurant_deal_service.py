import logging
from datetime import time

import pytest

from app.domain.errors import RestaurantDataError
from app.domain.models import PeakRange
from app.infrastructure.restaurant_data.static_provider import StaticRestaurantDataProvider
from app.services.restaurant_deal_service import RestaurantDealService, supported_restaurants


def test_supported_restaurants_skips_missing_and_overnight_hours(make_restaurant, caplog):
    restaurants = [
        make_restaurant("ok", time(9, 0), time(17, 0)),
        make_restaurant("no-close", time(9, 0), None),
        make_restaurant("overnight", time(20, 0), time(2, 0)),
    ]

    with caplog.at_level(logging.WARNING):
        kept = supported_restaurants(restaurants)

    assert [r.object_id for r in kept] == ["ok"]
    assert "missing operating hours" in caplog.text
    assert "overnight hours" in caplog.text


def test_supported_restaurants_keeps_single_minute_hours(make_restaurant):
    restaurant = make_restaurant("noon", time(12, 0), time(12, 0))
    assert supported_restaurants([restaurant]) == [restaurant]


@pytest.mark.asyncio
async def test_active_deals_from_sample(deal_service):
    active = await deal_service.get_active_deals(time(15, 0))
    assert [(a.restaurant.object_id, a.deal.object_id) for a in active] == [
        ("R1", "A"),
        ("R1", "B"),
        ("R2", "D"),
    ]


@pytest.mark.asyncio
async def test_active_deals_boundaries_from_sample(deal_service):
    at_open = await deal_service.get_active_deals(time(10, 0))
    assert [a.deal.object_id for a in at_open] == ["A", "D"]

    at_eight = await deal_service.get_active_deals(time(20, 0))
    assert [a.deal.object_id for a in at_eight] == ["B", "C", "D"]

    assert await deal_service.get_active_deals(time(21, 30)) == []


@pytest.mark.asyncio
async def test_peak_time_ranges_from_sample(deal_service):
    assert await deal_service.get_peak_time_ranges() == [
        PeakRange(time(12, 0), time(17, 0)),
        PeakRange(time(18, 0), time(20, 0)),
    ]


@pytest.mark.asyncio
async def test_empty_catalog():
    service = RestaurantDealService(StaticRestaurantDataProvider([]))
    assert await service.get_active_deals(time(12, 0)) == []
    assert await service.get_peak_time_ranges() == []


@pytest.mark.asyncio
async def test_provider_errors_propagate(failing_provider):
    service = RestaurantDealService(failing_provider)
    with pytest.raises(RestaurantDataError):
        await service.get_peak_time_ranges()
