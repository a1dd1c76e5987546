"""
Restaurant Deals API Routes
Active deals at a time of day, and peak deal times
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from app.domain.errors import InvalidTimeFormat, RestaurantDataError
from app.domain.schemas.deals import (
    ActiveDealResponse,
    PeakTimeResponse,
    to_active_deal_response,
    to_peak_time_response,
)
from app.services.restaurant_deal_service import RestaurantDealService
from app.utils.time import parse_time_of_day

logger = logging.getLogger(__name__)

router = APIRouter()


def get_deal_service(request: Request) -> RestaurantDealService:
    service = getattr(request.app.state, "deal_service", None)
    if service is None:
        raise HTTPException(status_code=500, detail="Deal service not initialized")
    return service


@router.get("/active", response_model=List[ActiveDealResponse])
async def get_active_deals(
    time_of_day: Optional[str] = Query(None, alias="timeOfDay"),
    service: RestaurantDealService = Depends(get_deal_service),
):
    """
    Deals active at ``timeOfDay`` (h:mma, e.g. 6:30PM)
    """
    logger.info("Active deals requested for timeOfDay=%s", time_of_day)

    if time_of_day is None or not time_of_day.strip():
        raise HTTPException(status_code=400, detail="Missing required parameter: timeOfDay")

    try:
        query_time = parse_time_of_day(time_of_day)
    except InvalidTimeFormat as exc:
        logger.error("Error parsing timeOfDay %r", time_of_day)
        raise HTTPException(status_code=400, detail=str(exc))

    try:
        active_deals = await service.get_active_deals(query_time)
    except RestaurantDataError as exc:
        logger.error("Restaurant data unavailable: %s", exc)
        raise HTTPException(status_code=502, detail="Restaurant data unavailable")
    except Exception:
        logger.exception("Active deals lookup failed")
        raise HTTPException(status_code=500, detail="Internal server error")

    return [to_active_deal_response(active) for active in active_deals]


@router.get("/peak-times", response_model=List[PeakTimeResponse])
async def get_peak_times(service: RestaurantDealService = Depends(get_deal_service)):
    """
    Time ranges with the highest number of simultaneously active deals
    """
    logger.info("Peak deal times requested")

    try:
        peaks = await service.get_peak_time_ranges()
    except RestaurantDataError as exc:
        logger.error("Restaurant data unavailable: %s", exc)
        raise HTTPException(status_code=502, detail="Restaurant data unavailable")
    except Exception:
        logger.exception("Peak time lookup failed")
        raise HTTPException(status_code=500, detail="Internal server error")

    return [to_peak_time_response(peak) for peak in peaks]
