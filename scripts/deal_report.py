#!/usr/bin/env python3
"""
Deal Report
Print active deals at a time of day and/or the day's peak deal times

    python -m scripts.deal_report --at 6:30PM
    python -m scripts.deal_report --peak --file challengedata.json
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from app.config import settings
from app.core.logging import setup_logging
from app.domain.errors import InvalidTimeFormat, RestaurantDataError
from app.infrastructure.restaurant_data.provider_factory import get_restaurant_data_provider
from app.infrastructure.restaurant_data.static_provider import StaticRestaurantDataProvider
from app.services.restaurant_deal_service import RestaurantDealService
from app.utils.time import format_time_of_day, parse_time_of_day

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Restaurant deal report")
    parser.add_argument("--at", dest="time_of_day", help="Time of day in h:mma form, e.g. 6:30PM")
    parser.add_argument("--peak", action="store_true", help="Show peak deal time ranges")
    parser.add_argument("--file", type=Path, help="Read the restaurant payload from a JSON file")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL)
    return parser


async def run_report(service: RestaurantDealService, time_of_day: Optional[str], peak: bool) -> List[str]:
    lines: List[str] = []

    if time_of_day:
        query_time = parse_time_of_day(time_of_day)
        active = await service.get_active_deals(query_time)
        lines.append(f"Active deals at {format_time_of_day(query_time)}: {len(active)}")
        for item in active:
            window = f"{format_time_of_day(item.window.start)}-{format_time_of_day(item.window.end)}"
            lines.append(
                f"  {item.restaurant.name} | deal {item.deal.object_id} | "
                f"{item.deal.discount or '-'}% off | {window}"
            )

    if peak:
        peaks = await service.get_peak_time_ranges()
        if not peaks:
            lines.append("No deals are active at any time of day")
        for peak_range in peaks:
            lines.append(
                f"Peak: {format_time_of_day(peak_range.start)} - {format_time_of_day(peak_range.end)}"
            )

    return lines


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if not args.time_of_day and not args.peak:
        parser.error("nothing to report: pass --at and/or --peak")

    try:
        if args.file:
            provider = StaticRestaurantDataProvider.from_file(args.file)
        else:
            provider = get_restaurant_data_provider(settings)
        lines = asyncio.run(run_report(RestaurantDealService(provider), args.time_of_day, args.peak))
    except InvalidTimeFormat as exc:
        print(str(exc), file=sys.stderr)
        return 2
    except RestaurantDataError as exc:
        logger.error("Restaurant data unavailable: %s", exc)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
