"""
PEAK FINDER
Minute-resolution concurrency sweep over one calendar day

The profile is built with a difference array (+1 at start, -1 after end,
prefix sum) which yields the same counts as incrementing every minute of
every window.
"""

from typing import Iterable, List

from app.domain.models import PeakRange, ResolvedWindow
from app.utils.time import DAY_TOTAL_MINUTES, from_minutes, to_minutes


def build_concurrency_profile(windows: Iterable[ResolvedWindow]) -> List[int]:
    """
    Count active windows per minute of the day.

    Both window endpoints are inclusive. Identical windows are counted
    separately.
    """
    # One extra slot absorbs the decrement for windows ending at 23:59
    deltas = [0] * (DAY_TOTAL_MINUTES + 1)
    for window in windows:
        deltas[to_minutes(window.start)] += 1
        deltas[to_minutes(window.end) + 1] -= 1

    profile: List[int] = []
    running = 0
    for minute in range(DAY_TOTAL_MINUTES):
        running += deltas[minute]
        profile.append(running)
    return profile


def find_peak_ranges(profile: List[int]) -> List[PeakRange]:
    """
    Extract every maximal run of minutes at the profile's maximum.

    Returns:
        Chronological list of ranges; empty when nothing is ever active
    """
    if len(profile) != DAY_TOTAL_MINUTES:
        raise ValueError(f"Profile must have {DAY_TOTAL_MINUTES} slots, got {len(profile)}")

    max_count = max(profile)
    if max_count == 0:
        return []

    ranges: List[PeakRange] = []
    in_peak = False
    range_start = -1

    # Minute 1440 is a zero-count sentinel that closes a run ending at 23:59
    for minute in range(DAY_TOTAL_MINUTES + 1):
        current = profile[minute] if minute < DAY_TOTAL_MINUTES else 0

        if current == max_count and not in_peak:
            in_peak = True
            range_start = minute
        elif current != max_count and in_peak:
            ranges.append(PeakRange(
                start=from_minutes(range_start),
                end=from_minutes(minute - 1),
            ))
            in_peak = False

    return ranges
