"""
Domain errors raised outside the pure window/peak engine.
"""


class DealServiceError(Exception):
    """Base class for deal service failures"""


class RestaurantDataError(DealServiceError):
    """Restaurant data could not be fetched or did not match the expected shape"""


class InvalidTimeFormat(DealServiceError, ValueError):
    """A time-of-day string is not in h:mma form"""

    def __init__(self, value: str):
        self.value = value
        super().__init__("Invalid time format. Use format: h:mma")
