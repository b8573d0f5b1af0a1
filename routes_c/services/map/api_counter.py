"""
API Call Counter - daily quota for directions requests
"""
from datetime import date
from typing import Callable, Optional

from routes_c.config import settings


class ApiCallCounter:
    """Counts provider calls per calendar day"""

    def __init__(
        self,
        max_calls_per_day: Optional[int] = None,
        today: Callable[[], date] = date.today,
    ):
        self.max_calls_per_day = (
            settings.max_api_calls_per_day
            if max_calls_per_day is None
            else max_calls_per_day
        )
        self._today = today
        self.current_date = today()
        self.call_count = 0

    def _roll_over(self) -> None:
        today = self._today()
        if today != self.current_date:
            self.current_date = today
            self.call_count = 0

    def can_make_call(self) -> bool:
        """Check if the provider can be called today"""
        self._roll_over()
        return self.call_count < self.max_calls_per_day

    def record_call(self) -> None:
        self._roll_over()
        self.call_count += 1

    def get_remaining_calls(self) -> int:
        self._roll_over()
        return max(0, self.max_calls_per_day - self.call_count)


# Global counter instance
api_counter = ApiCallCounter()
