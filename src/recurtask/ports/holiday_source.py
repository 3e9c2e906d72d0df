"""Holiday source interface."""

from typing import Protocol

from recurtask.core.holidays import HolidayCalendar


class HolidaySource(Protocol):
    """Interface for loading the holiday calendar from any backend."""

    def load(self) -> HolidayCalendar:
        """Load the full calendar. Raises HolidayLoadError on failure."""
        ...
