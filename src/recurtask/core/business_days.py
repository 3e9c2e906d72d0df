"""Business-day predicate built on a holiday calendar."""

from dataclasses import dataclass, field
from datetime import date, timedelta

from .holidays import HolidayCalendar

ONE_DAY = timedelta(days=1)


def is_weekend(day: date) -> bool:
    """Saturday or Sunday."""
    return day.weekday() >= 5


@dataclass(frozen=True)
class BusinessCalendar:
    """Answers whether a date is a working day."""

    holidays: HolidayCalendar = field(default_factory=HolidayCalendar)

    def is_holiday(self, day: date) -> bool:
        return self.holidays.is_holiday(day)

    def is_business_day(self, day: date) -> bool:
        return not is_weekend(day) and not self.holidays.is_holiday(day)

    def previous_business_day(self, day: date) -> date:
        """
        Nearest business day strictly before ``day``.

        The scan is unbounded. It terminates because the holiday calendar is
        finite: once past its earliest entry, a weekday is at most two days away.
        """
        d = day - ONE_DAY
        while not self.is_business_day(d):
            d -= ONE_DAY
        return d
