"""Occurrence generation - expands a repeat rule over one month."""

import calendar
import re
from dataclasses import dataclass
from datetime import date
from typing import Iterator, assert_never

from .business_days import ONE_DAY, BusinessCalendar
from .rules import Daily, MonthEnd, MonthStart, RepeatRule, Weekly

_YEAR_MONTH = re.compile(r"^(?P<year>\d{4})(?P<month>\d{2})$")


@dataclass(frozen=True)
class MonthRange:
    """Closed date interval covering a single calendar month."""

    first_day: date
    last_day: date

    @classmethod
    def of(cls, year: int, month: int) -> "MonthRange":
        days = calendar.monthrange(year, month)[1]
        return cls(date(year, month, 1), date(year, month, days))

    @classmethod
    def parse(cls, value: str) -> "MonthRange":
        """Parse a ``YYYYMM`` designator. Raises ValueError if malformed."""
        m = _YEAR_MONTH.match(value.strip())
        if not m:
            raise ValueError(f"invalid year-month {value!r}, expected YYYYMM (e.g. 202511)")
        year, month = int(m.group("year")), int(m.group("month"))
        if not 1 <= month <= 12:
            raise ValueError(f"invalid month {month:02d} in {value!r}")
        if year < 1:
            raise ValueError(f"invalid year in {value!r}")
        return cls.of(year, month)

    def days(self) -> Iterator[date]:
        d = self.first_day
        while d <= self.last_day:
            yield d
            d += ONE_DAY

    def label(self) -> str:
        return self.first_day.strftime("%Y-%m")


def generate(rule: RepeatRule, month: MonthRange, business: BusinessCalendar) -> list[date]:
    """
    Dates on which a rule occurs in the given month, ascending.

    Pure function - no I/O.

    Weekly occurrences that land on a holiday move to the previous business
    day, which can fall in the previous month. They are still returned.
    """
    match rule:
        case Daily():
            return [d for d in month.days() if business.is_business_day(d)]

        case MonthStart():
            d = month.first_day
            while d <= month.last_day:
                if business.is_business_day(d):
                    return [d]
                d += ONE_DAY
            return []

        case MonthEnd():
            d = month.last_day
            while d >= month.first_day:
                if business.is_business_day(d):
                    return [d]
                d -= ONE_DAY
            return []

        case Weekly(weekday=weekday):
            dates = []
            for d in month.days():
                if d.weekday() != weekday:
                    continue
                if business.is_holiday(d):
                    d = business.previous_business_day(d)
                dates.append(d)
            return dates

        case _:
            assert_never(rule)
