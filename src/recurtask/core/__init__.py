"""Functional core - pure scheduling logic with no I/O."""

from .holidays import Holiday, HolidayCalendar
from .business_days import BusinessCalendar, is_weekend
from .rules import Daily, MonthEnd, MonthStart, RepeatRule, Weekday, Weekly, parse_repeat
from .occurrences import MonthRange, generate
from .schedule import OutputRow, TaskTemplate, collate, sort_rows

__all__ = [
    # Holidays
    "Holiday",
    "HolidayCalendar",
    # Business days
    "BusinessCalendar",
    "is_weekend",
    # Rules
    "Daily",
    "MonthStart",
    "MonthEnd",
    "Weekly",
    "Weekday",
    "RepeatRule",
    "parse_repeat",
    # Occurrences
    "MonthRange",
    "generate",
    # Schedule
    "TaskTemplate",
    "OutputRow",
    "collate",
    "sort_rows",
]
