"""Repeat rules - the closed set of ways a task template recurs."""

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import assert_never

from .errors import UnknownRepeatError, UnknownWeekdayError


class Weekday(IntEnum):
    """Day of week, numbered like ``date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


@dataclass(frozen=True)
class Daily:
    """Every business day of the month."""


@dataclass(frozen=True)
class MonthStart:
    """First business day of the month."""


@dataclass(frozen=True)
class MonthEnd:
    """Last business day of the month."""


@dataclass(frozen=True)
class Weekly:
    """Every given weekday, moved to the previous business day on holidays."""

    weekday: Weekday


RepeatRule = Daily | MonthStart | MonthEnd | Weekly


_DAILY_TAGS = {"every day", "毎日"}
_MONTH_START_TAGS = {"month start", "月初"}
_MONTH_END_TAGS = {"month end", "月末"}

_WEEKLY_EN = re.compile(r"^weekly[\s-]+on[\s-]+(?P<day>.*)$", re.IGNORECASE)
_WEEKLY_JA_PREFIX = "毎週"

_WEEKDAY_NAMES: dict[str, Weekday] = {}
for _wd in Weekday:
    _WEEKDAY_NAMES[_wd.name.lower()] = _wd
    _WEEKDAY_NAMES[_wd.name.lower()[:3]] = _wd
for _kanji, _wd in zip("月火水木金土日", Weekday):
    _WEEKDAY_NAMES[_kanji] = _wd
    _WEEKDAY_NAMES[f"{_kanji}曜"] = _wd
    _WEEKDAY_NAMES[f"{_kanji}曜日"] = _wd


def parse_weekday(token: str) -> Weekday | None:
    """Look up an English or Japanese weekday name. None if unknown."""
    return _WEEKDAY_NAMES.get(token.strip().lower())


def parse_repeat(repeat: str) -> RepeatRule:
    """
    Parse a repeat tag into a rule.

    Raises:
        UnknownWeekdayError: weekly tag with an unrecognized weekday
        UnknownRepeatError: anything else outside the supported tags
    """
    tag = repeat.strip()
    folded = " ".join(tag.lower().split())

    if folded in _DAILY_TAGS:
        return Daily()
    if folded in _MONTH_START_TAGS:
        return MonthStart()
    if folded in _MONTH_END_TAGS:
        return MonthEnd()

    token = None
    if tag.startswith(_WEEKLY_JA_PREFIX):
        token = tag.removeprefix(_WEEKLY_JA_PREFIX)
    elif m := _WEEKLY_EN.match(tag):
        token = m.group("day")

    if token is None:
        raise UnknownRepeatError(repeat)

    weekday = parse_weekday(token)
    if weekday is None:
        raise UnknownWeekdayError(repeat, token)
    return Weekly(weekday)


def describe(rule: RepeatRule) -> str:
    """Canonical English tag for a rule."""
    match rule:
        case Daily():
            return "every day"
        case MonthStart():
            return "month start"
        case MonthEnd():
            return "month end"
        case Weekly(weekday=wd):
            return f"weekly on {wd.name.capitalize()}"
        case _:
            assert_never(rule)
