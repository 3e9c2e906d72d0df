"""Holiday calendar - an immutable set of holiday dates."""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Holiday:
    """A named holiday."""

    name: str
    date: date
    note: str = ""

    @classmethod
    def from_record(cls, data: dict) -> "Holiday":
        """Create a Holiday from a parsed input record.

        The date may be given under ``holiday`` or ``date`` and the note under
        ``holiday_note`` or ``note``. Raises ValueError for an unparsable date.
        """
        raw = data.get("holiday", data.get("date"))
        if isinstance(raw, datetime):
            day = raw.date()
        elif isinstance(raw, date):
            day = raw
        elif isinstance(raw, str):
            day = date.fromisoformat(raw.strip())
        else:
            raise ValueError(f"missing or invalid holiday date: {raw!r}")
        return cls(
            name=str(data.get("name", "")),
            date=day,
            note=str(data.get("holiday_note", data.get("note", ""))),
        )

    def to_record(self) -> dict:
        return {"name": self.name, "holiday": self.date.isoformat(), "holiday_note": self.note}


@dataclass(frozen=True)
class HolidayCalendar:
    """Read-only holiday lookup.

    Later records for the same date replace earlier ones.
    """

    holidays: tuple[Holiday, ...] = ()
    _by_date: dict[date, Holiday] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        by_date: dict[date, Holiday] = {}
        for h in self.holidays:
            by_date[h.date] = h
        object.__setattr__(self, "_by_date", by_date)

    @classmethod
    def from_holidays(cls, holidays: Iterable[Holiday]) -> "HolidayCalendar":
        return cls(tuple(holidays))

    @classmethod
    def from_records(cls, records: Iterable[dict]) -> "HolidayCalendar":
        """Build a calendar from raw records, dropping entries with bad dates."""
        holidays = []
        for record in records:
            try:
                holidays.append(Holiday.from_record(record))
            except ValueError as e:
                logger.warning(f"Ignoring holiday entry {record!r}: {e}")
        return cls(tuple(holidays))

    def is_holiday(self, day: date) -> bool:
        return day in self._by_date

    def get(self, day: date) -> Holiday | None:
        return self._by_date.get(day)

    def between(self, start: date, end: date) -> list[Holiday]:
        """Holidays in [start, end], one per date, sorted by date."""
        return sorted(
            (h for d, h in self._by_date.items() if start <= d <= end),
            key=lambda h: h.date,
        )

    def __len__(self) -> int:
        return len(self._by_date)

    def __contains__(self, day: object) -> bool:
        return day in self._by_date
