"""Task templates and month schedule collation."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable

from .business_days import BusinessCalendar
from .errors import UnknownRepeatError, UnknownWeekdayError
from .occurrences import MonthRange, generate
from .rules import RepeatRule, parse_repeat

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TaskTemplate:
    """A recurring task. Everything but ``repeat`` is passed through untouched."""

    repeat: str
    time: str = ""
    estimated_time: str = ""
    project: str = ""
    task_name: str = ""
    task_note: str = ""

    def rule(self) -> RepeatRule:
        """Parse the repeat tag, naming this task in any error."""
        try:
            return parse_repeat(self.repeat)
        except UnknownRepeatError:
            raise UnknownRepeatError(self.repeat, self.task_name) from None

    @classmethod
    def from_record(cls, data: dict) -> "TaskTemplate":
        """Create a TaskTemplate from a parsed input record."""
        if "repeat" not in data:
            raise KeyError("repeat")
        return cls(
            repeat=str(data["repeat"]),
            time=str(data.get("time", "")),
            estimated_time=str(data.get("estimated_time", "")),
            project=str(data.get("project", "")),
            task_name=str(data.get("task_name", "")),
            task_note=str(data.get("task_note", "")),
        )


@dataclass(frozen=True)
class OutputRow:
    """One scheduled task on one date."""

    date: date
    time: str
    estimated_time: str
    project: str
    task_name: str
    task_note: str
    actual_time: str = ""

    @classmethod
    def from_template(cls, day: date, template: TaskTemplate) -> "OutputRow":
        return cls(
            date=day,
            time=template.time,
            estimated_time=template.estimated_time,
            project=template.project,
            task_name=template.task_name,
            task_note=template.task_note,
        )

    def fields(self) -> tuple[str, ...]:
        """Output columns in their fixed order."""
        return (
            self.date.isoformat(),
            self.time,
            self.estimated_time,
            self.actual_time,
            self.project,
            self.task_name,
            self.task_note,
        )


def sort_rows(rows: Iterable[OutputRow]) -> list[OutputRow]:
    """
    Sort by date, then time string, then task name.

    sorted() is stable, so rows equal on all three keep their input order.
    """
    return sorted(rows, key=lambda r: (r.date, r.time, r.task_name))


def collate(
    templates: Iterable[TaskTemplate],
    month: MonthRange,
    business: BusinessCalendar,
) -> list[OutputRow]:
    """
    Expand every template over the month and return the sorted rows.

    A template with an unknown weekday is skipped with a warning. Any other
    unsupported repeat tag raises UnknownRepeatError before rows are returned.
    """
    rows: list[OutputRow] = []
    for template in templates:
        try:
            rule = template.rule()
        except UnknownWeekdayError as e:
            logger.warning(f"Skipping task {template.task_name!r}: {e}")
            continue

        dates = generate(rule, month, business)
        logger.debug(f"{template.task_name!r}: {len(dates)} occurrence(s) in {month.label()}")
        rows.extend(OutputRow.from_template(d, template) for d in dates)

    return sort_rows(rows)
