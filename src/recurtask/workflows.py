"""Shared workflow layer between the CLI and the core.

Each function resolves input files from config, loads them through the
adapters, and hands the parsed values to the pure core.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from .adapters.toml_files import TomlHolidaySource, TomlTemplateSource
from .config import Config
from .core.business_days import BusinessCalendar
from .core.errors import UnknownRepeatError, UnknownWeekdayError
from .core.holidays import Holiday
from .core.occurrences import MonthRange
from .core.rules import describe
from .core.schedule import OutputRow, TaskTemplate, collate
from .ports import HolidaySource, TemplateSource

logger = logging.getLogger(__name__)


def get_holiday_source(config: Config, path: str | Path | None = None) -> HolidaySource:
    """Resolve the holiday file from an explicit path or config."""
    return TomlHolidaySource(Path(path) if path else config.holiday_path)


def get_template_source(config: Config, path: str | Path | None = None) -> TemplateSource:
    """Resolve the task file from an explicit path or config."""
    return TomlTemplateSource(Path(path) if path else config.task_path)


def build_schedule(
    config: Config,
    month: MonthRange,
    holiday_file: str | Path | None = None,
    task_file: str | Path | None = None,
) -> list[OutputRow]:
    """Load holidays and templates, then expand the templates over the month."""
    holidays = get_holiday_source(config, holiday_file).load()
    templates = get_template_source(config, task_file).load()
    return collate(templates, month, BusinessCalendar(holidays))


def holidays_in_month(
    config: Config,
    month: MonthRange,
    holiday_file: str | Path | None = None,
) -> list[Holiday]:
    """Holidays falling inside the month, sorted by date."""
    holidays = get_holiday_source(config, holiday_file).load()
    return holidays.between(month.first_day, month.last_day)


@dataclass
class TemplateCheck:
    """Result of parsing one template's repeat tag."""

    template: TaskTemplate
    rule: str | None = None
    error: str | None = None
    fatal: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


def check_templates(config: Config, task_file: str | Path | None = None) -> list[TemplateCheck]:
    """Parse every template's repeat tag without generating anything."""
    results = []
    for template in get_template_source(config, task_file).load():
        try:
            results.append(TemplateCheck(template, rule=describe(template.rule())))
        except UnknownWeekdayError as e:
            results.append(TemplateCheck(template, error=str(e)))
        except UnknownRepeatError as e:
            results.append(TemplateCheck(template, error=str(e), fatal=True))
    return results
