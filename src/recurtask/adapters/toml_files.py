"""TOML file adapters for holidays and task templates."""

import logging
import tomllib
from pathlib import Path

from recurtask.core.errors import HolidayLoadError, TemplateLoadError
from recurtask.core.holidays import HolidayCalendar
from recurtask.core.schedule import TaskTemplate

logger = logging.getLogger(__name__)


def _read_tables(path: Path, key: str) -> list[dict]:
    """Read ``[[key]]`` tables from a TOML file. Raises OSError/TOMLDecodeError/ValueError."""
    with path.open("rb") as f:
        data = tomllib.load(f)
    tables = data.get(key, [])
    if not isinstance(tables, list) or not all(isinstance(t, dict) for t in tables):
        raise ValueError(f"'{key}' must be an array of tables ([[{key}]])")
    return tables


class TomlHolidaySource:
    """
    Holiday calendar stored as ``[[holiday]]`` tables.

    Implements HolidaySource protocol. Each table has ``name``, ``holiday``
    (YYYY-MM-DD) and ``holiday_note``.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def load(self) -> HolidayCalendar:
        try:
            records = _read_tables(self.path, "holiday")
        except (OSError, tomllib.TOMLDecodeError, ValueError) as e:
            raise HolidayLoadError(f"Failed to load holiday file ({self.path}): {e}") from e

        calendar = HolidayCalendar.from_records(records)
        logger.debug(f"Loaded {len(calendar)} holiday(s) from {self.path}")
        return calendar


class TomlTemplateSource:
    """
    Task templates stored as ``[[task]]`` tables.

    Implements TemplateSource protocol.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def load(self) -> list[TaskTemplate]:
        try:
            records = _read_tables(self.path, "task")
            templates = [TaskTemplate.from_record(r) for r in records]
        except KeyError as e:
            raise TemplateLoadError(f"Failed to load task file ({self.path}): task without {e}") from e
        except (OSError, tomllib.TOMLDecodeError, ValueError) as e:
            raise TemplateLoadError(f"Failed to load task file ({self.path}): {e}") from e

        logger.debug(f"Loaded {len(templates)} task template(s) from {self.path}")
        return templates
