"""Configuration management for recurtask."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

RECURTASK_HOME = Path(os.environ.get("RECURTASK_HOME", "."))
CONFIG_FILE = RECURTASK_HOME / "recurtask.conf"


@dataclass
class Config:
    """recurtask configuration."""

    holiday_file: str = "holiday.toml"
    task_file: str = "task.toml"
    home: Path = RECURTASK_HOME

    def resolve(self, path: str) -> Path:
        """Resolve a configured path relative to the home directory."""
        p = Path(path).expanduser()
        return p if p.is_absolute() else self.home / p

    @property
    def holiday_path(self) -> Path:
        return self.resolve(self.holiday_file)

    @property
    def task_path(self) -> Path:
        return self.resolve(self.task_file)


def _unquote(value: str) -> str:
    # Handle quoted values with inline comments: "value" # comment
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from recurtask.conf file."""
    config_file = config_file or CONFIG_FILE
    config = Config(home=config_file.parent)

    if not config_file.exists():
        return config

    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            logger.warning(f"Ignoring malformed config line: {line!r}")
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "holiday_file":
                config.holiday_file = value
            case "task_file":
                config.task_file = value
            case _:
                logger.debug(f"Unknown config key: {key}")

    return config
