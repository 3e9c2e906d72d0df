"""Adapters - I/O implementations of ports."""

from .toml_files import TomlHolidaySource, TomlTemplateSource

__all__ = [
    "TomlHolidaySource",
    "TomlTemplateSource",
]
