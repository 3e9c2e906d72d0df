"""Ports - interfaces/protocols for external dependencies."""

from .holiday_source import HolidaySource
from .template_source import TemplateSource

__all__ = [
    "HolidaySource",
    "TemplateSource",
]
