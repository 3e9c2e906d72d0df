"""Task template source interface."""

from typing import Protocol

from recurtask.core.schedule import TaskTemplate


class TemplateSource(Protocol):
    """Interface for loading task templates from any backend."""

    def load(self) -> list[TaskTemplate]:
        """Load all templates in file order. Raises TemplateLoadError on failure."""
        ...
