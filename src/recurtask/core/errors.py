"""Exception hierarchy for recurtask."""


class RecurtaskError(Exception):
    """Base class for all recurtask errors."""


class ConfigError(RecurtaskError):
    """Input files could not be read or parsed."""


class HolidayLoadError(ConfigError):
    """The holiday file is missing or malformed."""


class TemplateLoadError(ConfigError):
    """The task template file is missing or malformed."""


class UnknownRepeatError(RecurtaskError):
    """A repeat tag is outside the supported rule set. Fatal."""

    def __init__(self, repeat: str, task_name: str = ""):
        self.repeat = repeat
        self.task_name = task_name
        where = f" (task: {task_name})" if task_name else ""
        super().__init__(f"Unsupported repeat setting: {repeat!r}{where}")


class UnknownWeekdayError(RecurtaskError):
    """A weekly repeat tag names a weekday we don't know. The template is skipped."""

    def __init__(self, repeat: str, token: str):
        self.repeat = repeat
        self.token = token
        super().__init__(f"Unknown weekday {token!r} in repeat setting {repeat!r}")
