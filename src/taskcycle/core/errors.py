"""Error types raised by the scheduling core."""


class TaskcycleError(Exception):
    """Base class for all taskcycle errors."""

    pass


class InvalidDateError(TaskcycleError, ValueError):
    """Raised when text does not resolve to a calendar date."""

    pass


class TaskSourceError(TaskcycleError):
    """Raised when a task list cannot be read or parsed."""

    pass


class ExportError(TaskcycleError):
    """Raised when the export file cannot be written."""

    pass


class ConfigurationError(TaskcycleError, ValueError):
    """Raised when a schedule configuration is rejected."""

    pass


class EmptyTaskError(ConfigurationError):
    pass


class EmptyWeekdaySetError(ConfigurationError):
    pass


class InvalidWeekdayError(ConfigurationError):
    pass


class InvalidCountError(ConfigurationError):
    pass
