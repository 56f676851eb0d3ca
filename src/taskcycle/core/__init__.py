"""Functional core - pure scheduling logic with no I/O."""

from .dates import (
    WEEKDAY_LETTERS,
    add_days,
    format_date,
    parse_loose_date,
    parse_weekday_letters,
    weekday_letter,
)
from .errors import (
    ConfigurationError,
    EmptyTaskError,
    EmptyWeekdaySetError,
    ExportError,
    InvalidCountError,
    InvalidDateError,
    InvalidWeekdayError,
    TaskcycleError,
    TaskSourceError,
)
from .patterns import generate_rolling, generate_weekly, resolve_one_time
from .rows import ExportRow, RowOptions, columns_for, project_one_time, project_rows
from .schedule import (
    OneTimeConfig,
    RollingConfig,
    ScheduleConfig,
    WeeklyConfig,
    build_rows,
    generate_dates,
    partition_tasks,
    validate_config,
)

__all__ = [
    # Dates
    "WEEKDAY_LETTERS",
    "add_days",
    "format_date",
    "parse_loose_date",
    "parse_weekday_letters",
    "weekday_letter",
    # Errors
    "TaskcycleError",
    "InvalidDateError",
    "TaskSourceError",
    "ExportError",
    "ConfigurationError",
    "EmptyTaskError",
    "EmptyWeekdaySetError",
    "InvalidCountError",
    "InvalidWeekdayError",
    # Patterns
    "generate_weekly",
    "generate_rolling",
    "resolve_one_time",
    # Rows
    "ExportRow",
    "RowOptions",
    "columns_for",
    "project_rows",
    "project_one_time",
    # Schedule
    "WeeklyConfig",
    "RollingConfig",
    "OneTimeConfig",
    "ScheduleConfig",
    "validate_config",
    "generate_dates",
    "build_rows",
    "partition_tasks",
]
