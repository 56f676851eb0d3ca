"""Schedule configurations and dispatch to the pattern generators."""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date

from .dates import WEEKDAY_LETTERS
from .errors import EmptyTaskError, EmptyWeekdaySetError, InvalidCountError, InvalidWeekdayError
from .patterns import generate_rolling, generate_weekly, resolve_one_time
from .rows import ExportRow, RowOptions, project_one_time, project_rows

logger = logging.getLogger(__name__)

WEEKLY = "weekly"
ROLLING = "rolling"
ONE_TIME = "one-time"

KINDS = (WEEKLY, ROLLING, ONE_TIME)


def normalize_task(label: str) -> str:
    """Trim a task label. Raises EmptyTaskError if nothing is left."""
    task = str(label).strip()
    if not task:
        raise EmptyTaskError(f"Task label is empty: {label!r}")
    return task


@dataclass(frozen=True)
class WeeklyConfig:
    """Repeat on a set of weekdays for a number of weeks."""

    task: str
    weekdays: frozenset[str]
    start_date: date
    weeks: int = 4

    @property
    def kind(self) -> str:
        return WEEKLY


@dataclass(frozen=True)
class RollingConfig:
    """Blocks of consecutive days followed by a gap."""

    task: str
    start_date: date
    occurrences: int = 4
    days_in_row: int = 1
    days_between: int = 7

    @property
    def kind(self) -> str:
        return ROLLING


@dataclass(frozen=True)
class OneTimeConfig:
    """A single item with independent start and due dates."""

    task: str
    start_date: date
    end_date: date

    @property
    def kind(self) -> str:
        return ONE_TIME


ScheduleConfig = WeeklyConfig | RollingConfig | OneTimeConfig


def _require_count(config: ScheduleConfig, name: str, value: int, minimum: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or value < minimum:
        raise InvalidCountError(
            f"[{config.task}] {name} must be an integer >= {minimum}, got {value!r}"
        )


def validate_config(config: ScheduleConfig) -> None:
    """
    Reject configurations the generators should never see.

    Raises a ConfigurationError subclass quoting the task and offending value.
    """
    normalize_task(config.task)
    match config:
        case WeeklyConfig():
            if not config.weekdays:
                raise EmptyWeekdaySetError(f"[{config.task}] Select at least one weekday")
            unknown = sorted(set(config.weekdays) - set(WEEKDAY_LETTERS))
            if unknown:
                raise InvalidWeekdayError(
                    f"[{config.task}] Unknown weekday letter(s): {', '.join(unknown)}"
                )
            _require_count(config, "weeks", config.weeks, 1)
        case RollingConfig():
            _require_count(config, "occurrences", config.occurrences, 1)
            _require_count(config, "days_in_row", config.days_in_row, 1)
            _require_count(config, "days_between", config.days_between, 0)
        case OneTimeConfig():
            pass


def generate_dates(config: ScheduleConfig) -> list[date]:
    """
    Route a configuration to its generator.

    No validation happens here: an empty weekday set yields no dates and a
    non-positive week count is clamped to one week. A one-time task yields
    its start date only; its due date is carried by rows_for.
    """
    match config:
        case WeeklyConfig():
            return generate_weekly(config.start_date, config.weeks, config.weekdays)
        case RollingConfig():
            return generate_rolling(
                config.start_date, config.occurrences, config.days_in_row, config.days_between
            )
        case OneTimeConfig():
            start, _ = resolve_one_time(config.start_date, config.end_date)
            return [start]
    raise TypeError(f"Unsupported schedule configuration: {config!r}")


def rows_for(config: ScheduleConfig, options: RowOptions) -> list[ExportRow]:
    """Export rows for a single configuration."""
    if isinstance(config, OneTimeConfig):
        start, end = resolve_one_time(config.start_date, config.end_date)
        return [project_one_time(config.task, start, end, options)]
    return project_rows(config.task, generate_dates(config), options)


def build_rows(configs: Iterable[ScheduleConfig], options: RowOptions) -> list[ExportRow]:
    """
    Validate each configuration and flatten all of them into rows.

    Rows keep configuration order, then date order within a configuration.
    """
    rows: list[ExportRow] = []
    for config in configs:
        validate_config(config)
        config_rows = rows_for(config, options)
        logger.debug(f"{config.kind} task {config.task!r}: {len(config_rows)} row(s)")
        rows.extend(config_rows)
    return rows


def summarize(configs: Iterable[ScheduleConfig]) -> dict[str, int]:
    """Count configurations per kind."""
    counts = {kind: 0 for kind in KINDS}
    for config in configs:
        counts[config.kind] += 1
    return counts


def partition_tasks(
    tasks: Sequence[str],
    weekly: Iterable[str],
    rolling: Iterable[str],
) -> tuple[list[str], list[str], list[str]]:
    """
    Split tasks into weekly, rolling and one-time groups.

    A task chosen as weekly is never rolling. Everything not chosen is
    one-time. Each group keeps source order.

    Returns: (weekly_tasks, rolling_tasks, one_time_tasks)
    """
    weekly_set = set(weekly)
    rolling_set = set(rolling) - weekly_set
    weekly_tasks = [t for t in tasks if t in weekly_set]
    rolling_tasks = [t for t in tasks if t in rolling_set]
    one_time = [t for t in tasks if t not in weekly_set and t not in rolling_set]
    return weekly_tasks, rolling_tasks, one_time
