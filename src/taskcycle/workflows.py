"""Shared workflow layer between the CLI front ends and the core.

The interactive and plan-file commands both end in export_schedule: build
rows, write them, and return a summary for display.
"""

import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .adapters.csv_export import CsvRowWriter
from .adapters.file_tasks import FileTaskSource
from .config import Config
from .core.dates import parse_loose_date, parse_weekday_letters
from .core.errors import ConfigurationError, TaskSourceError
from .core.rows import ExportRow, RowOptions, columns_for
from .core.schedule import (
    ONE_TIME,
    ROLLING,
    WEEKLY,
    OneTimeConfig,
    RollingConfig,
    ScheduleConfig,
    WeeklyConfig,
    build_rows,
    normalize_task,
    summarize,
)
from .ports import RowWriter, TaskSource

logger = logging.getLogger(__name__)


@dataclass
class ExportResult:
    """Outcome of one export run."""

    path: Path
    total_rows: int
    counts: dict[str, int] = field(default_factory=dict)


def get_task_source(config: Config) -> TaskSource:
    """Resolve the task source from config."""
    return FileTaskSource(config.input_path)


def get_writer(config: Config) -> CsvRowWriter:
    """Resolve the export writer from config."""
    return CsvRowWriter(config.output_path, prefix=config.file_prefix)


def export_schedule(
    configs: Sequence[ScheduleConfig],
    options: RowOptions,
    writer: RowWriter,
) -> ExportResult:
    """Build rows for every configuration and write them in one file."""
    rows = build_rows(configs, options)
    path = writer.write(rows, columns_for(options))
    counts = summarize(configs)
    logger.info(
        f"Exported {len(rows)} row(s): {counts[WEEKLY]} weekly, "
        f"{counts[ROLLING]} rolling, {counts[ONE_TIME]} one-time"
    )
    return ExportResult(path=path, total_rows=len(rows), counts=counts)


def preview_rows(configs: Sequence[ScheduleConfig], options: RowOptions) -> list[ExportRow]:
    """Rows an export would contain, without writing anything."""
    return build_rows(configs, options)


# ============== Plan Files ==============


def _count(entry: dict, key: str, default: int) -> int:
    value = entry.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"[{entry.get('task')}] {key} must be an integer, got {value!r}")
    return value


def _weekdays(entry: dict) -> frozenset[str]:
    days = entry.get("days", "")
    if isinstance(days, list):
        days = "".join(str(d) for d in days)
    return parse_weekday_letters(str(days))


def config_from_entry(entry: dict, defaults: Config) -> ScheduleConfig:
    """Build one schedule configuration from a plan entry."""
    if not isinstance(entry, dict):
        raise ConfigurationError(f"Plan entries must be objects, got {entry!r}")

    task = normalize_task(entry.get("task", ""))
    kind = str(entry.get("type", "")).strip().lower()
    start = parse_loose_date(entry.get("start", ""))

    match kind:
        case "weekly":
            return WeeklyConfig(
                task=task,
                weekdays=_weekdays(entry),
                start_date=start,
                weeks=_count(entry, "weeks", defaults.default_weeks),
            )
        case "rolling":
            return RollingConfig(
                task=task,
                start_date=start,
                occurrences=_count(entry, "occurrences", defaults.default_occurrences),
                days_in_row=_count(entry, "days_in_row", defaults.default_days_in_row),
                days_between=_count(entry, "days_between", defaults.default_days_between),
            )
        case "one-time" | "onetime" | "one_time":
            due = entry.get("due", entry.get("end", ""))
            return OneTimeConfig(task=task, start_date=start, end_date=parse_loose_date(due))
        case _:
            raise ConfigurationError(f"[{task}] Unknown schedule type: {entry.get('type')!r}")


def load_plan(path: Path, defaults: Config) -> tuple[list[ScheduleConfig], str]:
    """
    Load a declarative plan file.

    Returns: (configs, list_label)
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise TaskSourceError(f"Cannot read plan {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise TaskSourceError(f"Plan is not valid UTF-8: {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise TaskSourceError(f"Invalid JSON in plan {path}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("tasks"), list):
        raise TaskSourceError(f"Plan {path} must be an object with a 'tasks' array")

    configs = [config_from_entry(entry, defaults) for entry in data["tasks"]]
    list_label = str(data.get("list") or "")
    logger.info(f"Loaded {len(configs)} schedule(s) from {path}")
    return configs, list_label
