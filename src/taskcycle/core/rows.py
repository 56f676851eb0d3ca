"""Flatten (task, date) pairs into export rows - no I/O."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from .dates import format_date

TASK_COLUMN = "Task name"
START_COLUMN = "Start date"
DUE_COLUMN = "Due date"
LIST_COLUMN = "List"


@dataclass(frozen=True)
class RowOptions:
    """Column options shared by every row of one export."""

    include_start_column: bool = True
    due_equals_start: bool = True
    list_label: str | None = None

    @property
    def has_list(self) -> bool:
        return bool(self.list_label)


@dataclass(frozen=True)
class ExportRow:
    """One line of the export table."""

    task: str
    due: str
    start: str | None = None
    list_label: str | None = None

    def as_dict(self) -> dict[str, str]:
        """Map to export column headers, omitting absent optional columns."""
        row = {TASK_COLUMN: self.task}
        if self.start is not None:
            row[START_COLUMN] = self.start
        row[DUE_COLUMN] = self.due
        if self.list_label:
            row[LIST_COLUMN] = self.list_label
        return row


def columns_for(options: RowOptions) -> list[str]:
    """Ordered header list for an export built with these options."""
    columns = [TASK_COLUMN]
    if options.include_start_column:
        columns.append(START_COLUMN)
    columns.append(DUE_COLUMN)
    if options.has_list:
        columns.append(LIST_COLUMN)
    return columns


def project_rows(task: str, dates: Iterable[date], options: RowOptions) -> list[ExportRow]:
    """
    One row per date, in input order.

    The due column carries the date unless due_equals_start is off, in which
    case it is left blank.
    """
    label = options.list_label or None
    rows = []
    for d in dates:
        formatted = format_date(d)
        rows.append(
            ExportRow(
                task=task,
                start=formatted if options.include_start_column else None,
                due=formatted if options.due_equals_start else "",
                list_label=label,
            )
        )
    return rows


def project_one_time(task: str, start_date: date, end_date: date, options: RowOptions) -> ExportRow:
    """Exactly one row for a one-time task."""
    return ExportRow(
        task=task,
        start=format_date(start_date) if options.include_start_column else None,
        due=format_date(end_date),
        list_label=options.list_label or None,
    )
