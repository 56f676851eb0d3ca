"""Recurrence pattern generators - pure functions, no I/O."""

from collections.abc import Iterable
from datetime import date

from .dates import add_days, weekday_letter


def generate_weekly(start_date: date, week_count: int, weekdays: Iterable[str]) -> list[date]:
    """
    Dates within week_count weeks from start_date that fall on the given weekdays.

    The window is [start_date, start_date + week_count * 7). week_count is
    clamped to at least 1. An empty weekday set yields an empty list.
    """
    wanted = set(weekdays)
    total_days = max(1, week_count) * 7
    results = []
    for offset in range(total_days):
        d = add_days(start_date, offset)
        if weekday_letter(d) in wanted:
            results.append(d)
    return results


def generate_rolling(
    start_date: date,
    occurrences: int,
    days_in_row: int,
    days_between: int,
) -> list[date]:
    """
    Blocks of consecutive days separated by a fixed gap.

    Block i starts at start_date + i * (days_in_row + days_between) and
    contributes days_in_row dates, so the result has
    occurrences * days_in_row entries.
    """
    results = []
    block_start = 0
    for _ in range(occurrences):
        for j in range(days_in_row):
            results.append(add_days(start_date, block_start + j))
        block_start += days_in_row + days_between
    return results


def resolve_one_time(start_date: date, end_date: date) -> tuple[date, date]:
    """Start/due pair for a one-time task. An end before the start is allowed."""
    return start_date, end_date
