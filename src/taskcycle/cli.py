"""taskcycle CLI - recurring task schedules for ClickUp import."""

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from .config import ensure_dirs, load_config
from .core.dates import (
    WEEKDAY_NAMES,
    WEEKDAY_ORDER,
    format_date,
    parse_loose_date,
    parse_weekday_letters,
    today,
)
from .core.errors import InvalidDateError, InvalidWeekdayError, TaskcycleError
from .core.rows import RowOptions
from .core.schedule import (
    ONE_TIME,
    ROLLING,
    WEEKLY,
    OneTimeConfig,
    RollingConfig,
    ScheduleConfig,
    WeeklyConfig,
    partition_tasks,
)
from .workflows import ExportResult, export_schedule, get_task_source, get_writer, load_plan, preview_rows

RULE = "=" * 60


class LooseDate(click.ParamType):
    """YYYY-MM-DD or YYYY/MM/DD."""

    name = "date"

    def convert(self, value, param, ctx):
        if not isinstance(value, str):
            return value
        try:
            return parse_loose_date(value)
        except InvalidDateError as e:
            self.fail(str(e), param, ctx)


class WeekdaySet(click.ParamType):
    """A non-empty set of weekday letters."""

    name = "weekdays"

    def convert(self, value, param, ctx):
        if isinstance(value, frozenset):
            return value
        try:
            days = parse_weekday_letters(value)
        except InvalidWeekdayError as e:
            self.fail(str(e), param, ctx)
        if not days:
            self.fail("Select at least one day", param, ctx)
        return days


class Selection(click.ParamType):
    """Comma-separated 1-based indices into a list of choices; blank selects none."""

    name = "selection"

    def __init__(self, choices: list[str]):
        self.choices = choices

    def convert(self, value, param, ctx):
        if isinstance(value, list):
            return value
        picked: list[str] = []
        for part in str(value).replace(" ", ",").split(","):
            if not part:
                continue
            if not part.isdigit() or not 1 <= int(part) <= len(self.choices):
                self.fail(f"{part!r} is not a number between 1 and {len(self.choices)}", param, ctx)
            choice = self.choices[int(part) - 1]
            if choice not in picked:
                picked.append(choice)
        return picked


def _fail(e: Exception) -> NoReturn:
    click.echo(f"Error: {e}", err=True)
    sys.exit(1)


def _setup_logging(debug: bool) -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else logging.WARNING,
    )


def _select(title: str, tasks: list[str]) -> list[str]:
    """Show numbered tasks and ask which ones to pick."""
    if not tasks:
        return []
    click.echo(f"\n{title}")
    for i, task in enumerate(tasks, 1):
        click.echo(f"  {i:>2}. {task}")
    return click.prompt(
        "Numbers, comma-separated (blank for none)",
        type=Selection(tasks),
        default="",
        show_default=False,
    )


def _banner(label: str, task: str) -> None:
    click.echo(f"\n{RULE}")
    click.echo(f'{label}: "{task}"')
    click.echo(RULE)


def _prompt_date(task: str, label: str):
    return click.prompt(f"[{task}] {label} (YYYY-MM-DD)", type=LooseDate(), default=format_date(today()))


def _configure_weekly(task: str, config) -> WeeklyConfig:
    _banner("WEEKLY TASK", task)
    legend = " ".join(f"{letter}={WEEKDAY_NAMES[letter]}" for letter in WEEKDAY_ORDER)
    days = click.prompt(f"[{task}] Pick weekdays to repeat ({legend})", type=WeekdaySet())
    start = _prompt_date(task, "Start date")
    weeks = click.prompt(
        f"[{task}] Number of weeks to generate",
        type=click.IntRange(min=1),
        default=config.default_weeks,
    )
    return WeeklyConfig(task=task, weekdays=days, start_date=start, weeks=weeks)


def _configure_rolling(task: str, config) -> RollingConfig:
    _banner("ROLLING TASK", task)
    start = _prompt_date(task, "Start date")
    occurrences = click.prompt(
        f"[{task}] How many occurrences to generate?",
        type=click.IntRange(min=1),
        default=config.default_occurrences,
    )
    days_in_row = click.prompt(
        f"[{task}] How many days in a row for each occurrence?",
        type=click.IntRange(min=1),
        default=config.default_days_in_row,
    )
    days_between = click.prompt(
        f"[{task}] How many days between each occurrence?",
        type=click.IntRange(min=0),
        default=config.default_days_between,
    )
    return RollingConfig(
        task=task,
        start_date=start,
        occurrences=occurrences,
        days_in_row=days_in_row,
        days_between=days_between,
    )


def _configure_one_time(task: str) -> OneTimeConfig:
    _banner("ONE-TIME TASK", task)
    start = _prompt_date(task, "Start date")
    end = _prompt_date(task, "Due date")
    return OneTimeConfig(task=task, start_date=start, end_date=end)


def _report(result: ExportResult, options: RowOptions) -> None:
    click.echo(f"\n✓ CSV written to: {result.path}")
    click.echo(f"  Total rows: {result.total_rows}")
    click.echo(f"  Weekly tasks: {result.counts[WEEKLY]}")
    click.echo(f"  Rolling tasks: {result.counts[ROLLING]}")
    click.echo(f"  One-time tasks: {result.counts[ONE_TIME]}")

    mapped = ['"Task name"']
    if options.include_start_column:
        mapped.append('"Start date"')
    mapped.append('"Due date"')
    if options.has_list:
        mapped.append('"List"')
    click.echo(
        "\nImport in ClickUp: Settings → Import/Export → Import → Spreadsheet → "
        f"map {', '.join(mapped)}."
    )


def _options(config, list_label: str | None, no_start_column: bool) -> RowOptions:
    return RowOptions(
        include_start_column=config.include_start_column and not no_start_column,
        list_label=list_label or None,
    )


@click.group()
@click.version_option()
def main():
    """taskcycle - recurring task schedules for ClickUp import."""
    pass


@main.command()
def files():
    """List task files in the input directory."""
    config = load_config()
    source = get_task_source(config)
    names = source.list_sources()
    if not names:
        click.echo(f"No input files found in {config.input_path}/")
        return
    for name in names:
        click.echo(name)


@main.command()
@click.option("--file", "-f", "file_name", default=None, help="Task file in the input directory")
@click.option("--list", "-l", "list_label", default=None, help="List name label column")
@click.option("--no-start-column", is_flag=True, help="Omit the Start date column")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def generate(file_name: str | None, list_label: str | None, no_start_column: bool, debug: bool):
    """Interactively schedule tasks from a file and export a CSV."""
    _setup_logging(debug)
    config = load_config()
    ensure_dirs(config)
    source = get_task_source(config)

    names = source.list_sources()
    if not names:
        click.echo(
            f"No input files found in {config.input_path}/\n"
            "- Add a .txt (newline per task) or .json (array of strings) and run again."
        )
        sys.exit(1)

    if file_name is None:
        if len(names) == 1:
            file_name = names[0]
        else:
            click.echo("Task lists:")
            for i, name in enumerate(names, 1):
                click.echo(f"  {i:>2}. {name}")
            index = click.prompt("Choose a task list", type=click.IntRange(1, len(names)))
            file_name = names[index - 1]

    try:
        tasks = source.load(file_name)
    except TaskcycleError as e:
        _fail(e)

    if not tasks:
        click.echo("The selected file has no tasks.")
        sys.exit(1)

    weekly = _select("WEEKLY PATTERN: Select tasks to cycle weekly", tasks)
    remaining = [t for t in tasks if t not in weekly]
    rolling = _select("ROLLING PATTERN: Select tasks to cycle with rolling pattern", remaining)
    weekly_tasks, rolling_tasks, one_time_tasks = partition_tasks(tasks, weekly, rolling)

    configs: list[ScheduleConfig] = []
    configs.extend(_configure_weekly(t, config) for t in weekly_tasks)
    configs.extend(_configure_rolling(t, config) for t in rolling_tasks)
    configs.extend(_configure_one_time(t) for t in one_time_tasks)

    if list_label is None:
        list_label = click.prompt(
            "Optional: a List name label column (leave blank to skip)",
            default=config.list_name,
            show_default=bool(config.list_name),
        )

    options = _options(config, list_label, no_start_column)
    try:
        result = export_schedule(configs, options, get_writer(config))
    except TaskcycleError as e:
        _fail(e)
    _report(result, options)


@main.command()
@click.argument("plan_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--list", "-l", "list_label", default=None, help="Override the plan's list label")
@click.option("--no-start-column", is_flag=True, help="Omit the Start date column")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def plan(plan_file: Path, list_label: str | None, no_start_column: bool, debug: bool):
    """Export a CSV from a JSON plan file."""
    _setup_logging(debug)
    config = load_config()
    try:
        configs, plan_label = load_plan(plan_file, config)
        label = list_label if list_label is not None else (plan_label or config.list_name)
        options = _options(config, label, no_start_column)
        result = export_schedule(configs, options, get_writer(config))
    except TaskcycleError as e:
        _fail(e)
    _report(result, options)


@main.command()
@click.argument("plan_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def preview(plan_file: Path):
    """Print the rows a plan would export, without writing a file."""
    config = load_config()
    try:
        configs, plan_label = load_plan(plan_file, config)
        rows = preview_rows(configs, _options(config, plan_label or config.list_name, False))
    except TaskcycleError as e:
        _fail(e)

    if not rows:
        click.echo("No rows.")
        return
    for row in rows:
        click.echo(f"{row.task}  {row.start or '':10}  {row.due}")


if __name__ == "__main__":
    main()
