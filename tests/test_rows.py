"""Tests for row projection."""

from datetime import date

from taskcycle.core.rows import (
    ExportRow,
    RowOptions,
    columns_for,
    project_one_time,
    project_rows,
)

DATES = [date(2025, 10, 20), date(2025, 10, 22)]


class TestProjectRows:
    def test_default_options(self):
        rows = project_rows("Water plants", DATES, RowOptions())

        assert rows == [
            ExportRow(task="Water plants", start="2025-10-20", due="2025-10-20"),
            ExportRow(task="Water plants", start="2025-10-22", due="2025-10-22"),
        ]

    def test_without_start_column(self):
        rows = project_rows("Gym", DATES, RowOptions(include_start_column=False))
        assert [r.start for r in rows] == [None, None]
        assert [r.due for r in rows] == ["2025-10-20", "2025-10-22"]

    def test_due_blank_when_not_equal_to_start(self):
        rows = project_rows("Gym", DATES, RowOptions(due_equals_start=False))
        assert [r.due for r in rows] == ["", ""]
        assert [r.start for r in rows] == ["2025-10-20", "2025-10-22"]

    def test_list_label_on_every_row(self):
        rows = project_rows("Gym", DATES, RowOptions(list_label="Health"))
        assert all(r.list_label == "Health" for r in rows)

    def test_empty_list_label_dropped(self):
        rows = project_rows("Gym", DATES, RowOptions(list_label=""))
        assert all(r.list_label is None for r in rows)

    def test_keeps_input_order(self):
        dates = [date(2025, 10, 22), date(2025, 10, 20)]
        rows = project_rows("Gym", dates, RowOptions())
        assert [r.due for r in rows] == ["2025-10-22", "2025-10-20"]

    def test_no_dates(self):
        assert project_rows("Gym", [], RowOptions()) == []


class TestProjectOneTime:
    def test_single_row(self):
        d = date(2025, 11, 1)
        row = project_one_time("File taxes", d, d, RowOptions())
        assert row.start == row.due == "2025-11-01"

    def test_inverted_range(self):
        row = project_one_time("Closed", date(2025, 11, 5), date(2025, 11, 1), RowOptions())
        assert row.start == "2025-11-05"
        assert row.due == "2025-11-01"


class TestColumns:
    def test_default(self):
        assert columns_for(RowOptions()) == ["Task name", "Start date", "Due date"]

    def test_all(self):
        assert columns_for(RowOptions(list_label="Work")) == [
            "Task name",
            "Start date",
            "Due date",
            "List",
        ]

    def test_no_start(self):
        assert columns_for(RowOptions(include_start_column=False)) == ["Task name", "Due date"]

    def test_as_dict_matches_columns(self):
        row = ExportRow(task="A", start="2025-10-20", due="2025-10-20", list_label="Work")
        assert list(row.as_dict()) == columns_for(RowOptions(list_label="Work"))

    def test_as_dict_omits_absent(self):
        assert ExportRow(task="A", due="2025-10-20").as_dict() == {
            "Task name": "A",
            "Due date": "2025-10-20",
        }
