"""Tests for the recurrence generators."""

from datetime import date, timedelta

import pytest

from taskcycle.core.dates import format_date, weekday_letter
from taskcycle.core.patterns import generate_rolling, generate_weekly, resolve_one_time


@pytest.fixture
def monday():
    return date(2025, 10, 20)


class TestGenerateWeekly:
    def test_mwf_four_weeks(self, monday):
        dates = generate_weekly(monday, 4, {"M", "W", "F"})

        assert len(dates) == 12
        assert format_date(dates[0]) == "2025-10-20"
        assert format_date(dates[-1]) == "2025-11-14"

    @pytest.mark.parametrize("weeks", [1, 2, 5])
    @pytest.mark.parametrize("days", [{"U"}, {"M", "H"}, {"T", "S", "U"}, set("UMTWHFS")])
    def test_length_and_membership(self, monday, weeks, days):
        dates = generate_weekly(monday, weeks, days)

        assert len(dates) == weeks * len(days)
        end = monday + timedelta(days=weeks * 7)
        for d in dates:
            assert weekday_letter(d) in days
            assert monday <= d < end

    def test_ascending(self, monday):
        dates = generate_weekly(monday, 3, {"S", "M"})
        assert dates == sorted(dates)
        assert len(set(dates)) == len(dates)

    def test_start_mid_week(self):
        # Thursday start: first Monday is the following week
        dates = generate_weekly(date(2025, 10, 23), 1, {"M"})
        assert dates == [date(2025, 10, 27)]

    @pytest.mark.parametrize("weeks", [0, -3])
    def test_week_count_clamped(self, monday, weeks):
        assert generate_weekly(monday, weeks, {"M"}) == [monday]

    def test_empty_weekdays(self, monday):
        assert generate_weekly(monday, 4, set()) == []


class TestGenerateRolling:
    def test_blocks_with_gap(self, monday):
        dates = generate_rolling(monday, 6, 3, 11)

        assert len(dates) == 18
        assert dates[:3] == [date(2025, 10, 20), date(2025, 10, 21), date(2025, 10, 22)]
        assert dates[3] == date(2025, 11, 3)

    @pytest.mark.parametrize("occurrences,in_row,between", [(4, 1, 7), (3, 2, 0), (5, 4, 2)])
    def test_block_spacing(self, monday, occurrences, in_row, between):
        dates = generate_rolling(monday, occurrences, in_row, between)

        assert len(dates) == occurrences * in_row
        for i in range(occurrences):
            block = dates[i * in_row : (i + 1) * in_row]
            for a, b in zip(block, block[1:]):
                assert (b - a).days == 1
            if i + 1 < occurrences:
                next_start = dates[(i + 1) * in_row]
                assert (next_start - block[-1]).days == between + 1

    def test_zero_gap_is_unbroken(self, monday):
        dates = generate_rolling(monday, 3, 2, 0)
        assert dates == [monday + timedelta(days=i) for i in range(6)]

    def test_zero_occurrences(self, monday):
        assert generate_rolling(monday, 0, 3, 2) == []


class TestResolveOneTime:
    def test_pass_through(self):
        d = date(2025, 11, 1)
        assert resolve_one_time(d, d) == (d, d)

    def test_inverted_range_allowed(self):
        start, end = date(2025, 11, 5), date(2025, 11, 1)
        assert resolve_one_time(start, end) == (start, end)
