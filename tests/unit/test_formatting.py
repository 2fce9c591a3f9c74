"""Unit tests for the shared date formatting rules."""

from datetime import date

import pytest

from resumekit.contexts.templating.formatting import format_date_range, format_month_year, join_nonempty


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, expected",
    [
        (date(2024, 1, 15), "Jan 2024"),
        (date(2019, 9, 1), "Sep 2019"),
        (date(2000, 12, 31), "Dec 2000"),
        (None, ""),
    ],
)
def test_format_month_year(value, expected):
    assert format_month_year(value) == expected


@pytest.mark.unit
def test_format_month_year_ignores_day():
    assert format_month_year(date(2024, 3, 1)) == format_month_year(date(2024, 3, 31))


class TestDateRange:
    @pytest.mark.unit
    def test_finished_range(self):
        assert format_date_range(date(2017, 6, 1), date(2021, 2, 28)) == "Jun 2017 - Feb 2021"

    @pytest.mark.unit
    def test_current_shows_present(self):
        assert format_date_range(date(2021, 3, 1), None, is_current=True) == "Mar 2021 - Present"

    @pytest.mark.unit
    def test_current_ignores_end_date(self):
        assert format_date_range(date(2021, 3, 1), date(2022, 1, 1), is_current=True) == "Mar 2021 - Present"

    @pytest.mark.unit
    def test_missing_end_shows_start_only(self):
        assert format_date_range(date(2021, 3, 1), None) == "Mar 2021"

    @pytest.mark.unit
    def test_missing_start(self):
        assert format_date_range(None, date(2020, 5, 1)) == "May 2020"
        assert format_date_range(None, None, is_current=True) == "Present"
        assert format_date_range(None, None) == ""


@pytest.mark.unit
def test_join_nonempty():
    assert join_nonempty("Acme", None, "", "Remote") == "Acme | Remote"
    assert join_nonempty(None, None) == ""
