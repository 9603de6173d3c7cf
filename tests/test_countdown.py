# tests/test_countdown.py

from datetime import date, datetime

import pytest

from litcalendar.countdown import (major_feast_candidates, next_major_feast,
                                   year_progress)


def test_candidates_cover_two_years():
    names = [(f.name, f.date.year) for f in major_feast_candidates(date(2025, 5, 1))]
    assert sorted(names) == [("Christmas", 2025), ("Christmas", 2026),
                             ("Easter", 2025), ("Easter", 2026)]


def test_after_christmas_the_next_feast_is_easter():
    countdown = next_major_feast(date(2025, 12, 26))
    assert countdown.name == "Easter"
    assert countdown.date == date(2026, 4, 5)
    assert countdown.days_until == 100


def test_feast_day_itself_does_not_count():
    countdown = next_major_feast(date(2025, 12, 25))
    assert (countdown.name, countdown.days_until) == ("Easter", 101)

    countdown = next_major_feast(date(2025, 4, 20))
    assert (countdown.name, countdown.days_until) == ("Christmas", 249)


def test_eve_of_easter():
    countdown = next_major_feast("2025-04-19")
    assert (countdown.name, countdown.days_until) == ("Easter", 1)


def test_time_of_day_rounds_up():
    countdown = next_major_feast(datetime(2025, 12, 24, 15, 0))
    assert (countdown.name, countdown.days_until) == ("Christmas", 1)


@pytest.mark.parametrize("moment, percent", [
    (date(2025, 1, 1), 0),
    (datetime(2025, 1, 1, 12, 0), 0),
    (date(2025, 7, 2), 50),
    (date(2025, 12, 31), 100),
    (date(2024, 12, 31), 100),
    ("2025-04-01", 25),
])
def test_year_progress(moment, percent):
    assert year_progress(moment) == percent
