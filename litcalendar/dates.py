# =============================================================================
# Calendar-day helpers
#
# Everything in this package works on whole calendar days. Times of day are
# dropped on the way in so that a season boundary can never be missed by a few
# hours (daylight saving shifts included).
# =============================================================================

from datetime import datetime, timedelta

SUNDAY = 6  # date.weekday() of a Sunday
WEEK = timedelta(weeks=1)


def as_date(value):
    """Normalize `value` to a `datetime.date`.

    Arguments
    ---------
    `value` : str, datetime or date
        A date string formatted `YYYY-MM-DD`, or a datetime (its time of day
        is discarded), or a date.

    Raises `ValueError` for a string that is not a `YYYY-MM-DD` date.
    """
    if isinstance(value, str):
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    if isinstance(value, datetime):
        return value.date()
    return value


def is_sunday(day):
    return day.weekday() == SUNDAY


def previous_sunday(from_date):
    """Return the Sunday before `from_date`, not counting `from_date` if it is
    itself a Sunday."""
    return from_date - timedelta(days=from_date.weekday() + 1)


def next_sunday(from_date):
    """Return the Sunday after `from_date`, not counting `from_date` if it is
    itself a Sunday."""
    days_ahead = SUNDAY - from_date.weekday()
    if days_ahead == 0:  # a Sunday counts from the one after it
        days_ahead += 7
    return from_date + timedelta(days=days_ahead)


def previous_sundays(from_date, n=1):
    """Return the `n` Sundays prior to `from_date` in chronological order, not
    counting `from_date` if it is a Sunday. The four Sundays before Christmas
    are the Sundays of Advent."""
    nearest = previous_sunday(from_date)
    return [nearest - WEEK * i for i in range(n - 1, -1, -1)]


def weeks_between(start, end):
    """Whole weeks elapsed from `start` to `end`."""
    return (end - start).days // 7
