# =============================================================================
# Countdown to the next major feast, and progress through the civil year
# =============================================================================

import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from .dates import as_date
from .easter import easter_date

ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class MajorFeast:
    name: str
    date: date


@dataclass(frozen=True)
class Countdown:
    name: str
    date: date
    days_until: int


def major_feast_candidates(day):
    """Christmas and Easter of `day`'s year and of the next year."""
    year = as_date(day).year
    return [
        MajorFeast('Christmas', date(year, 12, 25)),
        MajorFeast('Easter', easter_date(year)),
        MajorFeast('Christmas', date(year + 1, 12, 25)),
        MajorFeast('Easter', easter_date(year + 1)),
    ]


def days_until(target, moment):
    """Calendar days from `moment` to midnight of `target`, rounded up.

    `moment` may carry a time of day; a date counts as its midnight.
    """
    if not isinstance(moment, datetime):
        return (target - as_date(moment)).days
    delta = datetime.combine(target, datetime.min.time()) - moment.replace(tzinfo=None)
    return math.ceil(delta / ONE_DAY)


def next_major_feast(moment):
    """Return a `Countdown` to the first major feast strictly after the day
    of `moment`."""
    if isinstance(moment, str):
        moment = as_date(moment)
    day = as_date(moment)
    upcoming = sorted((f for f in major_feast_candidates(day) if f.date > day),
                      key=lambda f: f.date)
    feast = upcoming[0]
    return Countdown(feast.name, feast.date, days_until(feast.date, moment))


def year_progress(moment):
    """Percentage of the civil year of `moment` elapsed at `moment`, rounded
    half up to an integer. A date counts as its midnight, so Jan 1 is 0."""
    if isinstance(moment, str):
        moment = as_date(moment)
    if isinstance(moment, datetime):
        moment = moment.replace(tzinfo=None)
    else:
        moment = datetime.combine(moment, datetime.min.time())
    start = datetime(moment.year, 1, 1)
    end = datetime(moment.year + 1, 1, 1)
    fraction = (moment - start) / (end - start)
    return int(math.floor(fraction * 100 + 0.5))
