# =============================================================================
# Feast lookups
#
# Movable feasts are resolved against the year of the date being asked about:
# either a signed number of days from that year's Easter, or the Sunday before
# that year's First Sunday of Advent (Christ the King). Fixed feasts are keyed
# by month and day alone. A missing table, or a table with nothing for the day,
# is simply no match.
# =============================================================================

from collections.abc import Mapping
from datetime import timedelta

from .dates import as_date
from .easter import easter_date, first_sunday_of_advent
from .tables import FixedFeast, MovableFeast, has_one_anchor


def month_day_key(day):
    """The `MM-DD` key of `day` in a fixed feast table."""
    return f"{day.month:02d}-{day.day:02d}"


def movable_feast_date(feast, year, easter=None):
    """Return the date movable feast `feast` falls on in year `year`, or None
    if it is not anchored on exactly one of Easter and Advent."""
    if not has_one_anchor(feast):
        return None
    if feast.before_advent:
        return first_sunday_of_advent(year) - timedelta(weeks=1)
    easter = easter or easter_date(year)
    return easter + timedelta(days=feast.offset)


def match_movable_feast(day, movable_feasts, easter=None):
    """Return the first entry of `movable_feasts` falling on `day`, or None.

    Arguments
    ---------
    `day` : str, datetime or date
        Date to look up.
    `movable_feasts` : sequence of MovableFeast
        Table to scan, in order. Entries sharing a day are not reconciled;
        the first one wins. Entries that are not a `MovableFeast` never match.
    `easter` : date
        Easter of `day`'s year, when the caller already has it.
    """
    day = as_date(day)
    if not movable_feasts:
        return None
    easter = easter or easter_date(day.year)
    for feast in movable_feasts:
        if not isinstance(feast, MovableFeast):
            continue
        if movable_feast_date(feast, day.year, easter) == day:
            return feast
    return None


def lookup_fixed_feast(day, fixed_feasts):
    """Return the entry of `fixed_feasts` for `day`'s month and day, or None."""
    if not isinstance(fixed_feasts, Mapping):
        return None
    feast = fixed_feasts.get(month_day_key(as_date(day)))
    if not isinstance(feast, FixedFeast):
        return None
    return feast
