# =============================================================================
# Sundays in Ordinary Time
#
# Ordinary Time runs twice a year: from the Baptism of the Lord to Ash
# Wednesday (winter), and from Pentecost to Advent (summer). Its Sundays are
# numbered by whole weeks elapsed since the feast that opened the span, so the
# Sunday right after the Baptism of the Lord is the 2nd Sunday in Ordinary Time;
# there is no 1st, the Baptism itself closes the Christmas season.
# =============================================================================

from num2words import num2words

from .dates import as_date, is_sunday, weeks_between
from .easter import ash_wednesday, baptism_of_the_lord, easter_date, pentecost


def ordinal(n):
    """Return `n` with its English ordinal suffix: 1st, 2nd, 3rd, 4th, 11th,
    12th, 13th, 21st, 111th, ..."""
    return num2words(n, to='ordinal_num', lang='en')


def ordinary_time_sunday_number(day, easter=None):
    """Return the number of Sunday `day` in Ordinary Time, or None.

    None is returned for weekdays and for Sundays outside both spans of
    Ordinary Time.
    """
    day = as_date(day)
    if not is_sunday(day):
        return None
    year = day.year
    easter = easter or easter_date(year)

    baptism = baptism_of_the_lord(year)
    if baptism < day < ash_wednesday(year, easter):
        return weeks_between(baptism, day) + 1

    whitsun = pentecost(year, easter)
    if day > whitsun:
        return weeks_between(whitsun, day) + 1
    return None


def ordinary_time_sunday_name(day, easter=None):
    """Name Sunday `day` in Ordinary Time, e.g. "5th Sunday in Ordinary Time".
    Returns None where `ordinary_time_sunday_number` does."""
    number = ordinary_time_sunday_number(day, easter)
    if number is None:
        return None
    return f'{ordinal(number)} Sunday in Ordinary Time'
