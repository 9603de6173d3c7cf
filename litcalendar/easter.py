# =============================================================================
# Easter and the dates hung on it
#
# Easter Sunday is computed with the anonymous Gregorian algorithm (Meeus /
# Jones / Butcher). It is only historically meaningful from 1583 on, but the
# arithmetic is defined for any year and never fails. Every other movable date
# of the year is a fixed distance from Easter, from Christmas, or from the
# Epiphany.
# =============================================================================

from datetime import date, timedelta

import numpy as np

from .dates import as_date, next_sunday, previous_sundays

ASH_WEDNESDAY_OFFSET = -46
LAETARE_OFFSET = -21
PENTECOST_OFFSET = 49


def easter_date(year):
    """Return the date of Easter Sunday for year `year`."""
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


def ash_wednesday(year, easter=None):
    """Ash Wednesday opens Lent 46 days before Easter."""
    easter = easter or easter_date(year)
    return easter + timedelta(days=ASH_WEDNESDAY_OFFSET)


def laetare_sunday(year, easter=None):
    """The Fourth Sunday of Lent, three weeks before Easter."""
    easter = easter or easter_date(year)
    return easter + timedelta(days=LAETARE_OFFSET)


def pentecost(year, easter=None):
    """Pentecost closes the Easter season 49 days after Easter."""
    easter = easter or easter_date(year)
    return easter + timedelta(days=PENTECOST_OFFSET)


def first_sunday_of_advent(year):
    """Return the First Sunday of Advent of year `year`.

    There are always four Sundays in Advent, concluding the Sunday before
    Christmas, regardless of what day of the week Christmas falls. Thus, we
    count back four Sundays from Christmas.
    """
    return previous_sundays(date(year, 12, 25), n=4)[0]


def gaudete_sunday(year):
    """The Third Sunday of Advent."""
    return first_sunday_of_advent(year) + timedelta(weeks=2)


def baptism_of_the_lord(year):
    """Return the Baptism of the Lord of year `year`: the Sunday after the
    Epiphany (January 6), or the Sunday after that when the Epiphany is itself
    a Sunday. It closes the Christmas season."""
    return next_sunday(date(year, 1, 6))


def liturgical_cycle(day):
    """Return the Sunday lectionary cycle ("A", "B" or "C") in force on `day`.

    The liturgical year takes its number from the calendar year of its Easter
    and begins on the First Sunday of Advent of the previous calendar year.
    """
    day = as_date(day)
    year = day.year
    if day >= first_sunday_of_advent(year):
        year += 1
    # Pick a starting year for cycle
    A, B, C = 2020, 2021, 2022
    # Array to index
    years = np.array(['A', 'B', 'C'])
    # Return the cycle year whose distance from `year` is evenly divisible by 3
    ind = (year - np.array([A, B, C])) % 3 == 0
    return str(years[ind][0])
