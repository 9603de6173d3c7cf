# =============================================================================
# Liturgical seasons
#
# The seasons are tested in a fixed order and the first one that claims a date
# wins:
#
#   Christmas  Dec 25 through the Baptism of the Lord. The season straddles the
#              New Year, so a date may belong to the season that began last
#              December or to the one beginning this December.
#   Advent     First Sunday of Advent through Dec 24. Gaudete, the third
#              Sunday, is rose.
#   Lent       Ash Wednesday through Holy Saturday. Laetare, the fourth Sunday,
#              is rose.
#   Easter     Easter Sunday through Pentecost.
#
# Whatever is left is Ordinary Time, where only Sundays get a name.
# =============================================================================

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from .colors import LiturgicalColor
from .dates import as_date
from .easter import (ash_wednesday, baptism_of_the_lord, easter_date,
                     first_sunday_of_advent, gaudete_sunday, laetare_sunday,
                     pentecost)
from .ordinals import ordinary_time_sunday_name

ADVENT = 'Advent'
CHRISTMAS = 'Christmas'
LENT = 'Lent'
EASTER = 'Easter'
ORDINARY_TIME = 'Ordinary Time'

SEASONS = (ADVENT, CHRISTMAS, LENT, EASTER, ORDINARY_TIME)


@dataclass(frozen=True)
class SeasonClassification:
    season: str
    color: LiturgicalColor
    display_name: Optional[str] = None


def in_christmas_season(day):
    """True if `day` falls in a Christmas season, whichever year it began."""
    year = day.year
    if date(year - 1, 12, 25) <= day <= baptism_of_the_lord(year):
        return True
    return date(year, 12, 25) <= day <= baptism_of_the_lord(year + 1)


def resolve_season(day, easter=None):
    """Classify `day` into its liturgical season.

    Arguments
    ---------
    `day` : str, datetime or date
        Date to classify.
    `easter` : date
        Easter of `day`'s year, when the caller already has it.

    Returns
    -------
        A `SeasonClassification`. Its `display_name` is only set on Sundays
        in Ordinary Time.
    """
    day = as_date(day)
    year = day.year
    easter = easter or easter_date(year)

    if in_christmas_season(day):
        return SeasonClassification(CHRISTMAS, LiturgicalColor.WHITE)

    if first_sunday_of_advent(year) <= day <= date(year, 12, 24):
        if day == gaudete_sunday(year):
            return SeasonClassification(ADVENT, LiturgicalColor.ROSE)
        return SeasonClassification(ADVENT, LiturgicalColor.VIOLET)

    if ash_wednesday(year, easter) <= day <= easter - timedelta(days=1):
        if day == laetare_sunday(year, easter):
            return SeasonClassification(LENT, LiturgicalColor.ROSE)
        return SeasonClassification(LENT, LiturgicalColor.VIOLET)

    if easter <= day <= pentecost(year, easter):
        return SeasonClassification(EASTER, LiturgicalColor.WHITE)

    return SeasonClassification(ORDINARY_TIME, LiturgicalColor.GREEN,
                                ordinary_time_sunday_name(day, easter))
