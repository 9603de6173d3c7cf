# =============================================================================
# Liturgical designation of a single day
#
# Precedence is fixed: a movable feast beats a fixed feast, and a fixed feast
# beats the season. A `12-25` entry in the fixed table therefore names Christmas
# Day before the Christmas season is ever consulted.
# =============================================================================

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from .colors import LiturgicalColor
from .dates import as_date
from .easter import easter_date
from .feasts import lookup_fixed_feast, match_movable_feast
from .seasons import resolve_season
from .tables import (fixed_table, load_fixed_feasts, load_movable_feasts,
                     movable_table)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LiturgicalInfo:
    name: Optional[str]
    color: LiturgicalColor
    season: str


def get_liturgical_info(day, fixed_feasts=None, movable_feasts=None):
    """Return the `LiturgicalInfo` for `day`.

    Arguments
    ---------
    `day` : str, datetime or date
        Date to classify.
    `fixed_feasts` : mapping of "MM-DD" to FixedFeast
        Fixed feast table, or None for no fixed feasts. A raw mapping of
        "MM-DD" to `{name, color}` is parsed first.
    `movable_feasts` : sequence of MovableFeast
        Movable feast table, or None for no movable feasts. A raw mapping of
        key to `{name, color, offset | anchoredBeforeAdvent}` is parsed first.
    """
    day = as_date(day)
    easter = easter_date(day.year)
    season = resolve_season(day, easter)

    feast = match_movable_feast(day, movable_table(movable_feasts), easter)
    if feast is not None:
        logger.debug("%s is movable feast %s", day, feast.key)
        return LiturgicalInfo(feast.name, feast.color, season.season)

    feast = lookup_fixed_feast(day, fixed_table(fixed_feasts))
    if feast is not None:
        logger.debug("%s is fixed feast %s", day, feast.key)
        return LiturgicalInfo(feast.name, feast.color, season.season)

    return LiturgicalInfo(season.display_name, season.color, season.season)


class LiturgicalCalendar:
    """A pair of feast tables bound for repeated lookups.

    The tables are parsed once here and must not change afterwards; results
    are cached per date on that assumption.
    """

    def __init__(self, fixed_feasts=None, movable_feasts=None, cache_size=1024):
        self.fixed_feasts = fixed_table(fixed_feasts)
        self.movable_feasts = movable_table(movable_feasts)
        self._info = lru_cache(maxsize=cache_size)(self._resolve)

    @classmethod
    def from_files(cls, fixed_path=None, movable_path=None, **kwargs):
        """Build a calendar from JSON table files; None picks the bundled
        table."""
        return cls(load_fixed_feasts(fixed_path),
                   load_movable_feasts(movable_path), **kwargs)

    def _resolve(self, day):
        return get_liturgical_info(day, self.fixed_feasts, self.movable_feasts)

    def info(self, day):
        return self._info(as_date(day))

    def year_table(self, year):
        from .yeartable import build_year_table
        return build_year_table(year, self.fixed_feasts, self.movable_feasts,
                                resolve=self.info)
