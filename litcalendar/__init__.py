"""Liturgical designation of any Gregorian date in the Roman calendar."""

from .colors import LiturgicalColor
from .countdown import Countdown, MajorFeast, next_major_feast, year_progress
from .easter import (ash_wednesday, baptism_of_the_lord, easter_date,
                     first_sunday_of_advent, liturgical_cycle, pentecost)
from .feasts import lookup_fixed_feast, match_movable_feast
from .ordinals import ordinal, ordinary_time_sunday_name
from .resolver import LiturgicalCalendar, LiturgicalInfo, get_liturgical_info
from .seasons import SeasonClassification, resolve_season
from .tables import (FeastTableError, FixedFeast, MovableFeast,
                     load_fixed_feasts, load_movable_feasts,
                     parse_fixed_feasts, parse_movable_feasts)
from .yeartable import build_year_table, write_year_table

__version__ = "1.0.0"

__all__ = [
    "Countdown",
    "FeastTableError",
    "FixedFeast",
    "LiturgicalCalendar",
    "LiturgicalColor",
    "LiturgicalInfo",
    "MajorFeast",
    "MovableFeast",
    "SeasonClassification",
    "ash_wednesday",
    "baptism_of_the_lord",
    "build_year_table",
    "easter_date",
    "first_sunday_of_advent",
    "get_liturgical_info",
    "liturgical_cycle",
    "load_fixed_feasts",
    "load_movable_feasts",
    "lookup_fixed_feast",
    "match_movable_feast",
    "next_major_feast",
    "ordinal",
    "ordinary_time_sunday_name",
    "parse_fixed_feasts",
    "parse_movable_feasts",
    "pentecost",
    "resolve_season",
    "write_year_table",
    "year_progress",
]
