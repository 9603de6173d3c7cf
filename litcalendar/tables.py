# =============================================================================
# Fixed and movable feast tables
#
# Both tables arrive as plain mappings, usually decoded from JSON. Fixed feasts
# are keyed by `MM-DD`:
#
#   {"12-25": {"name": "Christmas", "color": "white"}}
#
# Movable feasts are keyed by a slug and anchored either on Easter or on the
# Sunday before Advent:
#
#   {"good-friday": {"name": "Good Friday", "color": "red", "offset": -2},
#    "christ-the-king": {"name": "Christ the King", "color": "white",
#                        "anchoredBeforeAdvent": true}}
#
# Malformed entries are dropped with a warning rather than raised, so a bad row
# costs one lookup a match and nothing more.
# =============================================================================

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from importlib import resources
from types import MappingProxyType
from typing import Optional

from titlecase import titlecase

from .colors import LiturgicalColor

logger = logging.getLogger(__name__)

DEFAULT_FIXED_TABLE = "fixed_feasts.json"
DEFAULT_MOVABLE_TABLE = "movable_feasts.json"


class FeastTableError(ValueError):
    """A feast table file could not be read as a JSON object."""


@dataclass(frozen=True)
class FixedFeast:
    key: str
    name: str
    color: LiturgicalColor


@dataclass(frozen=True)
class MovableFeast:
    key: str
    name: str
    color: LiturgicalColor
    offset: Optional[int] = None
    before_advent: bool = False


def feast_name(key):
    """Derive the name of an occasion from its table key, e.g.
    `good-friday` -> `Good Friday`."""
    return titlecase(key.replace('-', ' ').replace('_', ' '))


def has_one_anchor(feast):
    """True if movable feast `feast` is anchored on Easter or on Advent, but
    not both."""
    return (feast.offset is None) == bool(feast.before_advent)


def _is_month_day(key):
    try:
        # 2000 is a leap year, so "02-29" is a valid key.
        datetime.strptime(f"2000-{key}", "%Y-%m-%d")
    except (TypeError, ValueError):
        return False
    return len(key) == 5


def _name_and_color(key, entry):
    if not isinstance(entry, Mapping):
        logger.warning("Feast %r is not a mapping, skipping.", key)
        return None, None
    color = LiturgicalColor.parse(entry.get('color'))
    if color is None:
        logger.warning("Feast %r has unknown color %r, skipping.", key, entry.get('color'))
        return None, None
    name = entry.get('name') or feast_name(str(key))
    return name, color


def parse_fixed_feasts(raw):
    """Build a read-only fixed feast table from mapping `raw`.

    Returns a mapping of `MM-DD` to `FixedFeast`. `raw` may be None, in which
    case the table is empty. Values that are already `FixedFeast` are kept.
    """
    table = {}
    for key, entry in (raw or {}).items():
        if not _is_month_day(key):
            logger.warning("Fixed feast key %r is not MM-DD, skipping.", key)
            continue
        if isinstance(entry, FixedFeast):
            table[key] = entry
            continue
        name, color = _name_and_color(key, entry)
        if color is None:
            continue
        table[key] = FixedFeast(key=key, name=name, color=color)
    logger.debug("Parsed %d fixed feasts.", len(table))
    return MappingProxyType(table)


def _parse_movable_entry(key, entry):
    name, color = _name_and_color(key, entry)
    if color is None:
        return None
    offset = entry.get('offset')
    if offset is not None and (isinstance(offset, bool) or not isinstance(offset, int)):
        logger.warning("Movable feast %r has non-integer offset %r, skipping.", key, offset)
        return None
    feast = MovableFeast(key=key, name=name, color=color, offset=offset,
                         before_advent=entry.get('anchoredBeforeAdvent') is True)
    if not has_one_anchor(feast):
        logger.warning("Movable feast %r needs exactly one anchor, skipping.", key)
        return None
    return feast


def parse_movable_feasts(raw):
    """Build a movable feast table from mapping `raw`.

    Returns a tuple of `MovableFeast` in the iteration order of `raw`; that
    order breaks ties between entries resolving to the same day. Each entry
    needs exactly one anchor: an integer `offset` from Easter, or
    `anchoredBeforeAdvent: true`.
    """
    table = []
    for key, entry in (raw or {}).items():
        if isinstance(entry, MovableFeast):
            feast = entry if has_one_anchor(entry) else None
            if feast is None:
                logger.warning("Movable feast %r needs exactly one anchor, skipping.", key)
        else:
            feast = _parse_movable_entry(key, entry)
        if feast is not None:
            table.append(feast)
    logger.debug("Parsed %d movable feasts.", len(table))
    return tuple(table)


def fixed_table(table):
    """Return `table` ready for `lookup_fixed_feast`.

    A mapping already holding only `FixedFeast` values is returned as is; a
    raw mapping decoded from JSON is parsed. Anything else is an empty table.
    """
    if not table:
        return None
    if not isinstance(table, Mapping):
        logger.warning("Fixed feast table is a %s, not a mapping; ignoring it.",
                       type(table).__name__)
        return None
    if all(isinstance(entry, FixedFeast) for entry in table.values()):
        return table
    return parse_fixed_feasts(table)


def movable_table(table):
    """Return `table` ready for `match_movable_feast`.

    A raw mapping decoded from JSON is parsed; a sequence keeps its
    `MovableFeast` entries in order and drops anything else.
    """
    if not table:
        return None
    if isinstance(table, Mapping):
        return parse_movable_feasts(table)
    if isinstance(table, tuple) and all(isinstance(f, MovableFeast) for f in table):
        return table
    feasts = []
    for entry in table:
        if isinstance(entry, MovableFeast):
            feasts.append(entry)
        else:
            logger.warning("Movable feast table entry %r is not a feast, skipping.", entry)
    return tuple(feasts)


def _read_json(path):
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, ValueError) as exc:
        raise FeastTableError(f"Could not read feast table {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise FeastTableError(f"Feast table {path} must be a JSON object")
    return raw


def load_fixed_feasts(path=None):
    """Load a fixed feast table from JSON file `path`, or the bundled table
    if `path` is None."""
    if path is None:
        with resources.as_file(resources.files(__package__) / 'data' / DEFAULT_FIXED_TABLE) as p:
            return parse_fixed_feasts(_read_json(p))
    return parse_fixed_feasts(_read_json(path))


def load_movable_feasts(path=None):
    """Load a movable feast table from JSON file `path`, or the bundled table
    if `path` is None."""
    if path is None:
        with resources.as_file(resources.files(__package__) / 'data' / DEFAULT_MOVABLE_TABLE) as p:
            return parse_movable_feasts(_read_json(p))
    return parse_movable_feasts(_read_json(path))
