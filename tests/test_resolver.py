# tests/test_resolver.py

from datetime import date, datetime

from litcalendar.colors import LiturgicalColor
from litcalendar.resolver import LiturgicalCalendar, get_liturgical_info
from litcalendar.tables import MovableFeast, parse_fixed_feasts, parse_movable_feasts


def test_christmas_entry_wins_on_december_25(christmas_only):
    for year in (2022, 2024, 2025, 2030):
        info = get_liturgical_info(date(year, 12, 25), fixed_feasts=christmas_only)
        assert info.name == "Christmas"
        assert info.color == LiturgicalColor.WHITE
        assert info.season == "Christmas"


def test_movable_beats_fixed():
    fixed = parse_fixed_feasts({"04-20": {"name": "Fixed", "color": "green"}})
    movable = parse_movable_feasts({"easter": {"name": "Easter Sunday", "color": "white", "offset": 0}})
    info = get_liturgical_info(date(2025, 4, 20), fixed, movable)
    assert info.name == "Easter Sunday"
    assert info.color == LiturgicalColor.WHITE
    # Easter 2026 is April 5, so the fixed entry gets April 20
    assert get_liturgical_info(date(2026, 4, 20), fixed, movable).name == "Fixed"


def test_fixed_beats_season():
    fixed = parse_fixed_feasts({"12-14": {"name": "Saint John of the Cross", "color": "white"}})
    info = get_liturgical_info(date(2025, 12, 14), fixed)
    assert info.name == "Saint John of the Cross"
    assert info.color == LiturgicalColor.WHITE
    assert info.season == "Advent"


def test_no_tables_falls_back_to_season():
    info = get_liturgical_info(date(2025, 12, 25))
    assert info.name is None
    assert info.color == LiturgicalColor.WHITE

    info = get_liturgical_info(date(2025, 7, 16))
    assert info.name is None
    assert info.color == LiturgicalColor.GREEN
    assert info.season == "Ordinary Time"


def test_ordinary_time_sunday_name_comes_through():
    info = get_liturgical_info(date(2025, 1, 26))
    assert info.name == "3rd Sunday in Ordinary Time"
    assert info.color == LiturgicalColor.GREEN


def test_bundled_tables(fixed_feasts, movable_feasts):
    cases = [
        (date(2025, 3, 5), "Ash Wednesday", LiturgicalColor.VIOLET),
        (date(2025, 3, 30), None, LiturgicalColor.ROSE),
        (date(2025, 4, 13), "Palm Sunday", LiturgicalColor.RED),
        (date(2025, 4, 18), "Good Friday", LiturgicalColor.RED),
        (date(2025, 6, 8), "Pentecost", LiturgicalColor.RED),
        (date(2025, 11, 2), "All Souls", LiturgicalColor.BLACK),
        (date(2025, 11, 23), "Christ the King", LiturgicalColor.WHITE),
        (date(2025, 12, 14), None, LiturgicalColor.ROSE),
    ]
    for day, name, color in cases:
        info = get_liturgical_info(day, fixed_feasts, movable_feasts)
        assert (info.name, info.color) == (name, color), day


def test_calendar_caches_per_day(fixed_feasts, movable_feasts):
    calendar = LiturgicalCalendar(fixed_feasts, movable_feasts)
    first = calendar.info("2025-12-25")
    assert first.name == "Christmas"
    assert calendar.info(datetime(2025, 12, 25, 18, 30)) is first


def test_calendar_from_bundled_files():
    calendar = LiturgicalCalendar.from_files()
    assert calendar.info(date(2025, 4, 20)).name == "Easter Sunday"
    assert calendar.info(date(2025, 4, 20)).season == "Easter"


# Tables straight from JSON, before any parsing
RAW_FIXED = {"12-25": {"name": "Christmas", "color": "white"}}
RAW_MOVABLE = {
    "good-friday": {"name": "Good Friday", "color": "red", "offset": -2},
    "christ-the-king": {"name": "Christ the King", "color": "white", "anchoredBeforeAdvent": True},
}


def test_raw_tables_are_parsed():
    info = get_liturgical_info(date(2025, 12, 25), fixed_feasts=RAW_FIXED)
    assert (info.name, info.color) == ("Christmas", LiturgicalColor.WHITE)

    info = get_liturgical_info(date(2025, 4, 18), movable_feasts=RAW_MOVABLE)
    assert (info.name, info.color) == ("Good Friday", LiturgicalColor.RED)

    info = get_liturgical_info(date(2025, 11, 23), RAW_FIXED, RAW_MOVABLE)
    assert info.name == "Christ the King"


def test_raw_tables_bound_to_a_calendar():
    calendar = LiturgicalCalendar(RAW_FIXED, RAW_MOVABLE)
    assert calendar.info(date(2025, 12, 25)).name == "Christmas"
    assert calendar.info(date(2025, 4, 18)).name == "Good Friday"


def test_malformed_raw_tables_fall_back_to_season():
    fixed = {"12-25": {"name": "Christmas", "color": "gold"}, "bad": "row"}
    movable = {"good-friday": "red", "nowhen": {"name": "Nowhen", "color": "red"}}
    info = get_liturgical_info(date(2025, 12, 25), fixed, movable)
    assert (info.name, info.color, info.season) == (None, LiturgicalColor.WHITE, "Christmas")

    info = get_liturgical_info(date(2025, 7, 16), ["not", "a", "table"], ["junk"])
    assert (info.name, info.color) == (None, LiturgicalColor.GREEN)


def test_unanchored_movable_feast_never_matches():
    unanchored = (MovableFeast("x", "X", LiturgicalColor.RED),)
    info = get_liturgical_info(date(2025, 7, 16), movable_feasts=unanchored)
    assert (info.name, info.color) == (None, LiturgicalColor.GREEN)

    both = (MovableFeast("y", "Y", LiturgicalColor.RED, offset=0, before_advent=True),)
    assert get_liturgical_info(date(2025, 4, 20), movable_feasts=both).name is None
