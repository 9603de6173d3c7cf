import pytest

from litcalendar.tables import (load_fixed_feasts, load_movable_feasts,
                                parse_fixed_feasts, parse_movable_feasts)


@pytest.fixture(scope="session")
def fixed_feasts():
    """The bundled fixed feast table."""
    return load_fixed_feasts()


@pytest.fixture(scope="session")
def movable_feasts():
    """The bundled movable feast table."""
    return load_movable_feasts()


@pytest.fixture
def christmas_only():
    return parse_fixed_feasts({"12-25": {"name": "Christmas", "color": "white"}})


@pytest.fixture
def good_friday_only():
    return parse_movable_feasts({"good-friday": {"name": "Good Friday", "color": "red", "offset": -2}})
