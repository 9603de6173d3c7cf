# =============================================================================
# Liturgical colors
#
# The six colors of the Roman Rite. How a color is painted on screen belongs to
# whoever renders it; here a color is only a name.
# =============================================================================

from enum import Enum


class LiturgicalColor(str, Enum):
    GREEN = 'green'
    VIOLET = 'violet'
    WHITE = 'white'
    RED = 'red'
    ROSE = 'rose'
    BLACK = 'black'

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, value):
        """Return the color named by `value` (any case), or None if `value`
        does not name one of the six colors."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        value = value.strip().lower()
        try:
            return cls(value)
        except ValueError:
            return None
