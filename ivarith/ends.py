"""
Endpoint modes.

An interval's endpoint mode is a two-bit set: bit 0 says the left endpoint
belongs to the interval, bit 1 says the right endpoint does. Modes combine
with the ordinary bitwise operators:

    a & b   closed only where both are closed
    a | b   closed where either is closed
    a ^ b   used to accumulate one side at a time

Negating an interval mirrors it, so the left and right bits swap (``flip``).
"""

from __future__ import annotations

from enum import IntFlag


class Ends(IntFlag):
    """Which endpoints of an interval are included."""
    OPEN = 0
    LEFT_CLOSED = 1   # right-open
    RIGHT_CLOSED = 2  # left-open
    CLOSED = 3

    @classmethod
    def of(cls, left_closed: bool, right_closed: bool) -> Ends:
        """Build a mode from the closedness of each side."""
        return cls((cls.LEFT_CLOSED if left_closed else 0) |
                   (cls.RIGHT_CLOSED if right_closed else 0))

    def flip(self) -> Ends:
        """Swap the left and right bits."""
        return Ends(((self & LEFT) << 1) | ((self & RIGHT) >> 1))

    @property
    def left(self) -> bool:
        return bool(self & LEFT)

    @property
    def right(self) -> bool:
        return bool(self & RIGHT)


LEFT = Ends.LEFT_CLOSED
RIGHT = Ends.RIGHT_CLOSED
