# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import msgspec


class OnscreenError(Exception):
    pass


class InvalidState(OnscreenError):
    """The current selection names a layout or mode that is not configured."""


class LayoutError(OnscreenError, ValueError):
    pass


class Alignment(msgspec.Struct, frozen=True):
    """Where the keyboard sits in its host, as fractions of the available space.

    (-1, -1) is the top-left corner, (1, 1) the bottom-right, (0, 0) the center.
    """

    x: float
    y: float

    @classmethod
    def named(cls, name: str):
        try:
            return NAMED_ALIGNMENTS[name]
        except KeyError:
            raise ValueError(f"Unknown alignment {name!r}") from None

    @property
    def name(self):
        for name, value in NAMED_ALIGNMENTS.items():
            if value == self:
                return name
        return None


TOP_LEFT = Alignment(x=-1.0, y=-1.0)
TOP_CENTER = Alignment(x=0.0, y=-1.0)
TOP_RIGHT = Alignment(x=1.0, y=-1.0)
CENTER_LEFT = Alignment(x=-1.0, y=0.0)
CENTER = Alignment(x=0.0, y=0.0)
CENTER_RIGHT = Alignment(x=1.0, y=0.0)
BOTTOM_LEFT = Alignment(x=-1.0, y=1.0)
BOTTOM_CENTER = Alignment(x=0.0, y=1.0)
BOTTOM_RIGHT = Alignment(x=1.0, y=1.0)

NAMED_ALIGNMENTS = {
    "top_left": TOP_LEFT,
    "top_center": TOP_CENTER,
    "top_right": TOP_RIGHT,
    "center_left": CENTER_LEFT,
    "center": CENTER,
    "center_right": CENTER_RIGHT,
    "bottom_left": BOTTOM_LEFT,
    "bottom_center": BOTTOM_CENTER,
    "bottom_right": BOTTOM_RIGHT,
}
