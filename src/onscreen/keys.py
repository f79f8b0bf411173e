# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import enum
import typing

import msgspec

from .commontypes import LayoutError


class ActionKeyType(enum.StrEnum):
    SHIFT = "shift"
    CAPSLOCK = "capslock"
    BACKSPACE = "backspace"
    ENTER = "enter"
    TAB = "tab"
    SPACE = "space"
    SWITCH_MODE = "switchMode"
    SWITCH_LAYOUT = "switchLayout"
    CLOSE = "close"


# Action keys that latch on press instead of acting once.
MODIFIER_ACTIONS = frozenset((ActionKeyType.SHIFT, ActionKeyType.CAPSLOCK))


class TextKey(msgspec.Struct, frozen=True, tag_field="kind", tag="text"):
    primary: str
    secondary: typing.Optional[str] = None
    # opaque to the controller; handed to the presentation layer as-is
    child: typing.Any = None
    flex: int = 20

    def __post_init__(self):
        if not self.primary:
            raise LayoutError("A text key needs a primary value")
        if self.flex < 1:
            raise LayoutError(f"flex must be at least 1, not {self.flex}")

    def resolve(self, show_secondary: bool) -> str:
        if not show_secondary:
            return self.primary
        if self.secondary is not None:
            return self.secondary
        return self.primary.upper()


class ActionKey(msgspec.Struct, frozen=True, tag_field="kind", tag="action"):
    name: str
    child: typing.Any = None
    flex: int = 30

    def __post_init__(self):
        if not self.name:
            raise LayoutError("An action key needs a name")
        if self.flex < 1:
            raise LayoutError(f"flex must be at least 1, not {self.flex}")

    @property
    def is_modifier(self):
        return self.name in MODIFIER_ACTIONS


OnscreenKeyboardKey = TextKey | ActionKey


ACTION_LABELS = {
    ActionKeyType.SHIFT: "⇧",
    ActionKeyType.CAPSLOCK: "⇪",
    ActionKeyType.BACKSPACE: "⌫",
    ActionKeyType.ENTER: "⏎",
    ActionKeyType.TAB: "⇥",
    ActionKeyType.SPACE: "␣",
    ActionKeyType.SWITCH_MODE: "?123",
    ActionKeyType.SWITCH_LAYOUT: "🌐",
    ActionKeyType.CLOSE: "⌄",
}


def key_label(key: OnscreenKeyboardKey, show_secondary: bool = False) -> str:
    match key:
        case TextKey(child=str() as child):
            return child
        case TextKey():
            return key.resolve(show_secondary)
        case ActionKey(child=str() as child):
            return child
        case ActionKey(name=name):
            return ACTION_LABELS.get(name, name)
