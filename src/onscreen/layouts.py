# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import typing

import msgspec

from .commontypes import InvalidState, LayoutError
from .keys import ActionKey, ActionKeyType, OnscreenKeyboardKey, TextKey
from .util import next_in_order


class KeyboardRow(msgspec.Struct, frozen=True):
    keys: tuple[OnscreenKeyboardKey, ...]
    leading: typing.Any = None
    trailing: typing.Any = None


class KeyboardMode(msgspec.Struct, frozen=True):
    rows: tuple[KeyboardRow, ...]
    vertical_spacing: float = 5.0

    def iter_keys(self) -> typing.Iterator[OnscreenKeyboardKey]:
        for row in self.rows:
            yield from row.keys

    def find_key(self, label: str) -> typing.Optional[OnscreenKeyboardKey]:
        """Find a key by its primary text or action name.

        Text keys win over action keys, so a mode can have a "space" text key
        without being shadowed by an action of the same name.
        """
        action_match = None
        for key in self.iter_keys():
            match key:
                case TextKey(primary=primary) if primary == label:
                    return key
                case ActionKey(name=name) if name == label and action_match is None:
                    action_match = key
        return action_match


class KeyboardLayout(msgspec.Struct, frozen=True):
    """A named set of modes.

    modes is a plain dict so layouts decode from and encode to JSON; treat it
    as read-only once the layout is built. Because of it, layouts are not
    hashable. KeyboardController keeps its own copy of each mode table.
    """

    # insertion order is the order switchMode cycles through
    modes: dict[str, KeyboardMode]
    aspect_ratio: float = 4 / 3

    def __post_init__(self):
        if not self.modes:
            raise LayoutError("A keyboard layout needs at least one mode")

    @property
    def mode_names(self) -> tuple[str, ...]:
        return tuple(self.modes)

    @property
    def first_mode(self) -> str:
        return next(iter(self.modes))

    def next_mode(self, current: str) -> str:
        return next_in_order(self.mode_names, current)

    def get_mode(self, name: str) -> KeyboardMode:
        try:
            return self.modes[name]
        except KeyError:
            raise InvalidState(f"Mode {name!r} is not one of {list(self.modes)!r}") from None


def _text_row(chars: typing.Iterable[str], *, secondaries: typing.Optional[typing.Iterable[str]] = None, leading=(), trailing=()):
    if secondaries is None:
        keys = [TextKey(primary=c) for c in chars]
    else:
        keys = [TextKey(primary=c, secondary=s) for c, s in zip(chars, secondaries, strict=True)]
    return KeyboardRow(keys=(*leading, *keys, *trailing))


def _action(name: ActionKeyType, flex: int = 30, child: typing.Any = None):
    return ActionKey(name=str(name), flex=flex, child=child)


MOBILE_LAYOUT = KeyboardLayout(
    modes={
        "alphabets": KeyboardMode(
            rows=(
                _text_row("qwertyuiop"),
                _text_row("asdfghjkl"),
                _text_row(
                    "zxcvbnm",
                    leading=(_action(ActionKeyType.SHIFT),),
                    trailing=(_action(ActionKeyType.BACKSPACE),),
                ),
                KeyboardRow(
                    keys=(
                        _action(ActionKeyType.SWITCH_MODE, child="?123"),
                        _action(ActionKeyType.SWITCH_LAYOUT, flex=20),
                        TextKey(primary=","),
                        _action(ActionKeyType.SPACE, flex=100),
                        TextKey(primary="."),
                        _action(ActionKeyType.ENTER),
                    )
                ),
            )
        ),
        "symbols": KeyboardMode(
            rows=(
                _text_row("1234567890"),
                _text_row("@#$_&-+()/"),
                _text_row(
                    "*\"':;!?",
                    trailing=(_action(ActionKeyType.BACKSPACE),),
                ),
                KeyboardRow(
                    keys=(
                        _action(ActionKeyType.SWITCH_MODE, child="ABC"),
                        TextKey(primary=","),
                        _action(ActionKeyType.SPACE, flex=120),
                        TextKey(primary="."),
                        _action(ActionKeyType.ENTER),
                    )
                ),
            )
        ),
        "emojis": KeyboardMode(
            rows=(
                _text_row("😀😂😍😎😭😡👍👎🙏🎉"),
                _text_row(["❤", "🔥", "✨", "⭐", "🌈", "🍕", "☕", "🎵"], trailing=(_action(ActionKeyType.BACKSPACE),)),
                KeyboardRow(
                    keys=(
                        _action(ActionKeyType.SWITCH_MODE, child="abc"),
                        _action(ActionKeyType.SPACE, flex=120),
                        _action(ActionKeyType.ENTER),
                    )
                ),
            )
        ),
    },
    aspect_ratio=5 / 3,
)


DESKTOP_LAYOUT = KeyboardLayout(
    modes={
        "alphabets": KeyboardMode(
            rows=(
                _text_row(
                    "`1234567890-=",
                    secondaries="~!@#$%^&*()_+",
                    trailing=(_action(ActionKeyType.BACKSPACE, flex=40),),
                ),
                _text_row(
                    "qwertyuiop[]\\",
                    secondaries="QWERTYUIOP{}|",
                    leading=(_action(ActionKeyType.TAB),),
                ),
                _text_row(
                    "asdfghjkl;'",
                    secondaries="ASDFGHJKL:\"",
                    leading=(_action(ActionKeyType.CAPSLOCK, flex=35),),
                    trailing=(_action(ActionKeyType.ENTER, flex=45),),
                ),
                _text_row(
                    "zxcvbnm,./",
                    secondaries="ZXCVBNM<>?",
                    leading=(_action(ActionKeyType.SHIFT, flex=45),),
                    trailing=(_action(ActionKeyType.SHIFT, flex=55),),
                ),
                KeyboardRow(
                    keys=(
                        _action(ActionKeyType.SWITCH_LAYOUT),
                        _action(ActionKeyType.SPACE, flex=180),
                        _action(ActionKeyType.CLOSE),
                    )
                ),
            )
        ),
    },
    aspect_ratio=3,
)

DEFAULT_LAYOUTS: dict[str, KeyboardLayout] = {
    "mobile": MOBILE_LAYOUT,
    "desktop": DESKTOP_LAYOUT,
}
