# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import collections.abc
import dataclasses
import functools
import typing

from .keys import ActionKey, OnscreenKeyboardKey, TextKey, key_label

if typing.TYPE_CHECKING:
    from .controller import KeyboardController
    from .layouts import KeyboardLayout

TapCallback = collections.abc.Callable[[], None]
KeyCallback = collections.abc.Callable[[OnscreenKeyboardKey], None]


class TextKeyBuilder(typing.Protocol):
    def __call__(
        self,
        *,
        text_key: TextKey,
        show_secondary: bool,
        on_tap_down: TapCallback,
        on_tap_up: TapCallback,
    ) -> typing.Any: ...


class ActionKeyBuilder(typing.Protocol):
    def __call__(
        self,
        *,
        action_key: ActionKey,
        pressed: bool,
        on_tap_down: TapCallback,
        on_tap_up: TapCallback,
    ) -> typing.Any: ...


@dataclasses.dataclass(frozen=True, kw_only=True)
class KeyCap:
    label: str
    flex: int
    pressed: bool
    is_action: bool
    on_tap_down: TapCallback = dataclasses.field(compare=False, repr=False)
    on_tap_up: TapCallback = dataclasses.field(compare=False, repr=False)

    def render_text(self):
        if self.pressed:
            return f"({self.label})"
        return f"[{self.label}]"


def default_text_key_builder(*, text_key: TextKey, show_secondary: bool, on_tap_down: TapCallback, on_tap_up: TapCallback):
    return KeyCap(
        label=key_label(text_key, show_secondary),
        flex=text_key.flex,
        pressed=False,
        is_action=False,
        on_tap_down=on_tap_down,
        on_tap_up=on_tap_up,
    )


def default_action_key_builder(*, action_key: ActionKey, pressed: bool, on_tap_down: TapCallback, on_tap_up: TapCallback):
    return KeyCap(
        label=key_label(action_key),
        flex=action_key.flex,
        pressed=pressed,
        is_action=True,
        on_tap_down=on_tap_down,
        on_tap_up=on_tap_up,
    )


@dataclasses.dataclass(kw_only=True)
class RawKeyboard:
    """Turns one mode of a layout into rows of renderable units.

    Custom builders may return None to fall back to the default KeyCap for that
    key. Row leading and trailing decorations are passed through untouched.
    """

    layout: KeyboardLayout
    mode: str
    on_key_down: KeyCallback
    on_key_up: KeyCallback
    show_secondary: bool = False
    pressed_action_keys: collections.abc.Set[str] = frozenset()
    text_key_builder: typing.Optional[TextKeyBuilder] = None
    action_key_builder: typing.Optional[ActionKeyBuilder] = None

    def build(self) -> list[list[typing.Any]]:
        active_mode = self.layout.get_mode(self.mode)
        rows = []
        for row in active_mode.rows:
            units = []
            if row.leading is not None:
                units.append(row.leading)
            units.extend(self._build_key(key) for key in row.keys)
            if row.trailing is not None:
                units.append(row.trailing)
            rows.append(units)
        return rows

    def _build_key(self, key: OnscreenKeyboardKey):
        on_tap_down = functools.partial(self.on_key_down, key)
        on_tap_up = functools.partial(self.on_key_up, key)
        match key:
            case TextKey():
                kwargs = dict(text_key=key, show_secondary=self.show_secondary, on_tap_down=on_tap_down, on_tap_up=on_tap_up)
                unit = None
                if self.text_key_builder is not None:
                    unit = self.text_key_builder(**kwargs)
                return unit if unit is not None else default_text_key_builder(**kwargs)
            case ActionKey():
                kwargs = dict(action_key=key, pressed=key.name in self.pressed_action_keys, on_tap_down=on_tap_down, on_tap_up=on_tap_up)
                unit = None
                if self.action_key_builder is not None:
                    unit = self.action_key_builder(**kwargs)
                return unit if unit is not None else default_action_key_builder(**kwargs)

    def render_text(self) -> str:
        lines = []
        for units in self.build():
            lines.append(" ".join(unit.render_text() if isinstance(unit, KeyCap) else str(unit) for unit in units))
        return "\n".join(lines)


def raw_keyboard_for(
    controller: KeyboardController,
    *,
    text_key_builder: typing.Optional[TextKeyBuilder] = None,
    action_key_builder: typing.Optional[ActionKeyBuilder] = None,
) -> RawKeyboard:
    snapshot = controller.snapshot()
    return RawKeyboard(
        layout=controller.active_layout,
        mode=snapshot.mode,
        on_key_down=controller.dispatch_key_down,
        on_key_up=controller.dispatch_key_up,
        show_secondary=snapshot.show_secondary,
        pressed_action_keys=snapshot.pressed_action_keys,
        text_key_builder=text_key_builder,
        action_key_builder=action_key_builder,
    )
