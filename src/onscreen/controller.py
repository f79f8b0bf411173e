# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import collections.abc
import dataclasses
import functools
import logging
import types
import typing

import msgspec

from .attachment import AttachmentRegistry, TextTarget
from .commontypes import BOTTOM_CENTER, TOP_CENTER, Alignment, InvalidState, LayoutError
from .keys import ActionKey, ActionKeyType, OnscreenKeyboardKey, TextKey
from .listeners import Listener, ListenerRegistry
from .util import next_in_order

if typing.TYPE_CHECKING:
    from .layouts import KeyboardLayout, KeyboardMode

logger = logging.getLogger(__name__)


@dataclasses.dataclass(kw_only=True)
class KeyboardState:
    is_open: bool
    alignment: Alignment
    layout: str
    mode: str
    pressed_action_keys: set[str] = dataclasses.field(default_factory=set)

    @property
    def show_secondary(self):
        shift = ActionKeyType.SHIFT in self.pressed_action_keys
        capslock = ActionKeyType.CAPSLOCK in self.pressed_action_keys
        return shift != capslock


class KeyboardSnapshot(msgspec.Struct, frozen=True):
    is_open: bool
    alignment: Alignment
    layout: str
    mode: str
    show_secondary: bool
    pressed_action_keys: frozenset[str]


class KeyboardController:
    """Owns the keyboard's visibility, position, layout/mode selection and modifiers.

    Key presses come in through dispatch_key_down() and dispatch_key_up(). The
    resolved text or action goes to the attached text field, if there is one,
    and the raw key goes to every raw key listener. Everything runs
    synchronously in the caller's frame.
    """

    def __init__(
        self,
        layouts: collections.abc.Mapping[str, KeyboardLayout],
        *,
        alignment: Alignment = BOTTOM_CENTER,
        initially_open: bool = False,
    ):
        if not layouts:
            raise LayoutError("At least one keyboard layout is required")
        # own copies of the mode tables; later edits to the caller's dicts don't reach us
        self._layouts = {name: msgspec.structs.replace(layout, modes=dict(layout.modes)) for name, layout in layouts.items()}
        first_layout = next(iter(self._layouts))
        self._state = KeyboardState(
            is_open=initially_open,
            alignment=alignment,
            layout=first_layout,
            mode=self._layouts[first_layout].first_mode,
        )
        self._attachment = AttachmentRegistry(owner=self)
        self._raw_key_down_listeners = ListenerRegistry[OnscreenKeyboardKey]("raw key down listener")
        self._raw_key_up_listeners = ListenerRegistry[OnscreenKeyboardKey]("raw key up listener")
        self._state_listeners = ListenerRegistry[KeyboardSnapshot]("state listener")
        self._visibility_listeners = ListenerRegistry[bool]("visibility listener")

    # read-only view

    @property
    def layouts(self) -> collections.abc.Mapping[str, KeyboardLayout]:
        return types.MappingProxyType(self._layouts)

    @property
    def is_open(self) -> bool:
        return self._state.is_open

    @property
    def alignment(self) -> Alignment:
        return self._state.alignment

    @property
    def current_layout(self) -> str:
        return self._state.layout

    @property
    def current_mode(self) -> str:
        return self._state.mode

    @property
    def show_secondary(self) -> bool:
        return self._state.show_secondary

    @property
    def pressed_action_keys(self) -> frozenset[str]:
        return frozenset(self._state.pressed_action_keys)

    @property
    def active_layout(self) -> KeyboardLayout:
        try:
            return self._layouts[self._state.layout]
        except KeyError:
            raise InvalidState(f"Layout {self._state.layout!r} is not one of {list(self._layouts)!r}") from None

    @property
    def active_mode(self) -> KeyboardMode:
        return self.active_layout.get_mode(self._state.mode)

    @property
    def attached_text_field(self) -> typing.Optional[TextTarget]:
        return self._attachment.current()

    def snapshot(self) -> KeyboardSnapshot:
        return KeyboardSnapshot(
            is_open=self._state.is_open,
            alignment=self._state.alignment,
            layout=self._state.layout,
            mode=self._state.mode,
            show_secondary=self._state.show_secondary,
            pressed_action_keys=frozenset(self._state.pressed_action_keys),
        )

    def _notify(self):
        self._state_listeners.emit(self.snapshot())

    # visibility and position

    def open(self):
        self._set_open(True)

    def close(self):
        self._set_open(False)

    def toggle(self):
        self._set_open(not self._state.is_open)

    def _set_open(self, is_open: bool):
        if self._state.is_open == is_open:
            return
        self._state.is_open = is_open
        logger.debug("keyboard %s", "opened" if is_open else "closed")
        self._visibility_listeners.emit(is_open)
        self._notify()

    def set_alignment(self, alignment: Alignment | str):
        if isinstance(alignment, str):
            alignment = Alignment.named(alignment)
        self._state.alignment = alignment
        self._notify()

    def move_to_top(self):
        self.set_alignment(TOP_CENTER)

    def move_to_bottom(self):
        self.set_alignment(BOTTOM_CENTER)

    # layout and mode selection

    def switch_mode(self):
        layout = self.active_layout
        new_mode = layout.next_mode(self._state.mode)
        if new_mode == self._state.mode:
            return
        logger.debug("mode %r -> %r", self._state.mode, new_mode)
        self._state.mode = new_mode
        self._notify()

    def switch_layout(self):
        new_layout = next_in_order(tuple(self._layouts), self._state.layout)
        self._select(new_layout, self._layouts[new_layout].first_mode)

    def set_layout(self, name: str):
        if name not in self._layouts:
            raise InvalidState(f"Layout {name!r} is not one of {list(self._layouts)!r}")
        self._select(name, self._layouts[name].first_mode)

    def set_mode(self, name: str):
        self.active_layout.get_mode(name)
        self._select(self._state.layout, name)

    def _select(self, layout: str, mode: str):
        if (layout, mode) == (self._state.layout, self._state.mode):
            return
        logger.debug("selection (%r, %r) -> (%r, %r)", self._state.layout, self._state.mode, layout, mode)
        self._state.layout = layout
        self._state.mode = mode
        self._notify()

    # text fields

    def attach_text_field(self, target: TextTarget):
        if not self._attachment.attach(target):
            return
        # modifiers latched for the previous field don't carry over
        if self._state.pressed_action_keys:
            self._state.pressed_action_keys.clear()
            self._notify()

    def detach_text_field(self, target: typing.Optional[TextTarget] = None):
        self._attachment.detach(target)

    # listeners

    def add_raw_key_down_listener(self, listener: Listener[OnscreenKeyboardKey]):
        self._raw_key_down_listeners.add(listener)

    def remove_raw_key_down_listener(self, listener: Listener[OnscreenKeyboardKey]):
        self._raw_key_down_listeners.remove(listener)

    def add_raw_key_up_listener(self, listener: Listener[OnscreenKeyboardKey]):
        self._raw_key_up_listeners.add(listener)

    def remove_raw_key_up_listener(self, listener: Listener[OnscreenKeyboardKey]):
        self._raw_key_up_listeners.remove(listener)

    def add_state_listener(self, listener: Listener[KeyboardSnapshot]):
        self._state_listeners.add(listener)

    def remove_state_listener(self, listener: Listener[KeyboardSnapshot]):
        self._state_listeners.remove(listener)

    def add_visibility_listener(self, listener: Listener[bool]):
        self._visibility_listeners.add(listener)

    def remove_visibility_listener(self, listener: Listener[bool]):
        self._visibility_listeners.remove(listener)

    # key dispatch

    def dispatch_key_down(self, key: OnscreenKeyboardKey):
        transition: typing.Optional[collections.abc.Callable[[], None]] = None
        match key:
            case TextKey():
                self._forward_text(key.resolve(self._state.show_secondary))
                if ActionKeyType.SHIFT in self._state.pressed_action_keys:
                    transition = self._release_shift
            case ActionKey() if key.is_modifier:
                transition = functools.partial(self._toggle_action_key, key.name)
            case ActionKey(name=ActionKeyType.SPACE):
                self._forward_text(" ")
            case ActionKey(name=ActionKeyType.SWITCH_MODE):
                transition = self.switch_mode
            case ActionKey(name=ActionKeyType.SWITCH_LAYOUT):
                transition = self.switch_layout
            case ActionKey(name=ActionKeyType.CLOSE):
                transition = self.close
            case ActionKey():
                self._forward_action(key.name)
        self._raw_key_down_listeners.emit(key)
        if transition is not None:
            transition()

    def dispatch_key_up(self, key: OnscreenKeyboardKey):
        self._raw_key_up_listeners.emit(key)

    def _forward_text(self, text: str):
        target = self._attachment.current()
        if target is None:
            logger.debug("no text field attached; dropping %r", text)
            return
        try:
            target.insert_text(text)
        except Exception:
            logger.exception("%r failed to insert %r", target, text)

    def _forward_action(self, action: str):
        target = self._attachment.current()
        if target is None:
            logger.debug("no text field attached; dropping action %r", action)
            return
        try:
            target.handle_action(action)
        except Exception:
            logger.exception("%r failed to handle action %r", target, action)

    def _toggle_action_key(self, name: str):
        pressed = self._state.pressed_action_keys
        if name in pressed:
            pressed.discard(name)
        else:
            pressed.add(str(name))
        self._notify()

    def _release_shift(self):
        self._state.pressed_action_keys.discard(ActionKeyType.SHIFT)
        self._notify()
