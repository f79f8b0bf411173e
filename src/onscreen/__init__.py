# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# Key press flow:
# presentation layer: RawKeyboard builds units whose tap callbacks call the controller
# controller: resolve text against shift/capslock, forward to the attached text field,
#   broadcast the raw key to listeners, then switch mode/layout or latch modifiers
from .commontypes import Alignment, InvalidState, LayoutError, OnscreenError
from .controller import KeyboardController, KeyboardSnapshot
from .keys import ActionKey, ActionKeyType, OnscreenKeyboardKey, TextKey
from .layouts import DEFAULT_LAYOUTS, DESKTOP_LAYOUT, MOBILE_LAYOUT, KeyboardLayout, KeyboardMode, KeyboardRow

__all__ = [
    "ActionKey",
    "ActionKeyType",
    "Alignment",
    "DEFAULT_LAYOUTS",
    "DESKTOP_LAYOUT",
    "InvalidState",
    "KeyboardController",
    "KeyboardLayout",
    "KeyboardMode",
    "KeyboardRow",
    "KeyboardSnapshot",
    "LayoutError",
    "MOBILE_LAYOUT",
    "OnscreenError",
    "OnscreenKeyboardKey",
    "TextKey",
]
