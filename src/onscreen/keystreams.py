# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import enum
import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, AsyncIterable

import msgspec
import trio

from .keys import OnscreenKeyboardKey

if TYPE_CHECKING:
    from .controller import KeyboardController

logger = logging.getLogger(__name__)


class KeyPress(enum.IntEnum):
    RELEASED = 0
    PRESSED = 1


class KeyboardEvent(msgspec.Struct, frozen=True):
    key: OnscreenKeyboardKey
    press: KeyPress

    @classmethod
    def pressed(cls, key: OnscreenKeyboardKey):
        return cls(key=key, press=KeyPress.PRESSED)

    @classmethod
    def released(cls, key: OnscreenKeyboardKey):
        return cls(key=key, press=KeyPress.RELEASED)


def tap(key: OnscreenKeyboardKey) -> tuple[KeyboardEvent, KeyboardEvent]:
    return (KeyboardEvent.pressed(key), KeyboardEvent.released(key))


def dispatch_event(controller: KeyboardController, event: KeyboardEvent):
    match event.press:
        case KeyPress.PRESSED:
            controller.dispatch_key_down(event.key)
        case KeyPress.RELEASED:
            controller.dispatch_key_up(event.key)


async def feed_controller(source: AsyncIterable[KeyboardEvent], controller: KeyboardController) -> int:
    """Dispatch events from source into controller, one at a time, in arrival order.

    source may be any async iterable. Closing it (with aclosing() for an async
    generator) is up to the caller.
    """
    count = 0
    async for event in source:
        dispatch_event(controller, event)
        count += 1
    logger.debug("key stream ended after %d events", count)
    return count


@asynccontextmanager
async def open_keystream(controller: KeyboardController, buffer_size: int = 0):
    """Yield a send channel whose events are dispatched into controller.

    Leaving the block closes the channel and waits for every sent event to be
    dispatched.
    """
    send_channel, receive_channel = trio.open_memory_channel[KeyboardEvent](buffer_size)
    async with trio.open_nursery() as nursery:
        nursery.start_soon(_feed_and_close, receive_channel, controller)
        async with send_channel:
            yield send_channel


async def _feed_and_close(receive_channel: trio.MemoryReceiveChannel[KeyboardEvent], controller: KeyboardController):
    async with receive_channel:
        await feed_controller(receive_channel, controller)
