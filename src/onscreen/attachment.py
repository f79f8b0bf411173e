# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import logging
import typing
import weakref

from .util import call_if_present

logger = logging.getLogger(__name__)


class TextTarget(typing.Protocol):
    """Something that can receive keyboard output, such as a text field.

    Targets may also define on_attach(controller), on_detach(controller) and
    is_alive(); each is called only if present. Targets are compared by
    identity.
    """

    def insert_text(self, text: str) -> None: ...

    def handle_action(self, action: str) -> None: ...


class _StrongRef:
    __slots__ = ("target",)

    def __init__(self, target):
        self.target = target

    def __call__(self):
        return self.target


def _make_ref(target):
    try:
        return weakref.ref(target)
    except TypeError:
        return _StrongRef(target)


class AttachmentRegistry:
    """Tracks the one target currently receiving keyboard output.

    The registry does not own its target. Callers must detach a target before
    they dispose of it; as a backstop, a target that has been garbage collected
    or whose is_alive() returns False is treated as detached.
    """

    def __init__(self, owner: typing.Any = None):
        self._owner = owner
        self._ref = None

    def current(self) -> typing.Optional[TextTarget]:
        if self._ref is None:
            return None
        target = self._ref()
        if target is None:
            logger.debug("attached target was garbage collected")
            self._ref = None
            return None
        if call_if_present(target, "is_alive") is False:
            logger.debug("dropping %r, which is no longer alive", target)
            self._ref = None
            return None
        return target

    def attach(self, target: TextTarget) -> bool:
        previous = self.current()
        if previous is target:
            return False
        self._ref = _make_ref(target)
        logger.debug("attached %r (replacing %r)", target, previous)
        if previous is not None:
            call_if_present(previous, "on_detach", controller=self._owner)
        call_if_present(target, "on_attach", controller=self._owner)
        return True

    def detach(self, target: typing.Optional[TextTarget] = None) -> bool:
        current = self.current()
        if current is None:
            return False
        if target is not None and target is not current:
            logger.debug("ignoring detach of %r; %r is attached", target, current)
            return False
        self._ref = None
        logger.debug("detached %r", current)
        call_if_present(current, "on_detach", controller=self._owner)
        return True
