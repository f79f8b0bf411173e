from __future__ import annotations

import logging

from .keys import ActionKeyType

logger = logging.getLogger(__name__)


class BufferTextField:
    """A text field that just appends to a string.

    There is no cursor: text always goes at the end and backspace always
    removes the last character.
    """

    def __init__(self, text: str = "", *, name: str = "buffer"):
        self.text = text
        self.name = name
        self.attached = False
        self.actions: list[str] = []
        self._disposed = False

    def __repr__(self):
        return f"<BufferTextField {self.name!r} text={self.text!r}>"

    def on_attach(self):
        self.attached = True

    def on_detach(self):
        self.attached = False

    def is_alive(self):
        return not self._disposed

    def dispose(self):
        self._disposed = True

    def insert_text(self, text: str):
        self.text += text

    def handle_action(self, action: str):
        self.actions.append(action)
        match action:
            case ActionKeyType.BACKSPACE:
                self.text = self.text[:-1]
            case ActionKeyType.ENTER:
                self.text += "\n"
            case ActionKeyType.TAB:
                self.text += "\t"
            case _:
                logger.debug("%r ignoring action %r", self, action)
