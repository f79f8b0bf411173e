import logging

import pytest

from onscreen.commontypes import BOTTOM_CENTER, TOP_LEFT, Alignment
from onscreen.targets import BufferTextField


@pytest.mark.parametrize(
    "start,action,expected",
    [
        ("abc", "backspace", "ab"),
        ("", "backspace", ""),
        ("abc", "enter", "abc\n"),
        ("abc", "tab", "abc\t"),
        ("abc", "emoji-picker", "abc"),
    ],
)
def test_buffer_actions(start, action, expected):
    field = BufferTextField(start)
    field.handle_action(action)
    assert field.text == expected
    assert field.actions == [action]


def test_buffer_ignores_unknown_action(caplog):
    field = BufferTextField(name="notes")
    with caplog.at_level(logging.DEBUG, logger="onscreen.targets"):
        field.handle_action("paste")
    assert "ignoring action 'paste'" in caplog.text


def test_buffer_lifecycle():
    field = BufferTextField()
    assert field.is_alive()
    field.on_attach()
    assert field.attached
    field.on_detach()
    assert not field.attached
    field.dispose()
    assert not field.is_alive()


def test_named_alignments():
    assert Alignment.named("bottom_center") == BOTTOM_CENTER
    assert BOTTOM_CENTER.name == "bottom_center"
    assert Alignment(x=-1, y=-1).name == "top_left"
    assert Alignment(x=-1, y=-1) == TOP_LEFT
    assert Alignment(x=0.5, y=0.5).name is None
    with pytest.raises(ValueError):
        Alignment.named("middle_earth")
