import pytest

from onscreen.commontypes import InvalidState, LayoutError
from onscreen.keys import ActionKey, TextKey
from onscreen.layouts import DEFAULT_LAYOUTS, DESKTOP_LAYOUT, MOBILE_LAYOUT, KeyboardLayout, KeyboardMode, KeyboardRow
from onscreen.util import next_in_order


def one_key_mode(primary: str):
    return KeyboardMode(rows=(KeyboardRow(keys=(TextKey(primary=primary),)),))


def test_layout_needs_a_mode():
    with pytest.raises(LayoutError):
        KeyboardLayout(modes={})


def test_mode_order_is_insertion_order():
    layout = KeyboardLayout(modes={"b": one_key_mode("b"), "a": one_key_mode("a"), "c": one_key_mode("c")})
    assert layout.mode_names == ("b", "a", "c")
    assert layout.first_mode == "b"
    assert layout.next_mode("b") == "a"
    assert layout.next_mode("a") == "c"
    assert layout.next_mode("c") == "b"


def test_next_mode_single_mode():
    layout = KeyboardLayout(modes={"only": one_key_mode("x")})
    assert layout.next_mode("only") == "only"


def test_unknown_mode():
    layout = KeyboardLayout(modes={"only": one_key_mode("x")})
    with pytest.raises(InvalidState):
        layout.next_mode("missing")
    with pytest.raises(InvalidState):
        layout.get_mode("missing")


def test_next_in_order():
    assert next_in_order(("en", "emoji"), "en") == "emoji"
    assert next_in_order(("en", "emoji"), "emoji") == "en"
    with pytest.raises(InvalidState):
        next_in_order(("en", "emoji"), "fr")


def test_find_key():
    mode = KeyboardMode(
        rows=(
            KeyboardRow(keys=(ActionKey(name="space"), TextKey(primary="a"))),
            KeyboardRow(keys=(TextKey(primary="space"), ActionKey(name="shift"))),
        )
    )
    assert mode.find_key("a") == TextKey(primary="a")
    assert mode.find_key("shift") == ActionKey(name="shift")
    # text keys win over actions with the same name
    assert mode.find_key("space") == TextKey(primary="space")
    assert mode.find_key("z") is None


def test_builtin_layouts():
    assert list(DEFAULT_LAYOUTS) == ["mobile", "desktop"]
    assert MOBILE_LAYOUT.mode_names == ("alphabets", "symbols", "emojis")
    assert DESKTOP_LAYOUT.mode_names == ("alphabets",)
    for layout in DEFAULT_LAYOUTS.values():
        for mode in layout.modes.values():
            assert any(True for _ in mode.iter_keys())


def test_builtin_mobile_keys():
    alphabets = MOBILE_LAYOUT.get_mode("alphabets")
    assert alphabets.find_key("q") == TextKey(primary="q")
    assert alphabets.find_key("switchMode").child == "?123"
    assert MOBILE_LAYOUT.get_mode("emojis").find_key("❤") == TextKey(primary="❤")
    assert DESKTOP_LAYOUT.get_mode("alphabets").find_key("1") == TextKey(primary="1", secondary="!")
