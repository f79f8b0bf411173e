import logging

from onscreen.listeners import ListenerRegistry


def test_emit_in_registration_order():
    registry = ListenerRegistry[str]()
    seen = []
    registry.add(lambda v: seen.append(("first", v)))
    registry.add(lambda v: seen.append(("second", v)))
    assert registry.emit("x") == 0
    assert seen == [("first", "x"), ("second", "x")]


def test_duplicate_add_is_a_no_op():
    registry = ListenerRegistry[str]()
    seen = []
    listener = seen.append
    assert registry.add(listener)
    assert not registry.add(listener)
    # bound methods compare equal even when fetched twice
    assert not registry.add(seen.append)
    assert len(registry) == 1
    registry.emit("x")
    assert seen == ["x"]


def test_remove():
    registry = ListenerRegistry[str]()
    seen = []
    registry.add(seen.append)
    assert seen.append in registry
    assert registry.remove(seen.append)
    assert not registry.remove(seen.append)
    registry.emit("x")
    assert seen == []


def test_failing_listener_is_isolated(caplog):
    registry = ListenerRegistry[str]("test listener")
    seen = []

    def broken(value):
        raise RuntimeError("boom")

    registry.add(broken)
    registry.add(seen.append)
    with caplog.at_level(logging.ERROR, logger="onscreen.listeners"):
        assert registry.emit("x") == 1
    assert seen == ["x"]
    assert len(caplog.records) == 1
    assert "test listener" in caplog.records[0].getMessage()
    assert caplog.records[0].exc_info[0] is RuntimeError


def test_listeners_added_during_emit_wait_for_next_pass():
    registry = ListenerRegistry[str]()
    seen = []

    def adder(value):
        seen.append(("adder", value))
        registry.add(late)

    def late(value):
        seen.append(("late", value))

    registry.add(adder)
    registry.emit("one")
    assert seen == [("adder", "one")]
    registry.emit("two")
    assert seen == [("adder", "one"), ("adder", "two"), ("late", "two")]


def test_listener_removed_during_emit_still_runs_this_pass():
    registry = ListenerRegistry[str]()
    seen = []

    def remover(value):
        registry.remove(seen.append)

    registry.add(remover)
    registry.add(seen.append)
    registry.emit("one")
    registry.emit("two")
    assert seen == ["one"]
