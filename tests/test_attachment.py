import gc

from onscreen.attachment import AttachmentRegistry
from onscreen.targets import BufferTextField


class RecordingTarget:
    def __init__(self):
        self.events = []

    def on_attach(self, controller):
        self.events.append(("attach", controller))

    def on_detach(self, controller):
        self.events.append(("detach", controller))

    def insert_text(self, text):
        pass

    def handle_action(self, action):
        pass


class SlottedTarget:
    # no __weakref__ slot, so this can't be weakly referenced
    __slots__ = ("text",)

    def __init__(self):
        self.text = ""

    def insert_text(self, text):
        self.text += text

    def handle_action(self, action):
        pass


def test_empty_registry():
    registry = AttachmentRegistry()
    assert registry.current() is None
    assert not registry.detach()
    assert not registry.detach(BufferTextField())


def test_attach_replaces_previous():
    owner = object()
    registry = AttachmentRegistry(owner=owner)
    a = RecordingTarget()
    b = RecordingTarget()
    assert registry.attach(a)
    assert registry.attach(b)
    assert registry.current() is b
    assert a.events == [("attach", owner), ("detach", owner)]
    assert b.events == [("attach", owner)]


def test_reattach_same_target_is_a_no_op():
    registry = AttachmentRegistry()
    a = RecordingTarget()
    registry.attach(a)
    assert not registry.attach(a)
    assert [kind for kind, _ in a.events] == ["attach"]


def test_named_detach_only_detaches_match():
    registry = AttachmentRegistry()
    a = BufferTextField(name="a")
    b = BufferTextField(name="b")
    registry.attach(b)
    assert not registry.detach(a)
    assert registry.current() is b
    assert b.attached
    assert registry.detach(b)
    assert registry.current() is None
    assert not b.attached


def test_detach_compares_identity_not_equality():
    class AlwaysEqual(BufferTextField):
        def __eq__(self, other):
            return True

        __hash__ = BufferTextField.__hash__

    registry = AttachmentRegistry()
    attached = AlwaysEqual()
    registry.attach(attached)
    assert not registry.detach(AlwaysEqual())
    assert registry.current() is attached


def test_unnamed_detach_clears():
    registry = AttachmentRegistry()
    b = BufferTextField()
    registry.attach(b)
    assert registry.detach()
    assert registry.current() is None


def test_dead_target_is_dropped():
    registry = AttachmentRegistry()
    field = BufferTextField()
    registry.attach(field)
    field.dispose()
    assert registry.current() is None
    # already dropped, so there is nothing left to detach
    assert not registry.detach()


def test_collected_target_is_dropped():
    registry = AttachmentRegistry()
    field = BufferTextField()
    registry.attach(field)
    del field
    gc.collect()
    assert registry.current() is None


def test_target_without_weakref_support():
    registry = AttachmentRegistry()
    target = SlottedTarget()
    registry.attach(target)
    assert registry.current() is target
    assert registry.detach(target)
    assert registry.current() is None
