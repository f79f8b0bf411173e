from __future__ import annotations

import inspect
import typing

from .commontypes import InvalidState

V = typing.TypeVar("V")


def call_if_present(obj: typing.Any, method_name: str, **provided_kwargs):
    if not hasattr(obj, method_name):
        return None
    c = getattr(obj, method_name)
    if not callable(c):
        return None
    return invoke(c, **provided_kwargs)


def invoke(c: typing.Callable, **provided_kwargs):
    sig = inspect.signature(c)
    used_kwargs = {k: v for k, v in provided_kwargs.items() if k in sig.parameters}
    return c(**used_kwargs)


def next_in_order(names: typing.Sequence[V], current: V) -> V:
    "Return the item after current in names, wrapping around to the first item after the last."
    try:
        index = names.index(current)
    except ValueError:
        raise InvalidState(f"{current!r} is not one of {list(names)!r}") from None
    return names[(index + 1) % len(names)]
