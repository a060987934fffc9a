"""Cons cells and proper-list helpers.

A list is either ``Nil`` or a chain of ``Pair`` nodes. Pairs are immutable
once built, so tails can be shared freely between lists; every list
operation here returns new nodes instead of patching old ones.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from sprig import LispValue
from sprig.types.errors import SprigTypeError
from sprig.types.nil import Nil


class Pair:
    __slots__ = ("car", "cdr")
    __match_args__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue = Nil):
        object.__setattr__(self, "car", car)
        object.__setattr__(self, "cdr", cdr)

    def __setattr__(self, name, value):
        raise AttributeError("Pair is immutable")

    def __iter__(self) -> Iterator[LispValue]:
        node = self
        while isinstance(node, Pair):
            yield node.car
            node = node.cdr
        if node is not Nil:
            raise SprigTypeError(f"Not a proper list: {self}")

    def __eq__(self, other: object) -> bool:
        a, b = self, other
        while isinstance(a, Pair) and isinstance(b, Pair):
            if a is b:
                return True
            if a.car != b.car:
                return False
            a, b = a.cdr, b.cdr
        if isinstance(a, Pair) or isinstance(b, Pair):
            return False
        return a == b

    __hash__ = None

    def __str__(self) -> str:
        from sprig.printer import to_string
        return to_string(self)

    def __repr__(self) -> str:
        return str(self)


def is_list(value: LispValue) -> bool:
    return value is Nil or isinstance(value, Pair)


def is_proper_list(value: LispValue) -> bool:
    while isinstance(value, Pair):
        value = value.cdr
    return value is Nil


def from_iterable(items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
    """Build a list from Python items, ending in `tail` (Nil for a proper list)."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def make_list(*items: LispValue) -> LispValue:
    return from_iterable(items)


def to_python_list(value: LispValue, what: str = "list") -> list[LispValue]:
    """Return the elements of a proper list, or raise SprigTypeError."""
    if value is Nil:
        return []
    if not isinstance(value, Pair):
        raise SprigTypeError(f"{what} must be a list, got {value}")
    return list(value)


def length(value: LispValue) -> int:
    return len(to_python_list(value, "len argument"))


def append(*lists: LispValue) -> LispValue:
    """Concatenate lists. All but the last must be proper; the last is shared as the tail."""
    if not lists:
        return Nil
    result = lists[-1]
    for lst in reversed(lists[:-1]):
        result = from_iterable(to_python_list(lst, "append argument"), result)
    return result
