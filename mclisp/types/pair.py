"""Cons cells and the list helpers built on them.

A list is a right-leaning chain of Pairs ending in the empty reference
(None). Any non-Pair cdr met while walking a list is treated as its end.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from mclisp import LispObject


class Pair:
    __slots__ = ("car", "cdr")

    def __init__(self, car: LispObject = None, cdr: LispObject = None):
        self.car = car
        self.cdr = cdr

    def __iter__(self) -> Iterator[LispObject]:
        return iter_list(self)

    def __eq__(self, other: object) -> bool:
        """Structural equality, used by tests and tooling; the language compares atoms only."""
        if not isinstance(other, Pair):
            return False
        a: LispObject = self
        b: LispObject = other
        while isinstance(a, Pair) and isinstance(b, Pair):
            if a is b:
                return True
            if a.car != b.car:
                return False
            a, b = a.cdr, b.cdr
        return not isinstance(a, Pair) and not isinstance(b, Pair)

    # Pairs are mutable (append links a new cdr), so they are not hashable.
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        from mclisp.printer import render
        return f"Pair<{render(self)}>"

    def __str__(self) -> str:
        from mclisp.printer import render
        return render(self)


def iter_list(lst: LispObject) -> Iterator[LispObject]:
    """Yield the elements of a list, stopping at the first non-Pair link."""
    while isinstance(lst, Pair):
        yield lst.car
        lst = lst.cdr


def make_list(items: Iterable[LispObject]) -> Optional[Pair]:
    """Build a proper list from a Python iterable; an empty iterable gives None."""
    head: Optional[Pair] = None
    tail: Optional[Pair] = None
    for item in items:
        cell = Pair(item, None)
        if tail is None:
            head = cell
        else:
            tail.cdr = cell
        tail = cell
    return head


def append(lst: Pair, obj: LispObject) -> None:
    """Walk to the last Pair of `lst` and link a new trailing Pair holding `obj`."""
    ptr = lst
    while isinstance(ptr.cdr, Pair):
        ptr = ptr.cdr
    ptr.cdr = Pair(obj, None)


def nth(lst: LispObject, index: int) -> LispObject:
    """Return element `index` of a list, or None when the list is shorter."""
    for i, item in enumerate(iter_list(lst)):
        if i == index:
            return item
    return None


def length(lst: LispObject) -> int:
    return sum(1 for _ in iter_list(lst))


class EmptyList(Pair):
    """The empty-list value: a Pair whose car and cdr are both empty.

    Each Environment creates exactly one. Having its own class lets the
    printer tell it apart from a literal list holding a single ()."""

    __slots__ = ()

    def __init__(self):
        super().__init__(None, None)
