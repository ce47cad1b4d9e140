from __future__ import annotations

from mclisp.errors import McLispInvalidAtom

DELIMITERS = frozenset("()")


class Atom:
    """A named symbol. Two atoms are equal when their names are equal."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        if not name:
            raise McLispInvalidAtom("Atom name must not be empty")
        if any(ch.isspace() or ch in DELIMITERS for ch in name):
            raise McLispInvalidAtom(f"Invalid character in atom name {name!r}")
        self.name = name

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Atom) and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Atom({self.name!r})"

    def __str__(self):
        return self.name
