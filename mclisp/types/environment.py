"""Runtime environment for mclisp.

The Environment is itself a Lisp list: each element is an association
(NAME VALUE), i.e. Pair(Atom(name), Pair(value, None)). Binding appends to
the end and never overwrites; lookup scans from the head, so the earliest
binding of a name is the one that is found.

The environment also owns the two distinguished singletons, the truth atom
and the empty-list value, created once when the environment is built.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from mclisp import LispObject
from mclisp.config import get_truth_name
from mclisp.errors import McLispInvalidAtom, McLispUnboundSymbol
from mclisp.log import get_logger
from mclisp.types.atom import Atom
from mclisp.types.pair import EmptyList, Pair, append, iter_list

logger = get_logger("env")


class Environment:
    """Append-only association list from atom names to Lisp objects."""

    __slots__ = ("bindings", "truth", "empty")

    def __init__(self, truth_name: Optional[str] = None):
        self.bindings: Optional[Pair] = None
        self.truth: Atom = Atom(truth_name or get_truth_name())
        self.empty: EmptyList = EmptyList()

    def bind(self, name: Atom | str, value: LispObject) -> None:
        """Append a (name value) association. Existing bindings are left alone."""
        if isinstance(name, str):
            name = Atom(name)
        if not isinstance(name, Atom):
            raise McLispInvalidAtom(f"Cannot bind {name!r}: not an atom")
        entry = Pair(name, Pair(value, None))
        if self.bindings is None:
            self.bindings = Pair(entry, None)
        else:
            append(self.bindings, entry)
        logger.debug("bound %s", name.name)

    def find(self, name: Atom | str) -> Optional[Pair]:
        """Return the first association whose name matches, or None."""
        key = name.name if isinstance(name, Atom) else name
        for entry in iter_list(self.bindings):
            if isinstance(entry, Pair) and isinstance(entry.car, Atom) and entry.car.name == key:
                return entry
        return None

    def lookup(self, name: Atom | str) -> LispObject:
        """Strict lookup: the first bound value, or McLispUnboundSymbol."""
        entry = self.find(name)
        if entry is None:
            raise McLispUnboundSymbol(f"Cannot lookup unbound symbol {name}")
        return entry.cdr.car

    def is_empty(self, obj: LispObject) -> bool:
        """True for the empty-list value and for the empty reference."""
        return obj is None or obj is self.empty

    def names(self) -> Iterator[str]:
        for entry in iter_list(self.bindings):
            yield entry.car.name

    def __len__(self) -> int:
        return sum(1 for _ in iter_list(self.bindings))

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, (Atom, str)):
            return False
        return self.find(name) is not None

    def __str__(self) -> str:
        from mclisp.printer import render
        with StringIO() as buffer:
            buffer.write("{")
            first = True
            for entry in iter_list(self.bindings):
                if not first:
                    buffer.write(", ")
                buffer.write(f"{entry.car.name}: {render(entry.cdr.car)}")
                first = False
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {len(self)} bindings>"
