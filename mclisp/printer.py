"""Renders mclisp objects back to text.

- a list prints as its elements, space separated, inside parentheses;
- the empty reference and the empty-list value print as ();
- an atom prints as its name;
- a closure prints as # followed by its parameter list and body;
- anything else prints as the literal marker `error`.
"""

from __future__ import annotations

import sys
from io import StringIO
from typing import Optional, TextIO

from mclisp import LispObject
from mclisp.types.atom import Atom
from mclisp.types.closure import Closure
from mclisp.types.pair import EmptyList, Pair

ERROR_MARKER = "error"


def _write(obj: LispObject, out: TextIO) -> None:
    if obj is None or isinstance(obj, EmptyList):
        out.write("()")
    elif isinstance(obj, Pair):
        out.write("(")
        _write(obj.car, out)
        obj = obj.cdr
        while isinstance(obj, Pair):
            out.write(" ")
            _write(obj.car, out)
            obj = obj.cdr
        out.write(")")
    elif isinstance(obj, Atom):
        out.write(obj.name)
    elif isinstance(obj, Closure):
        out.write("#")
        _write(obj.params, out)
        _write(obj.body, out)
    else:
        out.write(ERROR_MARKER)


def render(obj: LispObject) -> str:
    with StringIO() as buffer:
        _write(obj, buffer)
        return buffer.getvalue()


def lisp_print(obj: LispObject, out: Optional[TextIO] = None) -> None:
    """Write the rendering of `obj` to `out` (stdout by default), no newline."""
    (out or sys.stdout).write(render(obj))
