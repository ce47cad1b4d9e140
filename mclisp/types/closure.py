"""Closure representation: an unevaluated LAMBDA."""

from __future__ import annotations

from io import StringIO

from mclisp import SExpression


class Closure:
    """A formal-parameter list and a body waiting to be instantiated.

    There is no captured environment: application substitutes argument values
    into the body and evaluates it wherever the call happens.
    """

    __slots__ = ("params", "body")

    def __init__(self, params: SExpression, body: SExpression):
        self.params: SExpression = params
        self.body: SExpression = body

    def __str__(self) -> str:
        from mclisp.printer import render
        with StringIO() as buffer:
            buffer.write("#")
            buffer.write(render(self.params))
            buffer.write(render(self.body))
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Closure<{self}>"
