"""Substitution machinery used to apply closures.

A closure is applied by pairing its formal parameters with the argument
values and rewriting the body, replacing every atom that names a parameter
with that parameter's value. Matching is by name only and ignores nesting:
an inner LAMBDA that reuses a parameter name is rewritten too.
"""

from __future__ import annotations

from mclisp import LispObject, SExpression
from mclisp.errors import McLispArityError, McLispTypeError
from mclisp.types.atom import Atom
from mclisp.types.pair import EmptyList, Pair, iter_list, make_list


def pair_parameters(params: SExpression, args: LispObject) -> LispObject:
    """Return the list ((P1 V1) (P2 V2) ...) pairing params with args in order.

    Missing arguments raise McLispArityError; surplus arguments are ignored.
    """
    values = list(iter_list(args))
    formals = list(iter_list(params))
    if len(values) < len(formals):
        raise McLispArityError(
            f"Expected {len(formals)} argument(s), got {len(values)}"
        )
    pairs = []
    for param, value in zip(formals, values):
        if not isinstance(param, Atom):
            raise McLispTypeError(f"Lambda parameter must be an atom, got {param!r}")
        pairs.append(Pair(param, Pair(value, None)))
    return make_list(pairs)


def substitute(sexp: SExpression, pairs: LispObject) -> SExpression:
    """Copy `sexp`, replacing atoms bound in `pairs` (first match wins)."""
    # A substituted empty-list value stays the environment's singleton.
    if isinstance(sexp, EmptyList):
        return sexp
    if isinstance(sexp, Pair):
        return make_list(substitute(item, pairs) for item in iter_list(sexp))
    if isinstance(sexp, Atom):
        for item in iter_list(pairs):
            if item.car.name == sexp.name:
                return item.cdr.car
    return sexp
