"""Built-in functions for the mclisp runtime environment.

This module defines the list primitives, predicates, LABEL and the native
form of LAMBDA, plus the registration helpers that build the initial
environment. Every function here receives its arguments already evaluated,
as a Lisp list, and is called as fn(env, args).
"""
from __future__ import annotations

from mclisp import LispObject
from mclisp.errors import McLispArityError, McLispTypeError
from mclisp.evaluation.apply import apply_closure
from mclisp.evaluation.evaluator import evaluate
from mclisp.evaluation.special_forms import SPECIAL_FORMS
from mclisp.types.atom import Atom
from mclisp.types.closure import Closure
from mclisp.types.environment import Environment
from mclisp.types.native import NativeFunction
from mclisp.types.pair import Pair, iter_list, length, make_list


def _require(name: str, args: LispObject, count: int) -> list[LispObject]:
    """Return the first `count` arguments, raising if fewer were supplied."""
    if length(args) < count:
        raise McLispArityError(
            f"{name} requires {count} argument(s), got {length(args)}"
        )
    values = []
    for item in iter_list(args):
        if len(values) == count:
            break
        values.append(item)
    return values


def _atom_name(name: str, obj: LispObject) -> str:
    if not isinstance(obj, Atom):
        raise McLispTypeError(f"{name} expects an atom, got {_describe(obj)}")
    return obj.name


def _describe(obj: LispObject) -> str:
    from mclisp.printer import render
    return render(obj)


# -------------------------------
# List primitives
# -------------------------------
def car(env: Environment, args: LispObject) -> LispObject:
    """Head of the first argument; the empty list has no head."""
    (lst,) = _require("CAR", args, 1)
    if lst is None:
        return None
    if not isinstance(lst, Pair):
        raise McLispTypeError(f"CAR expects a list, got {_describe(lst)}")
    return lst.car


def cdr(env: Environment, args: LispObject) -> LispObject:
    """Tail of the first argument."""
    (lst,) = _require("CDR", args, 1)
    if lst is None:
        return None
    if not isinstance(lst, Pair):
        raise McLispTypeError(f"CDR expects a list, got {_describe(lst)}")
    return lst.cdr


def cons(env: Environment, args: LispObject) -> LispObject:
    """Fresh list of the first argument followed by every element of the second.

    The second argument is spliced, not linked: the result is always a proper
    list. A non-list (or empty) second argument contributes no elements.
    """
    head, tail = _require("CONS", args, 2)
    if env.is_empty(tail):
        return Pair(head, None)
    return make_list([head, *iter_list(tail)])


# -------------------------------
# Predicates
# -------------------------------
def equal(env: Environment, args: LispObject) -> LispObject:
    """Truth atom if both atom arguments have the same name, else the empty list."""
    a, b = _require("EQUAL", args, 2)
    if _atom_name("EQUAL", a) == _atom_name("EQUAL", b):
        return env.truth
    return env.empty


def atom(env: Environment, args: LispObject) -> LispObject:
    (obj,) = _require("ATOM", args, 1)
    return env.truth if isinstance(obj, Atom) else env.empty


# -------------------------------
# Functions and definitions
# -------------------------------
def lambda_apply(env: Environment, args: LispObject) -> LispObject:
    """(LAMBDA closure arg...) reached through application: apply the closure."""
    (fn,) = _require("LAMBDA", args, 1)
    if not isinstance(fn, Closure):
        raise McLispTypeError(f"LAMBDA expects a closure, got {_describe(fn)}")
    return apply_closure(fn, args.cdr, env, evaluate)


def label(env: Environment, args: LispObject) -> LispObject:
    """Append a binding of the first argument's name to the second argument."""
    name, value = _require("LABEL", args, 2)
    env.bind(Atom(_atom_name("LABEL", name)), value)
    return env.truth


# -------------------------------
# Registration
# -------------------------------
BUILTINS = {
    "CAR": car,
    "CDR": cdr,
    "CONS": cons,
    "EQUAL": equal,
    "ATOM": atom,
    "LAMBDA": lambda_apply,
    "LABEL": label,
}

# Binding order of the initial environment.
INITIAL_ORDER = ("QUOTE", "CAR", "CDR", "CONS", "EQUAL", "ATOM", "COND", "LAMBDA", "LABEL")


def register(env: Environment) -> None:
    """Bind every special form and builtin into `env`."""
    for name in INITIAL_ORDER:
        if name in SPECIAL_FORMS:
            env.bind(name, NativeFunction(name, SPECIAL_FORMS[name], special=True))
        else:
            env.bind(name, NativeFunction(name, BUILTINS[name]))


def init_env(truth_name: str | None = None) -> Environment:
    """Create a fresh environment holding the builtins."""
    env = Environment(truth_name)
    register(env)
    return env
