"""Core evaluator for mclisp.

evaluate(expr, env) handles the four shapes an expression can take:

- the empty reference evaluates to the environment's empty-list value;
- an atom evaluates to its first binding, or to itself when unbound;
- (LAMBDA params body) builds a Closure without evaluating anything;
- any other list is an application. The head is evaluated first. A special
  form receives the operands unevaluated; otherwise every operand is
  evaluated left to right in the same environment and the resulting list
  is handed to apply().

Other objects (closures, natives and the empty-list value substituted into
a body) evaluate to themselves.
"""

from __future__ import annotations

from mclisp import SExpression, LispObject
from mclisp.types.atom import Atom
from mclisp.types.environment import Environment
from mclisp.types.native import NativeFunction
from mclisp.types.pair import EmptyList, Pair, iter_list
from mclisp.evaluation.apply import apply
from mclisp.evaluation.special_forms import LAMBDA, lambda_form


def evaluate(expr: SExpression, env: Environment) -> LispObject:
    if expr is None:
        return env.empty

    if isinstance(expr, Atom):
        entry = env.find(expr)
        if entry is None:
            return expr
        return entry.cdr.car

    # The empty-list value can reach here through substitution.
    if not isinstance(expr, Pair) or isinstance(expr, EmptyList):
        return expr

    head = expr.car
    if isinstance(head, Atom) and head.name == LAMBDA:
        return lambda_form(expr.cdr, env, evaluate)

    fn = evaluate(head, env)
    if isinstance(fn, NativeFunction) and fn.special:
        return fn.fn(expr.cdr, env, evaluate)

    form = Pair(fn, None)
    tail = form
    for arg in iter_list(expr.cdr):
        tail.cdr = Pair(evaluate(arg, env), None)
        tail = tail.cdr
    return apply(form, env, evaluate)
