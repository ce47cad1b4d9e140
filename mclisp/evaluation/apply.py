"""Application engine for mclisp.

An application form is a list whose elements have already been evaluated:
(FN ARG1 ARG2 ...). What happens next depends on the evaluated head:

- Closure: substitute the arguments into the body and evaluate the result in
  the caller's environment. Closures capture nothing, so free names in the
  body resolve against whatever environment the call site supplies.
- NativeFunction: call its implementation with the environment and the
  argument list.
- Anything else: the evaluated form itself is the result.
"""

from __future__ import annotations

import logging

from mclisp import LispObject, EvaluatorFn
from mclisp.log import get_logger
from mclisp.types.closure import Closure
from mclisp.types.environment import Environment
from mclisp.types.native import NativeFunction
from mclisp.types.pair import Pair
from mclisp.evaluation.substitution import pair_parameters, substitute

logger = get_logger("eval")


def apply_closure(
    fn: Closure,
    args: LispObject,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispObject:
    """Apply a Closure to an already-evaluated argument list by substitution."""
    pairs = pair_parameters(fn.params, args)
    body = substitute(fn.body, pairs)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("apply %s with %s", fn, pairs)
    return evaluate_fn(body, env)


def apply(form: Pair, env: Environment, evaluate_fn: EvaluatorFn) -> LispObject:
    head = form.car
    args = form.cdr
    if isinstance(head, Closure):
        return apply_closure(head, args, env, evaluate_fn)
    elif isinstance(head, NativeFunction):
        return head.fn(env, args)
    else:
        return form
