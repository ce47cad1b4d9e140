from mclisp import EvaluatorFn
from mclisp import SExpression, LispObject
from mclisp.errors import McLispSyntaxError
from mclisp.types.atom import Atom
from mclisp.types.closure import Closure
from mclisp.types.environment import Environment
from mclisp.types.pair import Pair, iter_list, length, nth


def lambda_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispObject:
    """
    (LAMBDA (params...) body)
    Builds a Closure from the unevaluated parameter list and body.
    """
    if length(tail) < 2:
        raise McLispSyntaxError("LAMBDA requires a parameter list and a body")

    params = nth(tail, 0)
    body = nth(tail, 1)

    if params is not None and not isinstance(params, Pair):
        raise McLispSyntaxError(f"LAMBDA parameter list must be a list, got {params}")
    for param in iter_list(params):
        if not isinstance(param, Atom):
            raise McLispSyntaxError(f"LAMBDA parameter must be an atom, got {param}")

    return Closure(params, body)
