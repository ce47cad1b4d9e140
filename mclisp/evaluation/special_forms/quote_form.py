from mclisp import SExpression, LispObject, EvaluatorFn
from mclisp.errors import McLispArityError
from mclisp.types.environment import Environment
from mclisp.types.pair import length


def quote_form(
    tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn
) -> LispObject:
    if length(tail) != 1:
        raise McLispArityError("QUOTE expects exactly 1 argument")
    return tail.car
