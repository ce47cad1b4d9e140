from mclisp import EvaluatorFn
from mclisp import SExpression, LispObject
from mclisp.errors import McLispSyntaxError
from mclisp.types.environment import Environment
from mclisp.types.pair import Pair, iter_list


def cond_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispObject:
    """
    (COND (test1 expr1) (test2 expr2) ...)

    Tests are evaluated in order, one clause at a time. The first test whose
    value is neither the empty-list value nor the empty reference selects its
    clause; the clause's expression is evaluated and returned. A clause with
    no expression yields the value of its test. If nothing matches the result
    is the empty-list value.
    """
    for clause in iter_list(tail):
        if clause is None:
            continue
        if not isinstance(clause, Pair):
            raise McLispSyntaxError(f"COND clause must be a list, got {clause}")

        test = clause.car
        pred = env.empty if test is None else evaluate_fn(test, env)
        # Both the empty-list value and the empty reference (e.g. from
        # (CDR (A))) are false; an identity check against env.empty is not enough.
        if env.is_empty(pred):
            continue

        if not isinstance(clause.cdr, Pair):
            return pred
        return evaluate_fn(clause.cdr.car, env)

    return env.empty
