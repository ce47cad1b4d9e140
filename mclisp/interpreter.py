from __future__ import annotations

from typing import Optional, TextIO

from mclisp import LispObject
from mclisp.builtin.env_builtin import init_env
from mclisp.evaluation.evaluator import evaluate
from mclisp.printer import render
from mclisp.reader.parser import reader_for
from mclisp.types.environment import Environment


class Interpreter:
    """
    Reads and evaluates mclisp source against one Environment that persists
    across calls, so LABEL definitions stay visible to later evaluations.
    """

    def __init__(self, env: Optional[Environment] = None):
        self.env: Environment = env if env is not None else init_env()

    def eval(self, code: str | TextIO) -> LispObject:
        """Evaluate every expression in `code`.

        Returns the single result, a list of results when there are several,
        or the empty-list value when the source holds no expression.
        """
        results: list[LispObject] = [
            evaluate(expr, self.env) for expr in reader_for(code)
        ]
        if not results:
            return self.env.empty
        if len(results) == 1:
            return results[0]
        return results

    def eval_to_string(self, code: str | TextIO) -> str:
        """Evaluate `code` and render each result, one per line."""
        return "\n".join(
            render(evaluate(expr, self.env)) for expr in reader_for(code)
        )
