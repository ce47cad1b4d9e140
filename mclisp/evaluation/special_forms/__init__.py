"""Registry of special forms for the mclisp evaluator.

Maps names to handlers that receive their operand list unevaluated. The
handlers are bound into the environment as NativeFunctions flagged
`special`, and the evaluator passes them the raw operands instead of
evaluating each one first.

LAMBDA at the head of a form is recognised by name in the evaluator before
any lookup and is handled by lambda_form.
"""

from mclisp.evaluation.special_forms.quote_form import quote_form
from mclisp.evaluation.special_forms.cond_form import cond_form
from mclisp.evaluation.special_forms.lambda_form import lambda_form

LAMBDA = "LAMBDA"

SPECIAL_FORMS = {
    "QUOTE": quote_form,
    "COND": cond_form,
}

__all__ = ["SPECIAL_FORMS", "LAMBDA", "lambda_form"]
