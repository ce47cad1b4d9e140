# Core type aliases for the mclisp data model.
# Runtime values are the four variants in mclisp.types (Atom, Pair,
# NativeFunction, Closure) or None, the empty reference that ends a list.
#
# Naming guidance:
# - SExpression: use in reader code to denote syntactic forms (code-as-data).
# - LispObject:  use in evaluator/runtime code to denote evaluated values.
# Both resolve to `Any`; source forms and values share one representation.

from typing import Any, Callable

LispObject = Any
SExpression = LispObject

# Evaluator function type passed to special forms
EvaluatorFn = Callable[..., LispObject]

__version__ = "0.1.0"
