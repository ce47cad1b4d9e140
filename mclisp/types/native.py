from __future__ import annotations

from typing import Callable


class NativeFunction:
    """A built-in operation bound to a name in the environment.

    `fn` is called as fn(env, args). When `special` is set the evaluator hands
    over the operand list unevaluated, and fn is called as
    fn(args, env, evaluate_fn) instead.
    """

    __slots__ = ("name", "fn", "special")

    def __init__(self, name: str, fn: Callable, special: bool = False):
        self.name = name
        self.fn = fn
        self.special = special

    def __repr__(self) -> str:
        kind = "special form" if self.special else "builtin"
        return f"<{kind} {self.name}>"
