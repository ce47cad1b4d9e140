from mclisp.types.atom import Atom
from mclisp.types.pair import EmptyList, Pair, make_list, append, iter_list
from mclisp.types.native import NativeFunction
from mclisp.types.closure import Closure
from mclisp.types.eof import EOF
from mclisp.types.environment import Environment

__all__ = [
    "Atom",
    "Pair",
    "EmptyList",
    "make_list",
    "append",
    "iter_list",
    "NativeFunction",
    "Closure",
    "EOF",
    "Environment",
]
