import string

from hypothesis import given, strategies as st

from mclisp.interpreter import Interpreter


def _to_source(expr):
    if isinstance(expr, list):
        return "(" + " ".join(_to_source(e) for e in expr) + ")"
    return expr


atom_strat = st.text(alphabet=string.ascii_uppercase + string.digits + "-*#'+", min_size=1, max_size=8)

sexpr_strat = st.recursive(
    atom_strat,
    lambda children: st.lists(children, max_size=4),
    max_leaves=12,
)


@given(sexpr_strat)
def test_quote_round_trip(sexpr):
    source = _to_source(sexpr)
    assert Interpreter().eval_to_string(f"(QUOTE {source})") == source


def test_quote_keeps_nested_empty_lists(itp):
    assert itp.eval_to_string("(QUOTE (()))") == "(())"
    assert itp.eval_to_string("(QUOTE (A () (())))") == "(A () (()))"
    assert itp.eval_to_string("(QUOTE ())") == "()"


def test_literal_data_without_quote(itp):
    # An unbound head makes a list evaluate to a copy of itself
    assert itp.eval_to_string("(A (B C) D)") == "(A (B C) D)"
