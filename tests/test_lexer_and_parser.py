import io
import string

import pytest
from hypothesis import given, strategies as st

from mclisp.errors import McLispSyntaxError, McLispInvalidAtom
from mclisp.reader.parser import CharStream, Reader, read, read_all
from mclisp.types.atom import Atom
from mclisp.types.eof import EOF
from mclisp.types.pair import Pair, make_list


def _tokens(source):
    reader = Reader(io.StringIO(source))
    out = []
    while (tok := reader.next_token()) is not None:
        out.append(tok)
    return out


def _to_source(expr):
    if isinstance(expr, list):
        return "(" + " ".join(_to_source(e) for e in expr) + ")"
    return expr


def _to_object(expr):
    if isinstance(expr, list):
        return make_list(_to_object(e) for e in expr)
    return Atom(expr)


def A(name):
    return Atom(name)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("A", ["A"]),
        ("(A B C)", ["(", "A", "B", "C", ")"]),
        ("  \n\tFOO  \n", ["FOO"]),
        ("(A)B", ["(", "A", ")", "B"]),
        ("A(B)", ["A", "(", "B", ")"]),
        ("((X))", ["(", "(", "X", ")", ")"]),
        ("'X", ["'X"]),
        ("#T 123 a-b", ["#T", "123", "a-b"]),
        ("", []),
        ("   \n  ", []),
    ]
)
def test_tokenizer(source, expected):
    assert _tokens(source) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("A", A("A")),
        ("(A B)", make_list([A("A"), A("B")])),
        ("()", None),
        ("(A () B)", make_list([A("A"), None, A("B")])),
        ("((A B) (C))", make_list([make_list([A("A"), A("B")]), make_list([A("C")])])),
        ("(QUOTE 'X)", make_list([A("QUOTE"), A("'X")])),
        ("(\nCAR\n(A B)\n)", make_list([A("CAR"), make_list([A("A"), A("B")])])),
    ]
)
def test_parser(source, expected):
    result = read_all(source)
    assert result == [expected]


def test_list_is_right_nested_chain_of_pairs():
    lst = read_all("(A B)")[0]
    assert isinstance(lst, Pair)
    assert lst.car == A("A")
    assert isinstance(lst.cdr, Pair)
    assert lst.cdr.car == A("B")
    assert lst.cdr.cdr is None


def test_several_expressions_in_one_stream():
    assert read_all("A (B) C") == [A("A"), make_list([A("B")]), A("C")]


def test_end_of_input_is_distinct_from_empty_list():
    reader = Reader(io.StringIO("() X"))
    assert reader.read() is None
    assert reader.read() == A("X")
    assert reader.read() is EOF
    # Reading past the end keeps reporting EOF
    assert read(reader) is EOF


def test_read_accepts_a_text_stream():
    stream = io.StringIO("A(B C)")
    assert read(stream) == A("A")
    # The paren that ended the atom is not lost between calls
    assert read(stream) == make_list([A("B"), A("C")])
    assert read(stream) is EOF


def test_undecodable_input_is_a_syntax_error():
    stream = io.TextIOWrapper(io.BytesIO(b"(QUOTE \xff)"), encoding="utf-8")
    chars = CharStream(stream)
    with pytest.raises(McLispSyntaxError, match="encoding"):
        chars.getc()
    assert chars.getc() == ""


def test_atom_may_end_at_end_of_input():
    assert read_all("LAST") == [A("LAST")]


def test_unterminated_list_raises():
    with pytest.raises(McLispSyntaxError, match="end of input"):
        read_all("(A (B C)")


def test_stray_close_paren_raises_and_reading_continues():
    reader = Reader(io.StringIO(") A"))
    with pytest.raises(McLispSyntaxError, match=r"Unexpected '\)'"):
        reader.read()
    assert reader.read() == A("A")


def test_syntax_error_reports_line():
    with pytest.raises(McLispSyntaxError, match="line 3"):
        read_all("A\n\n)")


def test_long_tokens_are_unbounded_by_default():
    name = "X" * 1000
    assert read_all(name) == [A(name)]


def test_token_limit():
    assert Reader(io.StringIO("ABCD"), max_token_length=4).read() == A("ABCD")
    with pytest.raises(McLispSyntaxError, match="Token too long"):
        Reader(io.StringIO("ABCDE"), max_token_length=4).read()


def test_token_limit_from_environment(monkeypatch):
    monkeypatch.setenv("MCLISP_MAX_TOKEN_LENGTH", "3")
    with pytest.raises(McLispSyntaxError):
        Reader(io.StringIO("ABCD")).read()


def test_char_stream_pushback_and_lines():
    chars = CharStream(io.StringIO("a\nb"))
    assert chars.getc() == "a"
    assert chars.getc() == "\n"
    assert chars.line == 2
    chars.ungetc("\n")
    assert chars.line == 1
    assert chars.getc() == "\n"
    assert chars.getc() == "b"
    assert chars.getc() == ""


@pytest.mark.parametrize("name", ["", "A B", "A(", ")", "\n"])
def test_invalid_atom_names(name):
    with pytest.raises(McLispInvalidAtom):
        Atom(name)


def test_atoms_compare_by_name():
    assert Atom("FOO") == Atom("FOO")
    assert Atom("FOO") is not Atom("FOO")
    assert Atom("FOO") != Atom("BAR")
    assert len({Atom("FOO"), Atom("FOO")}) == 1


# -------------------------------
# Strategies
# -------------------------------
atom_strat = st.text(
    alphabet=string.ascii_uppercase + string.digits + "-*#'+",
    min_size=1, max_size=8,
)

sexpr_strat = st.recursive(
    atom_strat,
    lambda children: st.lists(children, max_size=4),
    max_leaves=12,
)


@given(sexpr_strat)
def test_parser_builds_the_written_structure(sexpr):
    assert read_all(_to_source(sexpr)) == [_to_object(sexpr)]


@given(sexpr_strat)
def test_tokens_concatenate_back_to_source(sexpr):
    source = _to_source(sexpr)
    assert "".join(_tokens(source)) == source.replace(" ", "")
