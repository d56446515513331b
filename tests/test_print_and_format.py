import pytest
from hypothesis import given, strategies as st

from lispy.builtin import env_builtin
from lispy.printer import lisp_str, lisp_println
from lispy.reader.parser import parse
from lispy.reader.reader import read
from lispy.types import Builtin, Lambda, LispError, QExpr, SExpr, Symbol, is_equal
from lispy.types.values import NUMBER_MAX, NUMBER_MIN


@pytest.mark.parametrize(
    "value,expected",
    [
        (5, "5"),
        (-3, "-3"),
        ("plain", '"plain"'),
        ("a\nb\t\"q\"\\", r'"a\nb\t\"q\"\\"'),
        (Symbol("foo"), "foo"),
        (LispError("bad thing"), "Error: bad thing"),
        (Builtin("+", env_builtin.add), "<builtin>"),
        (Lambda([Symbol("x"), Symbol("y")], QExpr([Symbol("+"), Symbol("x"), Symbol("y")])), r"\ {x y} {+ x y}"),
        (SExpr(), "()"),
        (QExpr(), "{}"),
        (SExpr([Symbol("+"), 1, SExpr([Symbol("*"), 2, 3])]), "(+ 1 (* 2 3))"),
        (QExpr([1, QExpr([2, "s"]), SExpr()]), '{1 {2 "s"} ()}'),
    ]
)
def test_lisp_str(value, expected):
    assert lisp_str(value) == expected


def test_lisp_str_rejects_host_values():
    with pytest.raises(TypeError):
        lisp_str(1.5)


def test_println(capsys):
    lisp_println(QExpr([1, 2]))
    assert capsys.readouterr().out == "{1 2}\n"


def test_print_outputs_and_returns_empty_sexpr(env, capsys):
    pr = env.lookup(Symbol("print"))
    assert isinstance(pr, Builtin)
    ret = pr(env, ["alpha", 42, Symbol("beta"), QExpr([1])])
    out = capsys.readouterr().out
    assert out == '"alpha" 42 beta {1}\n'
    assert ret == SExpr()


def test_print_from_source(run, capsys):
    assert run('(print 1 "a" {b c})') == "()"
    assert capsys.readouterr().out == '1 "a" {b c}\n'


# -----------------------------------------------------
# Round trip: read(print(v)) == v
# -----------------------------------------------------

numbers = st.integers(min_value=NUMBER_MIN, max_value=NUMBER_MAX)
strings = st.text(max_size=20)
symbols = st.from_regex(r"[a-zA-Z_+*/=<>!&\\][a-zA-Z0-9_+\-*/=<>!&\\]{0,8}", fullmatch=True).map(Symbol)
atoms = numbers | strings | symbols
values = st.recursive(
    atoms,
    lambda children: st.builds(QExpr, st.lists(children, max_size=4))
    | st.builds(SExpr, st.lists(children, max_size=4)),
    max_leaves=20,
)


@given(values)
def test_read_print_round_trip(value):
    root = read(parse(lisp_str(value)))
    assert len(root) == 1
    assert is_equal(root[0], value)
