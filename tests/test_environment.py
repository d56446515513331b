import gc

import pytest

from lispy.types import Environment, ErrorKind, LispError, LispyInvalidSymbol, QExpr, Symbol

X, Y = Symbol("x"), Symbol("y")


def test_define_and_lookup():
    env = Environment()
    env.define(X, 1)
    assert env.lookup(X) == 1
    assert X in env


def test_lookup_walks_outward():
    root = Environment()
    root.define(X, 1)
    child = Environment(outer=Environment(outer=root))
    assert child.lookup(X) == 1


def test_inner_binding_shadows_outer():
    root = Environment()
    root.define(X, 1)
    child = Environment(outer=root)
    child.define(X, 2)
    assert child.lookup(X) == 2
    assert root.lookup(X) == 1


def test_unbound_symbol_is_an_error_value():
    result = Environment().lookup(Y)
    assert isinstance(result, LispError)
    assert result.kind is ErrorKind.UNBOUND_SYMBOL
    assert Y not in Environment()


def test_define_global_writes_root_frame():
    root = Environment()
    child = Environment(outer=Environment(outer=root))
    child.define_global(X, 7)
    assert X in root.vars
    assert X not in child.vars
    assert child.root() is root


def test_define_overwrites_in_place_keeping_order():
    env = Environment()
    env.define(X, 1)
    env.define(Y, 2)
    env.define(X, 3)
    assert list(env.vars) == [X, Y]
    assert env.lookup(X) == 3


def test_store_copies_value():
    env = Environment()
    q = QExpr([1])
    env.define(X, q)
    q.append(2)
    assert env.lookup(X) == QExpr([1])


def test_lookup_returns_a_copy():
    env = Environment()
    env.define(X, QExpr([1]))
    got = env.lookup(X)
    got.append(2)
    assert env.lookup(X) == QExpr([1])


def test_copy_frame_is_independent():
    root = Environment()
    env = Environment(outer=root)
    env.define(X, QExpr([1]))
    dup = env.copy()
    assert dup.outer is root
    dup.define(Y, 2)
    dup.vars[X].append(5)
    assert Y not in env.vars
    assert env.lookup(X) == QExpr([1])


def test_invalid_symbol_raises():
    with pytest.raises(LispyInvalidSymbol):
        Environment().define("x", 1)


def test_update_and_repr():
    env = Environment(outer=Environment())
    env.update({X: 1, Y: "s"})
    assert str(env) == "{x: 1, y: 's'} -> ..."
    assert repr(env).startswith("<Environment chain: {x: 1, y: 's'} -> {}")


def test_symbols_are_interned():
    assert Symbol("x") is X
    assert Symbol("x") == X and hash(Symbol("x")) == hash(X)


def test_unreferenced_symbols_are_released():
    name = "a-name-nothing-keeps"
    Symbol(name)
    gc.collect()
    assert name not in Symbol._table
