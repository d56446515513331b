import pytest

from lispy.evaluation.apply import apply
from lispy.evaluation.evaluator import evaluate
from lispy.printer import lisp_str
from lispy.types import Environment, ErrorKind, Lambda, LispError, QExpr, SExpr, Symbol
from lispy.types.bind import bind_arguments

X, Y, REST, AMP = Symbol("x"), Symbol("y"), Symbol("rest"), Symbol("&")


# -----------------------------------------------------
# Lambda construction
# -----------------------------------------------------

def test_lambda_simple(run):
    assert run(r"((\ {x y} {+ x y}) 1 2)") == "3"


def test_lambda_prints_formals_and_body(run):
    assert run(r"(\ {x y} {+ x y})") == r"\ {x y} {+ x y}"


def test_lambda_rejects_non_symbol_formals(interp):
    result = interp.eval(r"(\ {x 1} {x})")
    assert isinstance(result, LispError)
    assert result.kind is ErrorKind.MALFORMED_LAMBDA
    assert lisp_str(result) == "Error: Cannot define non-symbol. Got Number, expected Symbol."


def test_lambda_arity(run):
    assert run(r"(\ {x})") == r"Error: Function '\' passed incorrect number of arguments. Got 1, expected 2."


def test_global_def_then_call(run):
    run(r"(def {add1} (\ {x} {+ x 1}))")
    assert run("(add1 5)") == "6"


# -----------------------------------------------------
# Currying
# -----------------------------------------------------

def test_partial_application(run):
    run(r"(def {f} (\ {x y} {+ x y}))")
    assert run("((f 1) 2)") == "3"


def test_partial_application_returns_a_function(interp):
    interp.eval(r"(def {f} (\ {x y} {+ x y}))")
    partial = interp.eval("(f 1)")
    assert isinstance(partial, Lambda)
    assert lisp_str(partial) == r"\ {y} {+ x y}"


def test_partial_application_leaves_curried_closure_intact(run):
    run(r"(def {f} (\ {x y} {+ x y}))")
    run("(def {inc} (f 1))")
    assert run("(inc 10)") == "11"
    assert run("(inc 20)") == "21"
    assert run("(f 10 20)") == "30"
    assert run("f") == r"\ {x y} {+ x y}"


def test_curried_chain(run):
    run(r"(def {add3} (\ {a b c} {+ a b c}))")
    assert run("(((add3 1) 2) 3)") == "6"
    assert run("((add3 1 2) 3)") == "6"


def test_too_many_arguments(interp):
    result = interp.eval(r"((\ {x} {x}) 1 2)")
    assert isinstance(result, LispError)
    assert result.kind is ErrorKind.ARITY
    assert lisp_str(result) == "Error: Function passed too many arguments. Got 2, expected 1."


# -----------------------------------------------------
# Variadic binding
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        (r"((\ {x & xs} {list x xs}) 1 2 3)", "{1 {2 3}}"),
        (r"((\ {x & xs} {xs}) 1)", "{}"),
        (r"((\ {& xs} {xs}) 1 2)", "{1 2}"),
        (r"((\ {a b & rest} {list a b rest}) 1 2 3 4)", "{1 2 {3 4}}"),
    ]
)
def test_rest_arguments(run, source, expected):
    assert run(source) == expected


def test_curried_variadic(run):
    run(r"(def {g} (\ {a b & rest} {list a b rest}))")
    assert run("((g 1) 2 3 4)") == "{1 2 {3 4}}"
    assert run("((g 1) 2)") == "{1 2 {}}"


@pytest.mark.parametrize(
    "source",
    [
        r"((\ {x &} {x}) 1 2)",
        r"((\ {& a b} {a}) 1)",
        r"((\ {x & a b} {x}) 1)",
    ]
)
def test_malformed_rest_marker(interp, source):
    result = interp.eval(source)
    assert isinstance(result, LispError)
    assert result.kind is ErrorKind.MALFORMED_LAMBDA


# -----------------------------------------------------
# Binding engine
# -----------------------------------------------------

def test_bind_arguments_partial():
    formals = [X, Y]
    frame = Environment()
    remaining = bind_arguments(formals, [1], frame)
    assert remaining == [Y]
    assert frame.lookup(X) == 1
    assert formals == [X, Y]


def test_bind_arguments_rest_defaults_to_empty():
    frame = Environment()
    remaining = bind_arguments([X, AMP, REST], [1], frame)
    assert remaining == []
    assert frame.lookup(REST) == QExpr()


def test_bind_arguments_copies_values():
    frame = Environment()
    arg = QExpr([1])
    bind_arguments([X], [arg], frame)
    arg.append(2)
    assert frame.lookup(X) == QExpr([1])


def test_apply_calls_builtin_with_caller_env(env):
    seen = []

    def probe(e, args):
        seen.append((e, args))
        return SExpr()

    from lispy.types import Builtin
    apply(Builtin("probe", probe), [1, 2], env, evaluate)
    assert seen == [(env, [1, 2])]


def test_apply_rejects_non_function(env):
    result = apply(1, [], env, evaluate)
    assert isinstance(result, LispError)
    assert result.kind is ErrorKind.TYPE


def test_apply_unlinks_call_frame(env):
    frames = []

    def capture(e, args):
        frames.append(e)
        return SExpr()

    from lispy.types import Builtin
    env.define(Symbol("capture"), Builtin("capture", capture))
    fn = Lambda([X], QExpr([Symbol("capture"), X]))
    apply(fn, [1], env, evaluate)
    (frame,) = frames
    assert frame.outer is None
    assert fn.formals == [X]
    assert not fn.env.vars
