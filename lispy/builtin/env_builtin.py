"""Built-in functions for the Lispy runtime environment.

This module defines arithmetic, list processing, ordering and equality,
conditionals, variable binding, lambda construction and the I/O-adjacent
primitives, plus the registration helper that installs them into the root
environment.

Every builtin has the signature ``fn(env, args)`` where ``args`` is a list
of already-evaluated values owned by the builtin. Bad input is reported by
returning a LispError, never by raising.
"""
from __future__ import annotations

import logging
from typing import Callable

from lispy import LispValue
from lispy.config import resolve_source
from lispy.evaluation.evaluator import evaluate, evaluate_toplevel
from lispy.printer import lisp_str, lisp_println
from lispy.reader.parser import parse_file
from lispy.reader.reader import read_program
from lispy.types.builtin_fn import Builtin
from lispy.types.environment import Environment
from lispy.types.errors import ErrorKind, LispySyntaxError
from lispy.types.expr import SExpr, QExpr
from lispy.types.lambda_fn import Lambda
from lispy.types.lisp_error import LispError, arity_error, type_error, empty_list_error
from lispy.types.symbol import Symbol
from lispy.types.values import is_equal, in_number_range, type_name

logger = logging.getLogger(__name__)


# -------------------------------
# Argument checks
# -------------------------------
def check_count(func: str, args: list[LispValue], expected: int) -> LispError | None:
    if len(args) != expected:
        return arity_error(func, len(args), expected)
    return None


def check_type(func: str, args: list[LispValue], index: int, expected: str) -> LispError | None:
    got = type_name(args[index])
    if got != expected:
        return type_error(func, index, got, expected)
    return None


def check_all(func: str, args: list[LispValue], expected: str) -> LispError | None:
    for i in range(len(args)):
        err = check_type(func, args, i, expected)
        if err is not None:
            return err
    return None


# -------------------------------
# Arithmetic
# -------------------------------
def _trunc_div(x: int, y: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(x) // abs(y)
    return -q if (x < 0) != (y < 0) else q


def arith(op: str, args: list[LispValue]) -> LispValue:
    """Left fold of `op` over one or more Numbers; unary `-` negates."""
    if not args:
        return LispError(
            f"Function '{op}' passed incorrect number of arguments. Got 0, expected at least 1.",
            ErrorKind.ARITY,
        )
    err = check_all(op, args, "Number")
    if err is not None:
        return err

    x = args[0]
    if op == "-" and len(args) == 1:
        x = -x
    for y in args[1:]:
        match op:
            case "+":
                x += y
            case "-":
                x -= y
            case "*":
                x *= y
            case "/":
                if y == 0:
                    return LispError("Division by zero.", ErrorKind.DIVISION_BY_ZERO)
                x = _trunc_div(x, y)
        if not in_number_range(x):
            return LispError("Integer overflow.", ErrorKind.NUMBER)
    if not in_number_range(x):
        return LispError("Integer overflow.", ErrorKind.NUMBER)
    return x


def add(env: Environment, args: list[LispValue]) -> LispValue:
    return arith("+", args)


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    return arith("-", args)


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    return arith("*", args)


def div(env: Environment, args: list[LispValue]) -> LispValue:
    return arith("/", args)


# -------------------------------
# Lists
# -------------------------------
def list_builtin(env: Environment, args: list[LispValue]) -> QExpr:
    """Return the arguments as a Q-Expression."""
    return QExpr(args)


def _single_qexpr(func: str, args: list[LispValue], allow_empty: bool = False) -> LispError | None:
    err = check_count(func, args, 1) or check_type(func, args, 0, "Q-Expression")
    if err is None and not allow_empty and not args[0]:
        err = empty_list_error(func, 0)
    return err


def head(env: Environment, args: list[LispValue]) -> LispValue:
    """Q-Expression holding only the first element of a non-empty Q-Expression."""
    err = _single_qexpr("head", args)
    if err is not None:
        return err
    return QExpr(args[0].cells[:1])


def tail(env: Environment, args: list[LispValue]) -> LispValue:
    """Q-Expression with the first element of a non-empty Q-Expression removed."""
    err = _single_qexpr("tail", args)
    if err is not None:
        return err
    return QExpr(args[0].cells[1:])


def eval_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Evaluate a Q-Expression as if it were an S-Expression."""
    err = _single_qexpr("eval", args, allow_empty=True)
    if err is not None:
        return err
    return evaluate(args[0].retag(SExpr), env)


def join(env: Environment, args: list[LispValue]) -> LispValue:
    """Concatenate one or more Q-Expressions in order."""
    if not args:
        return LispError(
            "Function 'join' passed incorrect number of arguments. Got 0, expected at least 1.",
            ErrorKind.ARITY,
        )
    err = check_all("join", args, "Q-Expression")
    if err is not None:
        return err
    joined = QExpr()
    for q in args:
        joined.cells.extend(q.cells)
    return joined


# -------------------------------
# Ordering and equality
# -------------------------------
ORDERINGS: dict[str, Callable[[int, int], bool]] = {
    ">": lambda a, b: a > b,
    "<": lambda a, b: a < b,
    ">=": lambda a, b: a >= b,
    "<=": lambda a, b: a <= b,
}


def ordering(op: str, args: list[LispValue]) -> LispValue:
    err = check_count(op, args, 2) or check_all(op, args, "Number")
    if err is not None:
        return err
    return int(ORDERINGS[op](args[0], args[1]))


def gt(env: Environment, args: list[LispValue]) -> LispValue:
    return ordering(">", args)


def lt(env: Environment, args: list[LispValue]) -> LispValue:
    return ordering("<", args)


def gte(env: Environment, args: list[LispValue]) -> LispValue:
    return ordering(">=", args)


def lte(env: Environment, args: list[LispValue]) -> LispValue:
    return ordering("<=", args)


def equals(env: Environment, args: list[LispValue]) -> LispValue:
    """1 if both arguments are structurally equal, else 0."""
    err = check_count("==", args, 2)
    if err is not None:
        return err
    return int(is_equal(args[0], args[1]))


def not_equals(env: Environment, args: list[LispValue]) -> LispValue:
    """Logical negation of equals."""
    err = check_count("!=", args, 2)
    if err is not None:
        return err
    return int(not is_equal(args[0], args[1]))


# -------------------------------
# Conditionals
# -------------------------------
def if_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(if cond {then} {else}): nonzero selects then; the other branch is never evaluated."""
    err = (
        check_count("if", args, 3)
        or check_type("if", args, 0, "Number")
        or check_type("if", args, 1, "Q-Expression")
        or check_type("if", args, 2, "Q-Expression")
    )
    if err is not None:
        return err
    branch = args[1] if args[0] else args[2]
    return evaluate(branch.retag(SExpr), env)


# -------------------------------
# Variables
# -------------------------------
def bind_variables(func: str, env: Environment, args: list[LispValue]) -> LispValue:
    if not args:
        return LispError(
            f"Function '{func}' passed incorrect number of arguments. Got 0, expected at least 1.",
            ErrorKind.ARITY,
        )
    err = check_type(func, args, 0, "Q-Expression")
    if err is not None:
        return err

    names = args[0].cells
    for name in names:
        if not isinstance(name, Symbol):
            return LispError(
                f"Function '{func}' cannot define non-symbol. Got {type_name(name)}, expected Symbol.",
                ErrorKind.TYPE,
            )
    values = args[1:]
    if len(names) != len(values):
        return LispError(
            f"Function '{func}' passed incorrect number of values for symbols. "
            f"Got {len(values)}, expected {len(names)}.",
            ErrorKind.ARITY,
        )

    for name, value in zip(names, values):
        if func == "def":
            env.define_global(name, value)
        else:
            env.define(name, value)
    return SExpr()


def def_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Bind symbols in the root (global) environment."""
    return bind_variables("def", env, args)


def put_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Bind symbols in the current (local) environment."""
    return bind_variables("=", env, args)


def lambda_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(\\ {formals} {body}) -> a closure over a fresh, empty environment."""
    err = (
        check_count("\\", args, 2)
        or check_type("\\", args, 0, "Q-Expression")
        or check_type("\\", args, 1, "Q-Expression")
    )
    if err is not None:
        return err
    formals, body = args
    for formal in formals:
        if not isinstance(formal, Symbol):
            return LispError(
                f"Cannot define non-symbol. Got {type_name(formal)}, expected Symbol.",
                ErrorKind.MALFORMED_LAMBDA,
            )
    return Lambda(formals.cells, body)


# -------------------------------
# Output, errors and loading
# -------------------------------
def print_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Print the arguments space-separated followed by a newline."""
    print(" ".join(lisp_str(a) for a in args))
    return SExpr()


def error_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Wrap a String as an error value."""
    err = check_count("error", args, 1) or check_type("error", args, 0, "String")
    if err is not None:
        return err
    return LispError(args[0], ErrorKind.USER)


def load_file(env: Environment, name: str) -> LispValue:
    """Parse a source file and evaluate its top-level forms in order.

    A parse (or I/O) failure aborts the whole file with one error. A runtime
    error from an individual form is printed and loading continues.
    """
    path = resolve_source(name)
    try:
        forms = read_program(parse_file(path), str(path))
    except LispySyntaxError as e:
        logger.warning("Could not load %s: %s", path, e)
        return LispError(f"Could not load library {e}", ErrorKind.PARSE)

    logger.debug("Loading %s", path)
    for form in forms.cells:
        result = evaluate_toplevel(form, env)
        if isinstance(result, LispError):
            lisp_println(result)
    return SExpr()


def load(env: Environment, args: list[LispValue]) -> LispValue:
    err = check_count("load", args, 1) or check_type("load", args, 0, "String")
    if err is not None:
        return err
    return load_file(env, args[0])


BUILTINS: dict[str, Callable[[Environment, list[LispValue]], LispValue]] = {
    # Variables
    "\\": lambda_builtin,
    "def": def_builtin,
    "=": put_builtin,
    # Lists
    "list": list_builtin,
    "head": head,
    "tail": tail,
    "eval": eval_builtin,
    "join": join,
    # Arithmetic
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    # Comparison
    "if": if_builtin,
    "==": equals,
    "!=": not_equals,
    ">": gt,
    "<": lt,
    ">=": gte,
    "<=": lte,
    # Strings and I/O
    "load": load,
    "error": error_builtin,
    "print": print_builtin,
}


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    env.update({Symbol(name): Builtin(name, fn) for name, fn in BUILTINS.items()})
