"""Core evaluator for the Lispy interpreter.

A plain recursive reduction: symbols are looked up, S-Expressions are
reduced left to right with the first error short-circuiting the rest, and
every other value evaluates to itself.
"""

from __future__ import annotations

from lispy import LispValue
from lispy.types.environment import Environment
from lispy.types.expr import SExpr
from lispy.types.errors import ErrorKind
from lispy.types.lisp_error import LispError
from lispy.types.symbol import Symbol
from lispy.evaluation.apply import apply


def evaluate(expr: LispValue, env: Environment) -> LispValue:
    """Evaluate a Lispy expression in the given environment."""
    match expr:
        case Symbol():
            return env.lookup(expr)
        case SExpr():
            return evaluate_sexpr(expr, env)

    # --- Numbers, strings, errors, functions and Q-Expressions ---
    return expr


def evaluate_sexpr(expr: SExpr, env: Environment) -> LispValue:
    cells: list[LispValue] = []
    for cell in expr.cells:
        value = evaluate(cell, env)
        if isinstance(value, LispError):
            return value
        cells.append(value)

    if not cells:
        return SExpr()
    if len(cells) == 1:
        return evaluate(cells[0], env)

    head, *args = cells
    return apply(head, args, env, evaluate)


def evaluate_toplevel(expr: LispValue, env: Environment) -> LispValue:
    """Evaluate a top-level form, reporting host stack exhaustion as an error value."""
    try:
        return evaluate(expr, env)
    except RecursionError:
        return LispError("Maximum recursion depth exceeded.", ErrorKind.RECURSION)
