from __future__ import annotations

from typing import List

from lispy import LispValue
from lispy.types.environment import Environment
from lispy.types.errors import ErrorKind
from lispy.types.expr import QExpr
from lispy.types.lisp_error import LispError
from lispy.types.symbol import Symbol, REST_MARKER


def _malformed_rest() -> LispError:
    return LispError(
        "Function format invalid. Symbol '&' not followed by single symbol.",
        ErrorKind.MALFORMED_LAMBDA,
    )


def bind_arguments(
    formals: List[Symbol],
    supplied_args: List[LispValue],
    frame: Environment,
) -> List[Symbol] | LispError:
    """
    Single source of truth for lambda-list binding in Lispy.

    Binds `supplied_args` positionally into `frame`, left to right. The
    rest marker `&` binds the single formal after it to a Q-Expression of
    every remaining argument; a trailing `& name` that was never reached is
    bound to the empty Q-Expression once all positional formals are
    satisfied.

    Returns the formals still awaiting arguments (empty when the call is
    saturated), or an error value. Neither input list is mutated.
    """
    formals = list(formals)
    supplied = list(supplied_args)
    given, total = len(supplied), len(formals)

    while supplied:
        if not formals:
            return LispError(
                f"Function passed too many arguments. Got {given}, expected {total}.",
                ErrorKind.ARITY,
            )
        sym = formals.pop(0)
        if sym == REST_MARKER:
            if len(formals) != 1:
                return _malformed_rest()
            frame.define(formals.pop(0), QExpr(supplied))
            supplied = []
            break
        frame.define(sym, supplied.pop(0))

    if formals and formals[0] == REST_MARKER:
        if len(formals) != 2:
            return _malformed_rest()
        frame.define(formals[1], QExpr())
        formals = []

    return formals
