"""Application engine for Lispy.

This module centralizes the calling convention:
- Builtins receive the calling environment and an argument list they own.
- Lambdas bind arguments into a fresh frame built from their captured
  bindings. Too few arguments yields a new, partially applied Lambda
  (currying); the closure being applied is never modified.
- A saturated Lambda evaluates its body in that frame, linked to the
  calling environment only while the body runs.
"""

from __future__ import annotations

import logging

from lispy import LispValue
from lispy.types.builtin_fn import Builtin
from lispy.types.environment import Environment
from lispy.types.errors import ErrorKind
from lispy.types.expr import SExpr
from lispy.types.lambda_fn import Lambda
from lispy.types.lisp_error import LispError
from lispy.types.bind import bind_arguments
from lispy.types.values import copy_value, type_name

logger = logging.getLogger(__name__)


def apply_lambda(
    fn: Lambda,
    args: list[LispValue],
    caller_env: Environment,
    evaluate_fn,
) -> LispValue:
    """Apply a Lisp Lambda value.

    Parameters:
    - fn: The Lambda being applied.
    - args: The already-evaluated argument values.
    - caller_env: The environment the call originates from; free names in
      the body resolve through it.
    - evaluate_fn: Evaluator used for the body.
    """
    frame = fn.env.copy()
    remaining = bind_arguments(fn.formals, args, frame)
    if isinstance(remaining, LispError):
        return remaining

    if remaining:
        logger.debug("Partial application: %d formal(s) still unbound", len(remaining))
        return Lambda(remaining, copy_value(fn.body), frame)

    body = SExpr(copy_value(fn.body).cells)
    frame.outer = caller_env
    try:
        return evaluate_fn(body, frame)
    finally:
        # The caller's frame must not outlive this call through the closure
        frame.outer = None


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn,
) -> LispValue:
    """Apply either a Lambda or a Builtin.

    - For Lambda, defer to apply_lambda (handling partials and rest binding).
    - For Builtin, invoke with the runtime env and list of args.
    - Otherwise, report a type error value.
    """
    if isinstance(head, Lambda):
        return apply_lambda(head, args, env, evaluate_fn)
    if isinstance(head, Builtin):
        return head(env, args)
    return LispError(
        f"S-Expression starts with incorrect type. Got {type_name(head)}, expected Function.",
        ErrorKind.TYPE,
    )
