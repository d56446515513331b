"""Lambda function representation for Lispy."""

from __future__ import annotations

from lispy.types.environment import Environment
from lispy.types.expr import QExpr
from lispy.types.symbol import Symbol
from lispy.types.values import copy_value


class Lambda:
    """A first-class closure: formal parameters, a body and a captured frame.

    The captured frame holds only the arguments bound so far by partial
    application; it has no parent. Free names in the body resolve through
    the environment the closure is called from.
    """

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: QExpr, env: Environment | None = None):
        self.formals: list[Symbol] = list(formals)
        self.body: QExpr = body
        # Avoid shared default Environment across instances
        self.env: Environment = env if env is not None else Environment()

    def copy(self) -> Lambda:
        return Lambda(list(self.formals), copy_value(self.body), self.env.copy())

    def __repr__(self) -> str:
        return f"Lambda({self.formals!r}, {self.body!r})"

    def __str__(self) -> str:
        from lispy.printer import lisp_str
        return lisp_str(self)
