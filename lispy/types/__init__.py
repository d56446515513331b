"""Lispy runtime value types.

Numbers and strings are plain `int` and `str`; the classes re-exported here
cover the remaining kinds.
"""

from lispy.types.symbol import Symbol, REST_MARKER
from lispy.types.errors import ErrorKind, LispyError, LispyInvalidSymbol, LispySyntaxError
from lispy.types.lisp_error import LispError
from lispy.types.expr import ExprList, SExpr, QExpr
from lispy.types.builtin_fn import Builtin
from lispy.types.values import copy_value, is_equal, type_name
from lispy.types.environment import Environment
from lispy.types.lambda_fn import Lambda

__all__ = [
    "Symbol",
    "REST_MARKER",
    "ErrorKind",
    "LispyError",
    "LispyInvalidSymbol",
    "LispySyntaxError",
    "LispError",
    "ExprList",
    "SExpr",
    "QExpr",
    "Builtin",
    "copy_value",
    "is_equal",
    "type_name",
    "Environment",
    "Lambda",
]
