"""Operations defined over every kind of Lisp value.

Numbers and strings are plain Python `int`/`str` and symbols are interned,
so all three are immutable and can be shared freely; copying only has to
descend into containers and closures.
"""

from __future__ import annotations

from lispy import LispValue
from lispy.types.symbol import Symbol
from lispy.types.lisp_error import LispError
from lispy.types.builtin_fn import Builtin
from lispy.types.expr import SExpr, QExpr

# Signed 64-bit range of a Number
NUMBER_MIN = -(2 ** 63)
NUMBER_MAX = 2 ** 63 - 1


def in_number_range(n: int) -> bool:
    return NUMBER_MIN <= n <= NUMBER_MAX


def type_name(value: LispValue) -> str:
    """User-facing name of a value's kind, as used in error messages."""
    from lispy.types.lambda_fn import Lambda

    match value:
        case bool():
            return "Unknown"
        case int():
            return "Number"
        case str():
            return "String"
        case Symbol():
            return "Symbol"
        case LispError():
            return "Error"
        case Builtin() | Lambda():
            return "Function"
        case SExpr():
            return "S-Expression"
        case QExpr():
            return "Q-Expression"
    return "Unknown"


def copy_value(value: LispValue) -> LispValue:
    """Deep copy: the result shares no mutable state with `value`."""
    from lispy.types.lambda_fn import Lambda

    match value:
        case SExpr() | QExpr():
            return type(value)(copy_value(v) for v in value.cells)
        case Lambda():
            return value.copy()
        case LispError():
            return LispError(value.message, value.kind)
    # int, str, Symbol and Builtin are immutable
    return value


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality: same kind and, for containers, element-wise equal in order."""
    from lispy.types.lambda_fn import Lambda

    if type_name(a) != type_name(b):
        return False
    match a:
        case SExpr() | QExpr():
            if type(a) is not type(b) or len(a) != len(b):
                return False
            return all(is_equal(x, y) for x, y in zip(a.cells, b.cells))
        case Lambda():
            # Closures compare by identity only
            return a is b
    return a == b
