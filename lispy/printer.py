"""Textual rendering of Lisp values.

The output of `lisp_str` for numbers, strings, symbols and expressions
reads back as a structurally equal value.
"""

from __future__ import annotations

import sys
from io import StringIO
from typing import TextIO

from lispy import LispValue
from lispy.reader.escapes import escape
from lispy.types.builtin_fn import Builtin
from lispy.types.expr import ExprList, SExpr, QExpr
from lispy.types.lambda_fn import Lambda
from lispy.types.lisp_error import LispError
from lispy.types.symbol import Symbol


def _write_expr(buffer: StringIO, expr: ExprList, open_: str, close: str) -> None:
    buffer.write(open_)
    for i, cell in enumerate(expr.cells):
        if i:
            buffer.write(" ")
        _write(buffer, cell)
    buffer.write(close)


def _write(buffer: StringIO, value: LispValue) -> None:
    match value:
        case bool():
            raise TypeError(f"Not a Lisp value: {value!r}")
        case int():
            buffer.write(str(value))
        case str():
            buffer.write('"')
            buffer.write(escape(value))
            buffer.write('"')
        case Symbol():
            buffer.write(value.id)
        case LispError():
            buffer.write("Error: ")
            buffer.write(value.message)
        case Builtin():
            buffer.write("<builtin>")
        case Lambda():
            buffer.write("\\ ")
            _write_expr(buffer, QExpr(value.formals), "{", "}")
            buffer.write(" ")
            _write_expr(buffer, value.body, "{", "}")
        case SExpr():
            _write_expr(buffer, value, "(", ")")
        case QExpr():
            _write_expr(buffer, value, "{", "}")
        case _:
            raise TypeError(f"Not a Lisp value: {value!r}")


def lisp_str(value: LispValue) -> str:
    """Render `value` the way the REPL shows it."""
    with StringIO() as buffer:
        _write(buffer, value)
        return buffer.getvalue()


def lisp_println(value: LispValue, file: TextIO | None = None) -> None:
    print(lisp_str(value), file=file if file is not None else sys.stdout)
