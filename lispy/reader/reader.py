"""Reader: converts a concrete syntax tree into Lisp values.

Accepts any node exposing `tag`, `contents` and `children` (AstNode from
lispy.reader.parser, or an equivalent mapping with those keys).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from lispy import LispValue
from lispy.reader.escapes import unescape
from lispy.types.errors import ErrorKind, LispySyntaxError
from lispy.types.expr import ExprList, SExpr, QExpr
from lispy.types.lisp_error import LispError
from lispy.types.symbol import Symbol
from lispy.types.values import in_number_range

ROOT_TAG = ">"
PUNCTUATION = frozenset("(){}")


def _fields(node: Any) -> tuple[str, str, list]:
    if isinstance(node, Mapping):
        return node.get("tag", ""), node.get("contents", ""), list(node.get("children", ()))
    return node.tag, node.contents, list(node.children)


def read_number(contents: str) -> LispValue:
    try:
        n = int(contents, 10)
    except ValueError:
        return LispError("Invalid Number.", ErrorKind.NUMBER)
    if not in_number_range(n):
        return LispError("Invalid Number.", ErrorKind.NUMBER)
    return n


def read_string(contents: str) -> str:
    # strip the delimiting quotes
    return unescape(contents[1:-1])


def _skip(child: Any) -> bool:
    tag, contents, _ = _fields(child)
    return contents in PUNCTUATION or tag == "regex" or "comment" in tag


def read(node: Any) -> LispValue:
    """Convert one syntax-tree node (and its children) into a value."""
    tag, contents, children = _fields(node)

    if "number" in tag:
        return read_number(contents)
    if "string" in tag:
        return read_string(contents)
    if "symbol" in tag:
        return Symbol(contents)

    container: ExprList
    if tag == ROOT_TAG or "sexpr" in tag:
        container = SExpr()
    elif "qexpr" in tag:
        container = QExpr()
    else:
        raise LispySyntaxError(f"Cannot read node tagged {tag!r}")

    for child in children:
        if _skip(child):
            continue
        container.append(read(child))
    return container


def read_program(tree: Any, filename: str = "<stdin>") -> LispValue:
    """Read a whole parsed unit; nesting too deep to read is a syntax error."""
    try:
        return read(tree)
    except RecursionError:
        raise LispySyntaxError("Expression nested too deeply", filename) from None
