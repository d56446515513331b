"""Error kinds and host-level exceptions.

Language-level failures are never raised: they are LispError values (see
lispy.types.lisp_error) tagged with an ErrorKind. The exceptions below are
reserved for failures outside the evaluator's value model.
"""

from enum import Enum


class ErrorKind(Enum):
    UNBOUND_SYMBOL = "unbound-symbol"
    ARITY = "arity"
    TYPE = "type"
    EMPTY_LIST = "empty-list"
    DIVISION_BY_ZERO = "division-by-zero"
    MALFORMED_LAMBDA = "malformed-lambda"
    PARSE = "parse"
    USER = "user"
    NUMBER = "number"
    RECURSION = "recursion"


class LispyError(Exception):
    """ Base class for all Lispy host errors"""
    pass


class LispyInvalidSymbol(LispyError):
    """ Raised when a non-Symbol is used as a binding name"""
    pass


class LispySyntaxError(LispyError):
    """ Raised by the parser when source text cannot be turned into a tree"""

    def __init__(self, message: str, filename: str = "<stdin>", line: int = 0, col: int = 0):
        super().__init__(f"{filename}:{line}:{col}: {message}")
        self.filename = filename
        self.line = line
        self.col = col
