from __future__ import annotations

from lispy.types.errors import ErrorKind


class LispError:
    """An error as an ordinary first-class value.

    Errors are returned, stored, compared and printed like any other datum.
    Two errors are equal when their messages are equal; the kind is
    metadata for the host and does not take part in equality.
    """

    __slots__ = ("message", "kind")

    def __init__(self, message: str, kind: ErrorKind = ErrorKind.USER):
        self.message = message
        self.kind = kind

    def __eq__(self, other) -> bool:
        return isinstance(other, LispError) and self.message == other.message

    def __hash__(self) -> int:
        return hash(self.message)

    def __repr__(self) -> str:
        return f"LispError({self.message!r}, {self.kind.name})"

    def __str__(self) -> str:
        return f"Error: {self.message}"


# --- constructors for the common failure shapes ---

def arity_error(func: str, got: int, expected: int) -> LispError:
    return LispError(
        f"Function '{func}' passed incorrect number of arguments. Got {got}, expected {expected}.",
        ErrorKind.ARITY,
    )


def type_error(func: str, index: int, got: str, expected: str) -> LispError:
    return LispError(
        f"Function '{func}' passed incorrect type for argument {index}. Got {got}, expected {expected}.",
        ErrorKind.TYPE,
    )


def empty_list_error(func: str, index: int) -> LispError:
    return LispError(f"Function '{func}' passed {{}} for argument {index}.", ErrorKind.EMPTY_LIST)
