from __future__ import annotations

from lispy import BuiltinFn


class Builtin:
    """A native primitive operation exposed to Lisp code.

    The wrapped callable receives the calling Environment and an argument
    list it owns outright, and must report bad input as a LispError value.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: BuiltinFn):
        self.name = name
        self.fn = fn

    def __call__(self, env, args):
        return self.fn(env, args)

    def __eq__(self, other) -> bool:
        return isinstance(other, Builtin) and self.fn is other.fn

    def __hash__(self) -> int:
        return hash(self.fn)

    def __repr__(self) -> str:
        return f"Builtin({self.name!r})"

    def __str__(self) -> str:
        return "<builtin>"
