"""Runtime environment for Lispy.

The Environment maps Symbols to Lisp values for one scope frame and chains
to an enclosing frame through `outer`. Every store deep-copies the value
and every lookup hands back a copy, so no two live bindings ever share a
mutable value.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Optional

from lispy import LispValue
from lispy.types.errors import ErrorKind, LispyInvalidSymbol
from lispy.types.lisp_error import LispError
from lispy.types.symbol import Symbol
from lispy.types.values import copy_value

logger = logging.getLogger(__name__)


class Environment:
    """Insertion-ordered mapping from Symbols to Lisp values with a parent link."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        # Non-owning link to the enclosing frame
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to a copy of `value` in this frame only (backs `=`).

        Raises LispyInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LispyInvalidSymbol(f"Cannot define {name!r} as a symbol")
        self.vars[name] = copy_value(value)

    def define_global(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to a copy of `value` in the root frame (backs `def`)."""
        self.root().define(name, value)

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Return a copy of the value bound to `name`, searching outward.

        An unbound name is reported as an error value, not raised.
        """
        env = self.find(name)
        if env is None:
            logger.debug("Unbound symbol %s", name)
            return LispError(f"Unbound Symbol '{name}'", ErrorKind.UNBOUND_SYMBOL)
        return copy_value(env.vars[name])

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def copy(self) -> Environment:
        """Duplicate this frame's bindings; the copy shares the same `outer`."""
        env = Environment(self.outer)
        env.vars = {k: copy_value(v) for k, v in self.vars.items()}
        return env

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None


    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
