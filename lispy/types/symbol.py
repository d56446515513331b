from __future__ import annotations

import weakref


class Symbol:
    """A bare name. Instances are canonical: Symbol("x") is Symbol("x")."""

    __slots__ = ("id", "__weakref__")

    # Entries disappear once nothing else refers to the symbol
    _table: weakref.WeakValueDictionary[str, Symbol] = weakref.WeakValueDictionary()

    def __new__(cls, name: str) -> Symbol:
        sym = cls._table.get(name)
        if sym is None:
            sym = super().__new__(cls)
            sym.id = name
            cls._table[name] = sym
        return sym

    def __eq__(self, other) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __copy__(self) -> Symbol:
        return self

    def __deepcopy__(self, memo) -> Symbol:
        return self

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id


# Formal-parameter placeholder binding the remaining arguments as a Q-Expression
REST_MARKER = Symbol("&")
