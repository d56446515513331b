"""S-Expressions and Q-Expressions.

Both are ordered containers of Lisp values that own their cells. They are
structurally identical and differ only in how the evaluator treats them:
an SExpr is reduced, a QExpr is literal data. Conversion between the two is
always explicit (see `retag`).
"""

from __future__ import annotations

from typing import Iterable, Iterator

from lispy import LispValue


class ExprList:
    __slots__ = ("cells",)

    def __init__(self, cells: Iterable[LispValue] = ()):
        self.cells: list[LispValue] = list(cells)

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[LispValue]:
        return iter(self.cells)

    def __getitem__(self, index):
        return self.cells[index]

    def __bool__(self) -> bool:
        return bool(self.cells)

    def append(self, value: LispValue) -> ExprList:
        self.cells.append(value)
        return self

    def retag(self, kind: type[ExprList]) -> ExprList:
        """Move the cells into a container of another kind, emptying this one."""
        cells, self.cells = self.cells, []
        return kind(cells)

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return False
        from lispy.types.values import is_equal
        return is_equal(self, other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.cells!r})"


class SExpr(ExprList):
    __slots__ = ()


class QExpr(ExprList):
    __slots__ = ()
