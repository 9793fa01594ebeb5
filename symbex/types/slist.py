"""The list half of the value model.

An SList is an immutable, ordered, possibly empty sequence of values. It
represents both executable expressions and plain data, so every operation
here returns a new SList instead of changing the receiver.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Iterator, TYPE_CHECKING, overload

if TYPE_CHECKING:
    from symbex.types.nil import Value


class SList:
    __slots__ = ("items",)

    def __init__(self, items: Iterable[Value] = ()):
        self.items: tuple[Value, ...] = tuple(items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    @overload
    def __getitem__(self, index: int) -> Value: ...

    @overload
    def __getitem__(self, index: slice) -> SList: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return SList(self.items[index])
        return self.items[index]

    def __eq__(self, other: object) -> bool:
        # Element-wise, recursing through nested lists; an Atom is never equal.
        return isinstance(other, SList) and self.items == other.items

    def __hash__(self) -> int:
        return hash(("SList", self.items))

    def __add__(self, other: SList) -> SList:
        if not isinstance(other, SList):
            return NotImplemented
        return SList(self.items + other.items)

    def cons(self, value: Value) -> SList:
        """Return a new list with `value` in front."""
        return SList((value,) + self.items)

    def __repr__(self) -> str:
        return f"SList([{', '.join(repr(x) for x in self.items)}])"

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(")
            buffer.write(" ".join(str(x) for x in self.items))
            buffer.write(")")
            return buffer.getvalue()
