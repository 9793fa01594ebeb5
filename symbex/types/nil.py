from __future__ import annotations

from typing import Union

from symbex.types.atom import Atom
from symbex.types.slist import SList

Value = Union[Atom, SList]

# The empty list doubles as false/nil; there is no boolean type.
NIL = SList()
TRUE = Atom("true")


def is_value(obj: object) -> bool:
    return isinstance(obj, (Atom, SList))


def truthy(value: Value) -> bool:
    return value != NIL


def boolean(flag: bool) -> Value:
    return TRUE if flag else NIL
