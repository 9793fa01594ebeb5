from __future__ import annotations

from typing import Optional

from symbex.types.atom import Atom
from symbex.types.nil import NIL, Value
from symbex.types.slist import SList


def bind_positional(
    atom: Atom,
    names: Optional[SList],
    values: Optional[SList],
) -> Value:
    """
    Substitute `atom` by position against the active parameter list.

    Only the bindings passed in by the caller are consulted; there is no
    enclosing scope to fall back to. The first matching name wins. A name with
    no supplied value (too few arguments) reads as nil. An atom that is not a
    parameter evaluates to itself.
    """
    if names is None or values is None:
        return atom
    for index, name in enumerate(names):
        if name == atom:
            return values[index] if index < len(values) else NIL
    return atom
