"""Callable operators stored in an Environment.

Every operator, builtin or user-defined, is invoked the same way:

    op(node, env, names, values) -> Value

where `node` is the whole invocation list `(name arg1 arg2 ...)` and
`names`/`values` are the positional bindings active at the call site.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Optional, TYPE_CHECKING

from symbex.types.slist import SList

if TYPE_CHECKING:
    from symbex.types.environment import Environment
    from symbex.types.nil import Value


class Operator(ABC):
    """Named entry in an Environment."""

    __slots__ = ("name",)

    special: bool = False

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def __call__(
        self,
        node: SList,
        env: Environment,
        names: Optional[SList] = None,
        values: Optional[SList] = None,
    ) -> Value: ...


BuiltinFn = Callable[["SList", "Environment", Optional[SList], Optional[SList]], "Value"]


class Builtin(Operator):
    """A primitive implemented in Python.

    `special` builtins receive their arguments unevaluated.
    """

    __slots__ = ("fn", "special")

    def __init__(self, name: str, fn: BuiltinFn, special: bool = False):
        super().__init__(name)
        self.fn = fn
        self.special = special

    def __call__(self, node, env, names=None, values=None):
        return self.fn(node, env, names, values)

    def __repr__(self) -> str:
        kind = "special form" if self.special else "builtin"
        return f"<{kind} {self.name}>"
