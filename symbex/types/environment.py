"""Runtime environment for Symbex.

An Environment owns two operator tables: an immutable builtin table fixed at
construction, and a mutable user table written by `define` and `lambda`.
Lookups consult the user table first, so user definitions shadow builtins.
Each Interpreter owns its own Environment; the user table is guarded by a
re-entrant lock so definitions made from different threads do not race.
"""

from __future__ import annotations

import itertools
import logging
import secrets
import sys
import threading
from io import StringIO
from types import MappingProxyType
from typing import Mapping, Optional, TextIO

from symbex.errors import SymbexNameError, SymbexTypeError
from symbex.types.operator import Operator

logger = logging.getLogger("symbex.environment")


class Environment:
    """Name -> Operator tables with user-over-builtin shadowing."""

    __slots__ = (
        "builtins",
        "special_names",
        "user",
        "output",
        "_lock",
        "_gensym_counter",
    )

    def __init__(
        self,
        builtins: Optional[Mapping[str, Operator]] = None,
        output: Optional[TextIO] = None,
    ):
        table = dict(builtins or {})
        for name, op in table.items():
            if not isinstance(op, Operator):
                raise SymbexTypeError(f"Builtin {name!r} is not an Operator: {op!r}")
        self.builtins: Mapping[str, Operator] = MappingProxyType(table)
        # Names whose arguments are passed through unevaluated.
        self.special_names: frozenset[str] = frozenset(
            name for name, op in table.items() if op.special
        )
        self.user: dict[str, Operator] = {}
        self.output: TextIO | None = output
        self._lock = threading.RLock()
        self._gensym_counter = itertools.count(1)

    def lookup(self, name: str) -> Optional[Operator]:
        """Return the operator bound to `name`, user table first, or None."""
        with self._lock:
            op = self.user.get(name)
        if op is None:
            op = self.builtins.get(name)
        return op

    def is_bound(self, name: str) -> bool:
        return self.lookup(name) is not None

    def suspends(self, name: str) -> bool:
        """True if `name` is a special form, whatever the user table holds."""
        return name in self.special_names

    def define(self, name: str, op: Operator) -> None:
        """Bind `name` to `op` in the user table, replacing any earlier binding.

        Raises SymbexNameError for an empty name and SymbexTypeError if `op`
        is not an Operator.
        """
        if not isinstance(name, str) or not name:
            raise SymbexNameError(f"Cannot define {name!r} as an operator name")
        if not isinstance(op, Operator):
            raise SymbexTypeError(f"Cannot bind {name} to non-operator {op!r}")
        with self._lock:
            replaced = name in self.user
            self.user[name] = op
        logger.debug("defined %s%s", name, " (replaced)" if replaced else "")

    def remove(self, name: str) -> Operator:
        """Remove and return the user binding for `name`.

        Raises SymbexNameError if `name` has no user binding.
        """
        with self._lock:
            op = self.user.pop(name, None)
        if op is None:
            raise SymbexNameError(f"Cannot remove unbound operator {name}")
        logger.debug("removed %s", name)
        return op

    def discard(self, name: str, op: Optional[Operator] = None) -> bool:
        """Remove `name` if bound (and, when given, bound to exactly `op`)."""
        with self._lock:
            current = self.user.get(name)
            if current is None or (op is not None and current is not op):
                return False
            del self.user[name]
        logger.debug("discarded %s", name)
        return True

    def user_names(self) -> list[str]:
        with self._lock:
            return list(self.user)

    def gen_name(self, prefix: str = "TMP$") -> str:
        """A fresh synthetic operator name.

        The counter keeps names unique within this environment; the random
        suffix keeps them from colliding with atoms a program might spell out.
        """
        return f"{prefix}{next(self._gensym_counter)}${secrets.token_hex(4)}"

    def write_line(self, text: str) -> None:
        stream = self.output if self.output is not None else sys.stdout
        stream.write(text + "\n")

    def __str__(self) -> str:
        """Human-readable view of the user table."""
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {v!r}" for k, v in list(self.user.items())))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return (
            f"<Environment builtins={len(self.builtins)} "
            f"user={self.user_names()!r}>"
        )
