"""Core evaluator for the Symbex interpreter.

Atoms are substituted against the caller-supplied positional bindings (or
evaluate to themselves). Lists are evaluated element by element, unless the
head names a special form, and then dispatched on their head atom. A list
whose head is not a bound operator is returned as data.
"""

from __future__ import annotations

from typing import Optional, TYPE_CHECKING

from symbex.errors import SymbexTypeError
from symbex.types.atom import Atom
from symbex.types.bind import bind_positional
from symbex.types.nil import Value
from symbex.types.slist import SList

if TYPE_CHECKING:
    from symbex.types.environment import Environment


def evaluate(
    expr: Value,
    env: Optional[Environment] = None,
    names: Optional[SList] = None,
    values: Optional[SList] = None,
) -> Value:
    """
    Evaluate `expr` in `env` with the positional bindings `names`/`values`.

    With no environment, the process-wide default environment is used.
    Recursion depth follows the Python stack; runaway recursion raises
    RecursionError.
    """
    if env is None:
        # Lazy import to avoid circular imports
        from symbex.builtin.env_builtin import default_environment
        env = default_environment()

    match expr:
        case Atom():
            return bind_positional(expr, names, values)

        case SList():
            node = expr
            suspended = (
                len(node) > 1
                and isinstance(node[0], Atom)
                and env.suspends(node[0].text)
            )
            if not suspended:
                # Strict left to right, head included.
                node = SList([evaluate(item, env, names, values) for item in node])

            if node and isinstance(node[0], Atom):
                op = env.lookup(node[0].text)
                if op is not None:
                    return op(node, env, names, values)

            # Unknown operator: the list is data.
            return node

    raise SymbexTypeError(f"Cannot evaluate {expr!r}: not an Atom or SList")
