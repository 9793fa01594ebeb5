"""Built-in operators for the Symbex runtime environment.

This module defines the list primitives, predicates, output and re-evaluation
operators, and the factories that assemble them (together with the special
forms) into Environments.

Ordinary builtins receive an invocation list whose arguments the evaluator
has already evaluated. `cons` (its first argument), `equal`, `atom`, `println`
and `eval` evaluate those values once more under the active bindings; `car`,
`cdr` and `list` take their arguments as given. A call with the wrong number
or kind of arguments never raises: it returns nil.
"""
from __future__ import annotations

import threading
from typing import Optional, TextIO

from symbex.evaluation.evaluator import evaluate
from symbex.evaluation.special_forms import SPECIAL_FORMS
from symbex.types.atom import Atom
from symbex.types.environment import Environment
from symbex.types.nil import NIL, Value, boolean
from symbex.types.operator import Builtin
from symbex.types.slist import SList


# -------------------------------
# List primitives
# -------------------------------
def car(node: SList, env, names, values) -> Value:
    """(car L): first element of a non-empty list, else nil."""
    if len(node) != 2:
        return NIL
    arg = node[1]
    if not isinstance(arg, SList) or not arg:
        return NIL
    return arg[0]


def cdr(node: SList, env, names, values) -> Value:
    """(cdr L): L without its first element; nil unless L has two or more elements."""
    if len(node) != 2:
        return NIL
    arg = node[1]
    if not isinstance(arg, SList) or len(arg) < 2:
        return NIL
    return arg[1:]


def cons(node: SList, env, names, values) -> Value:
    """(cons A L): L with the atom A prepended; nil if A is a list or L is not."""
    if len(node) != 3:
        return NIL
    _, head, tail = node
    if not isinstance(tail, SList):
        return NIL
    head = evaluate(head, env, names, values)
    if not isinstance(head, Atom):
        return NIL
    return tail.cons(head)


def list_(node: SList, env, names, values) -> Value:
    """(list X...): atoms kept, list arguments spliced in one level deep."""
    if len(node) < 2:
        return NIL
    res: list[Value] = []
    for el in node[1:]:
        if isinstance(el, SList):
            res.extend(el)
        else:
            res.append(el)
    return SList(res)


# -------------------------------
# Predicates
# -------------------------------
def equal(node: SList, env, names, values) -> Value:
    """(equal X Y): true if X and Y are structurally equal, else nil."""
    if len(node) != 3:
        return NIL
    left = evaluate(node[1], env, names, values)
    right = evaluate(node[2], env, names, values)
    return boolean(left == right)


def atom(node: SList, env, names, values) -> Value:
    if len(node) != 2:
        return NIL
    return boolean(isinstance(evaluate(node[1], env, names, values), Atom))


# -------------------------------
# Output and evaluation
# -------------------------------
def println(node: SList, env: Environment, names, values) -> Value:
    """(println X): write X's display form on its own line; returns nil."""
    if len(node) < 2:
        return NIL
    env.write_line(str(evaluate(node[1], env, names, values)))
    return NIL


def eval_(node: SList, env: Environment, names, values) -> Value:
    # The argument was evaluated once on the way in; evaluate the result.
    if len(node) != 2:
        return NIL
    return evaluate(node[1], env, names, values)


BUILTINS = {
    "car": car,
    "cdr": cdr,
    "cons": cons,
    "equal": equal,
    "atom": atom,
    "list": list_,
    "println": println,
    "eval": eval_,
}


def builtin_table() -> dict[str, Builtin]:
    """All twelve primitives: the special forms plus the ordinary builtins."""
    table = {name: Builtin(name, fn, special=True) for name, fn in SPECIAL_FORMS.items()}
    table.update({name: Builtin(name, fn) for name, fn in BUILTINS.items()})
    return table


def standard_environment(output: Optional[TextIO] = None) -> Environment:
    """A fresh Environment holding the builtins and an empty user table."""
    return Environment(builtin_table(), output=output)


_default_env: Environment | None = None
_default_lock = threading.Lock()


def default_environment() -> Environment:
    """The process-wide environment used when evaluate() is given none."""
    global _default_env
    with _default_lock:
        if _default_env is None:
            _default_env = standard_environment()
        return _default_env


def reset_default_environment() -> Environment:
    """Replace the process-wide environment with a fresh one and return it."""
    global _default_env
    with _default_lock:
        _default_env = standard_environment()
        return _default_env
