"""User-defined operators created by `define` and `lambda`."""

from __future__ import annotations

import logging
from io import StringIO

from symbex.evaluation.evaluator import evaluate
from symbex.types.nil import Value
from symbex.types.operator import Operator
from symbex.types.slist import SList

logger = logging.getLogger("symbex.user_fn")


class UserFunction(Operator):
    """A parameter list and an unevaluated body, registered under `name`.

    Invocation evaluates the body with the parameter list bound, by position,
    to the invocation's arguments. A `one_shot` function removes its own
    registration the first time it is invoked.
    """

    __slots__ = ("params", "body", "one_shot")

    def __init__(self, name: str, params: SList, body: Value, one_shot: bool = False):
        super().__init__(name)
        self.params: SList = params
        self.body: Value = body
        self.one_shot: bool = one_shot

    def __call__(self, node, env, names=None, values=None):
        if self.one_shot and env.discard(self.name, self):
            logger.debug("consumed one-shot lambda %s", self.name)
        # The caller's bindings are not visible inside the body.
        return evaluate(self.body, env, self.params, node[1:])

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda " if self.one_shot else f"(define {self.name} ")
            buffer.write(str(self.params))
            buffer.write(" ")
            buffer.write(str(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<UserFunction {self.name} {self}>"
