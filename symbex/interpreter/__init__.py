from __future__ import annotations

import logging
from typing import Literal, Optional, TextIO

from symbex.builtin.env_builtin import standard_environment
from symbex.config import reader_strict
from symbex.evaluation.evaluator import evaluate
from symbex.reader.parser import read, read_all, read_lines
from symbex.types.environment import Environment
from symbex.types.nil import Value
from symbex.types.slist import SList

logger = logging.getLogger("symbex.interpreter")


class Interpreter:
    """
    Orchestrates reading and evaluating Symbex code.
    Owns one Environment, so definitions persist across calls on the same
    instance and never leak into another instance.
    """

    def __init__(
        self,
        prelude: str | None | Literal['auto'] = None,
        *,
        output: Optional[TextIO] = None,
        strict: Optional[bool] = None,
    ):
        self.env: Environment = standard_environment(output=output)
        self.strict: bool = reader_strict() if strict is None else strict

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            # Lazy import to avoid circular imports
            from symbex.modules.prelude_loader import load_prelude
            try:
                load_prelude(self)
            except FileNotFoundError as ex:
                # Be permissive: no prelude found -> proceed
                logger.warning("prelude not loaded: %s", ex)
        elif prelude:
            self.eval_prelude(prelude)

    def read(self, code: str) -> Value:
        return read(code, strict=self.strict)

    def eval(self, code: str) -> Value:
        """Read a single form from `code` and evaluate it."""
        return evaluate(self.read(code), self.env)

    def eval_value(
        self,
        value: Value,
        names: Optional[SList] = None,
        values: Optional[SList] = None,
    ) -> Value:
        return evaluate(value, self.env, names, values)

    def eval_all(self, code: str) -> list[Value]:
        """Evaluate every top-level form in `code`, in order."""
        results: list[Value] = []
        for expr in read_all(code):
            results.append(evaluate(expr, self.env))
        return results

    def eval_prelude(self, code: str) -> None:
        """Evaluate line-oriented source: one form per line, `;` comments."""
        for expr in read_lines(code, strict=self.strict):
            evaluate(expr, self.env)
