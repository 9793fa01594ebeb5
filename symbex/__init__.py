# Public surface of the Symbex evaluator.
#
# The value model has exactly two variants, Atom and SList; `Value` is their
# union. The empty list NIL stands for false/nil and the atom TRUE for true.
#
# Naming guidance:
# - Value: anything the reader produces or the evaluator returns.
# - names/values: the parallel positional bindings threaded through evaluate().

from symbex.types.atom import Atom
from symbex.types.slist import SList
from symbex.types.nil import NIL, TRUE, Value, is_value, truthy
from symbex.errors import (
    SymbexError,
    SymbexSyntaxError,
    UnexpectedCloseParen,
    UnexpectedEndOfInput,
    TrailingInput,
    SymbexTypeError,
    SymbexNameError,
)
from symbex.reader.parser import read, read_all, read_lines
from symbex.evaluation.evaluator import evaluate
from symbex.types.environment import Environment
from symbex.builtin.env_builtin import standard_environment, default_environment
from symbex.interpreter import Interpreter

__all__ = [
    "Atom",
    "SList",
    "NIL",
    "TRUE",
    "Value",
    "is_value",
    "truthy",
    "SymbexError",
    "SymbexSyntaxError",
    "UnexpectedCloseParen",
    "UnexpectedEndOfInput",
    "TrailingInput",
    "SymbexTypeError",
    "SymbexNameError",
    "read",
    "read_all",
    "read_lines",
    "evaluate",
    "Environment",
    "standard_environment",
    "default_environment",
    "Interpreter",
]
