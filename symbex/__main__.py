"""Command-line entry point: evaluate an expression, a file, or run a REPL.

    symbex -e "(car (quote (a b)))"
    symbex program.sx
    symbex --prelude
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from symbex.config import get_log_level
from symbex.errors import SymbexError
from symbex.interpreter import Interpreter
from symbex.reader.parser import read_lines

PROMPT = "symbex> "


def repl(itp: Interpreter, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    """Read one form per line, print each result, keep going after errors."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            return 0
        code = line.strip()
        if not code:
            continue
        try:
            result = itp.eval(code)
        except SymbexError as ex:
            stdout.write(f"error: {ex}\n")
            continue
        stdout.write(f"{result}\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="symbex", description="Evaluate symbolic expressions.")
    parser.add_argument("file", nargs="?", help="source file, one form per line")
    parser.add_argument("-e", "--eval", dest="expr", help="evaluate EXPR and print the result")
    parser.add_argument("--prelude", action="store_true", help="load the standard prelude first")
    parser.add_argument("--lenient", action="store_true", help="accept unbalanced parentheses")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="more logging (repeatable)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    level = get_log_level()
    if args.verbose == 1:
        level = "INFO"
    elif args.verbose > 1:
        level = "DEBUG"
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    itp = Interpreter(
        prelude="auto" if args.prelude else None,
        strict=False if args.lenient else None,
    )

    try:
        if args.expr is not None:
            print(itp.eval(args.expr))
            return 0
        if args.file:
            code = Path(args.file).read_text(encoding="utf-8")
            for expr in read_lines(code, strict=itp.strict):
                itp.eval_value(expr)
            return 0
    except SymbexError as ex:
        print(f"error: {ex}", file=sys.stderr)
        return 1

    return repl(itp)


if __name__ == "__main__":
    sys.exit(main())
