"""
  Symbex Reader: Lexer and Parser

- Three token kinds: '(' , ')' and text blocks
- Text blocks are split on the space character and on parentheses only;
  there is no escaping, no string syntax and no numeric type:

    - every text block -> Atom
    - ( ... )          -> SList
    - empty input      -> NIL

  Tabs, newlines and quotation marks are ordinary atom characters.
  `read_lines` is the one place that knows about lines and `;` comments;
  it is meant for source files, not for the notation itself.
"""

from __future__ import annotations

import re
from typing import Iterator, Iterable, Optional

from symbex.config import reader_strict
from symbex.errors import TrailingInput, UnexpectedCloseParen, UnexpectedEndOfInput
from symbex.types.atom import Atom
from symbex.types.nil import NIL, Value
from symbex.types.slist import SList


Token = tuple[str, str, int]

TOKEN_RE = re.compile(
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<text>[^ ()]+)"  # anything else up to a space or paren
    r"| +"  # separators
)

_END: tuple[None, None, int] = (None, None, -1)


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, offset) tuples."""
    for m in TOKEN_RE.finditer(source):
        kind = m.lastgroup
        if kind is None:
            continue
        yield kind, m.group(kind), m.start()


class TokenStream:
    def __init__(self, token_iter: Iterable[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> tuple[Optional[str], Optional[str], int]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return _END
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str], int]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, _END)

    def parse_expr(self) -> Optional[Value]:
        """Parse one form; None when the tokens are exhausted."""
        tok_type, tok_val, pos = self.peek()
        if tok_type is None:
            return None

        if tok_type == "text":
            self.advance()
            return Atom(tok_val)

        if tok_type == "rparen":
            raise UnexpectedCloseParen("Unmatched ')'", pos)

        # List
        self.advance()
        items: list[Value] = []
        while True:
            next_type = self.peek()[0]
            if next_type is None:
                raise UnexpectedEndOfInput("Unmatched '('", pos)
            if next_type == "rparen":
                self.advance()
                return SList(items)
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[Value]:
        while True:
            tok_type, _, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()

    def parse_lenient(self) -> Value:
        """
        Tolerant reading of possibly unbalanced input.

        Open lists are closed at end of input. A ')' at top level ends the
        read and whatever follows is ignored. Later top-level forms are
        appended to a leading list; after a leading atom, the next form
        replaces it.
        """
        node: Optional[Value] = None
        while True:
            tok_type = self.peek()[0]
            if tok_type is None or tok_type == "rparen":
                break
            expr = self._parse_lenient_expr()
            if isinstance(node, SList):
                node = node + SList([expr])
            else:
                node = expr
        return NIL if node is None else node

    def _parse_lenient_expr(self) -> Value:
        tok_type, tok_val, _ = self.advance()
        if tok_type == "text":
            return Atom(tok_val)
        items: list[Value] = []
        while True:
            next_type = self.peek()[0]
            if next_type is None:
                return SList(items)
            if next_type == "rparen":
                self.advance()
                return SList(items)
            items.append(self._parse_lenient_expr())


def read(source: str, strict: Optional[bool] = None) -> Value:
    """Read exactly one form from `source`; empty input reads as NIL.

    In strict mode (the default unless SYMBEX_READER_STRICT says otherwise)
    unbalanced parentheses and extra top-level forms raise a
    SymbexSyntaxError subclass.
    """
    if strict is None:
        strict = reader_strict()
    stream = TokenStream(lex(source))
    if not strict:
        return stream.parse_lenient()

    expr = stream.parse_expr()
    if expr is None:
        return NIL
    tok_type, _, pos = stream.peek()
    if tok_type == "rparen":
        raise UnexpectedCloseParen("Unmatched ')'", pos)
    if tok_type is not None:
        raise TrailingInput("Expected a single form", pos)
    return expr


def read_all(source: str) -> list[Value]:
    """Read every top-level form in `source`, in order."""
    return list(TokenStream(lex(source)).parse_all())


def read_lines(source: str, strict: bool = True) -> Iterator[Value]:
    """Read one form per line, skipping blank lines and `;` comment lines."""
    for line in source.splitlines():
        text = line.strip()
        if not text or text.startswith(";"):
            continue
        yield read(text, strict=strict)
