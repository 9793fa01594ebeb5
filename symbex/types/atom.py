from __future__ import annotations
import sys


class Atom:
    """An opaque leaf token, compared by its exact text."""

    __slots__ = ("text",)

    def __init__(self, text: str):
        # Intern so operator names and repeated tokens share storage
        self.text = sys.intern(text)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Atom) and self.text == other.text

    def __hash__(self) -> int:
        return hash(self.text)

    def __repr__(self):
        return f"Atom({self.text!r})"

    def __str__(self):
        return self.text
