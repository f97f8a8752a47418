"""Immutable cursor over a document's text.

The parser never mutates a cursor; every move returns a new one. Lookahead
(`starts_with`, `matches`) therefore cannot disturb the parser's position.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from funlet.errors import FunletOutOfBounds
from funlet.types.position import Position


@dataclass(frozen=True)
class Cursor:
    text: str
    index: int = 0
    position: Position = Position()

    @classmethod
    def make(cls, text: str) -> Cursor:
        return cls(text)

    def at_end(self) -> bool:
        return self.index >= len(self.text)

    def peek(self) -> str:
        if self.at_end():
            raise FunletOutOfBounds(f"peek past end of text at {self.position}")
        return self.text[self.index]

    def advance(self) -> Cursor:
        ch = self.peek()
        return Cursor(self.text, self.index + 1, self.position.next(ch))

    def advance_by(self, n: int) -> Cursor:
        cursor = self
        for _ in range(n):
            cursor = cursor.advance()
        return cursor

    def starts_with(self, literal: str) -> bool:
        return self.text.startswith(literal, self.index)

    def matches(self, predicate: Callable[[str], bool]) -> bool:
        return not self.at_end() and predicate(self.text[self.index])

    def __repr__(self):
        return f"Cursor(index={self.index}, position={self.position})"
