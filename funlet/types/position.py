from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Position:
    """Zero-based (line, character) coordinate.

    Ordering compares the line first, then the character, which is the order
    the cursor visits positions in.
    """

    line: int = 0
    character: int = 0

    def next(self, ch: str) -> Position:
        """Position after consuming `ch`."""
        if ch == "\n":
            return Position(self.line + 1, 0)
        return Position(self.line, self.character + 1)

    def __str__(self):
        return f"{self.line}:{self.character}"


@dataclass(frozen=True)
class Span:
    """Source extent; `end` is the position just after the last character."""

    start: Position
    end: Position

    @classmethod
    def at(cls, position: Position) -> Span:
        # zero-width
        return cls(position, position)

    def contains(self, position: Position) -> bool:
        """Inclusive on both ends, so a cursor just after an identifier still hits it."""
        return self.start <= position <= self.end

    def __str__(self):
        return f"{self.start}-{self.end}"
