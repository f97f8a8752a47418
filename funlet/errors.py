from __future__ import annotations

from funlet.types.position import Position


class FunletError(Exception):
    """ Base class for all Funlet errors"""
    pass


class FunletSyntaxError(FunletError):
    """ Raised by the parser at the first position the grammar cannot accept"""

    def __init__(self, position: Position, reason: str):
        super().__init__(f"{reason} at {position}")
        self.position = position
        self.reason = reason


class FunletOutOfBounds(FunletError):
    """ Raised when a cursor is read or advanced past the end of its text"""


class FunletNestingError(FunletSyntaxError):
    """ Raised when a document is nested deeper than the reader can follow"""
