"""Lexical scope for the binder.

A Scope maps names to the Var that introduced them. Scopes are persistent:
`extend` returns a new frame whose `outer` link is the receiver, so sibling
scopes share their common ancestors and never see each other's bindings.
"""

from __future__ import annotations

from typing import Iterator, Optional

from funlet.types.term import Var


class Scope:
    """Immutable linked chain of name -> binder frames, one binding per frame."""

    __slots__ = ("binder", "outer")

    def __init__(self, binder: Optional[Var] = None, outer: Optional[Scope] = None):
        # The root scope has no binder
        self.binder: Optional[Var] = binder
        self.outer: Optional[Scope] = outer

    def extend(self, binder: Var) -> Scope:
        """Return a child scope in which `binder.name` refers to `binder`."""
        return Scope(binder, self)

    def __iter__(self) -> Iterator[Var]:
        """Binders from innermost to outermost, shadowed ones included."""
        scope: Optional[Scope] = self
        while scope is not None:
            if scope.binder is not None:
                yield scope.binder
            scope = scope.outer

    def lookup(self, name: str) -> Optional[Var]:
        """Nearest enclosing binder named `name`, or None when unbound."""
        return next((binder for binder in self if binder.name == name), None)
