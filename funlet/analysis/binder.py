"""Binding resolution.

`resolve` walks a term once, threading a persistent Scope, and returns the
binding table: one row per identifier in pre-order. Binder identifiers
(function parameters, let names) are recorded as their own target; uses point
at the nearest enclosing binder of the same name, or None.

The table is computed once per document and shared by the diagnostics and
go-to-definition features.
"""

from __future__ import annotations

from typing import Iterator

from funlet import BindingTable, Term
from funlet.types.binding import Binding
from funlet.types.scope import Scope
from funlet.types.term import App, Fun, Let, Var


def _walk(term: Term, scope: Scope) -> Iterator[Binding]:
    if isinstance(term, Var):
        yield Binding(term, scope.lookup(term.name))
    elif isinstance(term, Fun):
        yield Binding(term.param, term.param)
        yield from _walk(term.body, scope.extend(term.param))
    elif isinstance(term, App):
        yield from _walk(term.operator, scope)
        yield from _walk(term.operand, scope)
    elif isinstance(term, Let):
        yield Binding(term.name, term.name)
        # a let name is not in scope in its own initializer
        yield from _walk(term.init, scope)
        yield from _walk(term.body, scope.extend(term.name))
    else:
        raise TypeError(f"Not a term: {term!r}")


def resolve(term: Term, scope: Scope | None = None) -> BindingTable:
    """Build the binding table for `term`, optionally under an enclosing scope."""
    return tuple(_walk(term, scope if scope is not None else Scope()))


def unbound(table: BindingTable) -> Iterator[Var]:
    """Occurrences with no binder, in table order."""
    return (b.occurrence for b in table if b.is_unbound)
