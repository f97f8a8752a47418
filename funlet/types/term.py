"""Syntax tree nodes.

A document parses to exactly one term. Only identifiers carry a span; the
extent of a compound node is implied by the identifiers inside it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from funlet.types.position import Span

if TYPE_CHECKING:
    from funlet import Term


@dataclass(frozen=True)
class Var:
    name: str
    span: Span

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Fun:
    param: Var
    body: Term


@dataclass(frozen=True)
class App:
    operator: Term
    operand: Term


@dataclass(frozen=True)
class Let:
    name: Var
    init: Term
    body: Term


def iter_vars(term: Term):
    """Yield every Var node in pre-order, binders included."""
    if isinstance(term, Var):
        yield term
    elif isinstance(term, Fun):
        yield term.param
        yield from iter_vars(term.body)
    elif isinstance(term, App):
        yield from iter_vars(term.operator)
        yield from iter_vars(term.operand)
    elif isinstance(term, Let):
        yield term.name
        yield from iter_vars(term.init)
        yield from iter_vars(term.body)
    else:
        raise TypeError(f"Not a term: {term!r}")
