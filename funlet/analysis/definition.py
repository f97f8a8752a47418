from __future__ import annotations

from typing import List

from funlet import BindingTable
from funlet.types.position import Position, Span


def resolve_at(table: BindingTable, position: Position) -> List[Span]:
    """Spans of the binders referred to by the identifier under `position`.

    Every row whose occurrence span contains the position contributes its
    target's span; unbound rows contribute nothing. Binder identifiers are
    their own target, so asking at a definition site returns that site.
    """
    return [
        b.target.span
        for b in table
        if b.target is not None and b.occurrence.span.contains(position)
    ]
