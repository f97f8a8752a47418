from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from funlet.types.term import Var


@dataclass(frozen=True)
class Binding:
    """One row of a binding table: an identifier and the binder it refers to.

    Binder identifiers point at themselves; unbound uses point at None.
    """

    occurrence: Var
    target: Optional[Var]

    @property
    def is_unbound(self) -> bool:
        return self.target is None
