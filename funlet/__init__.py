# Core type aliases for Funlet's data model.
# Syntax trees are frozen dataclasses (see funlet.types.term); these aliases keep
# annotations short in the reader and analysis modules.
#
# Naming guidance:
# - Term:         any syntax tree node (Var, Fun, App, Let).
# - BindingTable: the pre-order occurrence -> binder table produced by the binder.

from typing import Tuple, Union

from funlet.types.position import Position, Span
from funlet.types.term import Var, Fun, App, Let
from funlet.types.binding import Binding

Term = Union[Var, Fun, App, Let]
BindingTable = Tuple[Binding, ...]

__all__ = [
    "Position",
    "Span",
    "Var",
    "Fun",
    "App",
    "Let",
    "Binding",
    "Term",
    "BindingTable",
]
