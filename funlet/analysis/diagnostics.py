"""Diagnostics for one analysed document.

A syntax error becomes a single zero-width diagnostic at the error position.
Every unbound identifier becomes one diagnostic spanning the identifier.
Syntax errors come first, then unbound identifiers in table order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional

from funlet import BindingTable
from funlet.analysis.binder import unbound
from funlet.errors import FunletSyntaxError
from funlet.types.position import Span


class Severity(IntEnum):
    # Same numbering as the editor protocol
    ERROR = 1
    WARNING = 2
    INFORMATION = 3
    HINT = 4


PARSER_SOURCE = "parser"
BINDER_SOURCE = "binder"
UNBOUND_SEVERITY = Severity.ERROR


@dataclass(frozen=True)
class Diagnostic:
    range: Span
    message: str
    severity: Severity = Severity.ERROR
    source: str = PARSER_SOURCE


def syntax_error_diagnostic(error: FunletSyntaxError) -> Diagnostic:
    return Diagnostic(
        range=Span.at(error.position),
        message=error.reason,
        severity=Severity.ERROR,
        source=PARSER_SOURCE,
    )


def build_diagnostics(
    error: Optional[FunletSyntaxError] = None,
    table: Optional[BindingTable] = None,
    max_problems: Optional[int] = None,
) -> List[Diagnostic]:
    diags: List[Diagnostic] = []
    if error is not None:
        diags.append(syntax_error_diagnostic(error))
    for var in unbound(table or ()):
        diags.append(
            Diagnostic(
                range=var.span,
                message=f"`{var.name}` is not defined",
                severity=UNBOUND_SEVERITY,
                source=BINDER_SOURCE,
            )
        )
    if max_problems is not None:
        del diags[max(max_problems, 0):]
    return diags
