"""Analysis of one document text.

`analyze` is the boundary between the language core and its callers: it
parses and binds the text once and returns an immutable Analysis. Syntax
errors, including documents nested past the interpreter's recursion limit,
are returned as data; only internal faults (FunletOutOfBounds)
propagate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from funlet import BindingTable, Term
from funlet.analysis.binder import resolve
from funlet.analysis.definition import resolve_at
from funlet.analysis.diagnostics import Diagnostic, build_diagnostics
from funlet.errors import FunletNestingError, FunletSyntaxError
from funlet.pprint import DEFAULT_INDENT, render
from funlet.reader.parser import parse
from funlet.types.position import Position, Span

TOO_DEEP = "Document is nested too deeply"


@dataclass(frozen=True)
class Analysis:
    text: str
    term: Optional[Term] = None
    error: Optional[FunletSyntaxError] = None
    table: BindingTable = ()

    @property
    def ok(self) -> bool:
        return self.term is not None

    @property
    def end_position(self) -> Position:
        """Position just after the last character of the text."""
        line = self.text.count("\n")
        last_nl = self.text.rfind("\n")
        return Position(line, len(self.text) - last_nl - 1)

    def diagnostics(self, max_problems: Optional[int] = None) -> List[Diagnostic]:
        return build_diagnostics(self.error, self.table, max_problems)

    def format(self, indent: int = DEFAULT_INDENT) -> Optional[str]:
        """Canonical text, or None when the text did not parse."""
        if self.term is None:
            return None
        return render(self.term, indent)

    def definition(self, position: Position) -> List[Span]:
        return resolve_at(self.table, position)


def analyze(text: str) -> Analysis:
    try:
        term = parse(text)
        table = resolve(term)
    except FunletSyntaxError as err:
        return Analysis(text=text, error=err)
    except RecursionError:
        # the reader and binder recurse once per nesting level
        return Analysis(text=text, error=FunletNestingError(Position(), TOO_DEEP))
    return Analysis(text=text, term=term, table=table)
