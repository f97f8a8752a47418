"""Canonical layout for Funlet terms.

- function bodies are indented one level and closed by `end` at the
  function's own level
- let initializers are indented one level; the let body stays at the let's
  level
- applications are written inline, whatever the depth

Re-parsing the output gives back the same tree up to source positions, and
rendering is idempotent.
"""

from __future__ import annotations

from funlet import Term
from funlet.types.term import App, Fun, Let, Var

DEFAULT_INDENT = 2


def _pp(term: Term, depth: int, width: int) -> str:
    pad = " " * width * depth
    inner = " " * width * (depth + 1)

    if isinstance(term, Var):
        return term.name
    if isinstance(term, Fun):
        return "\n".join([
            f"function({term.param.name}):",
            inner + _pp(term.body, depth + 1, width),
            pad + "end",
        ])
    if isinstance(term, App):
        return f"{_pp(term.operator, depth, width)}({_pp(term.operand, depth, width)})"
    if isinstance(term, Let):
        return "\n".join([
            f"let {term.name.name} =",
            inner + _pp(term.init, depth + 1, width),
            pad + _pp(term.body, depth, width),
        ])
    raise TypeError(f"Not a term: {term!r}")


def render(term: Term, indent: int = DEFAULT_INDENT) -> str:
    """Render `term` as canonical source text."""
    return _pp(term, 0, indent)
