"""
  Funlet Parser

Recursive descent over an immutable Cursor. Grammar:

    term     := atom ( "(" term ")" )*
    atom     := "function(" variable "):" space term space "end"
              | "let " variable space "=" space term space term
              | variable
    variable := [a-z]+
    space    := [ \\n\\t]+

- Application folds left: f(a)(b) -> App(App(f, a), b)
- Separators are mandatory where the grammar has `space`, forbidden elsewhere
- Decisions only look at fixed literals, so there is no backtracking
- The first failure raises FunletSyntaxError; no partial tree is returned
"""

from __future__ import annotations

from funlet import Term
from funlet.errors import FunletSyntaxError
from funlet.reader.cursor import Cursor
from funlet.types.position import Span
from funlet.types.term import App, Fun, Let, Var

FUNCTION_KW = "function("
LET_KW = "let "
END_KW = "end"
WHITESPACE = frozenset(" \n\t")


def is_letter(ch: str) -> bool:
    return "a" <= ch <= "z"


def is_white(ch: str) -> bool:
    return ch in WHITESPACE


class Parser:
    def __init__(self, text: str):
        self.cursor = Cursor.make(text)

    def fail(self, reason: str):
        raise FunletSyntaxError(self.cursor.position, reason)

    def eat(self, n: int = 1) -> None:
        self.cursor = self.cursor.advance_by(n)

    def expect(self, literal: str) -> None:
        if not self.cursor.starts_with(literal):
            self.fail(f"Expecting '{literal}'")
        self.eat(len(literal))

    def parse_variable(self) -> Var:
        start = self.cursor.position
        if not self.cursor.matches(is_letter):
            self.fail("Expecting a variable")
        chars = []
        while self.cursor.matches(is_letter):
            chars.append(self.cursor.peek())
            self.eat()
        return Var("".join(chars), Span(start, self.cursor.position))

    def parse_space(self) -> None:
        if not self.cursor.matches(is_white):
            self.fail("Expecting a whitespace or a newline.")
        while self.cursor.matches(is_white):
            self.eat()

    def parse_eof(self) -> None:
        if not self.cursor.at_end():
            self.fail("Expecting EOF")

    def parse_atom(self) -> Term:
        if self.cursor.starts_with(FUNCTION_KW):
            self.expect(FUNCTION_KW)
            param = self.parse_variable()
            self.expect(")")
            self.expect(":")
            self.parse_space()
            body = self.parse_term()
            self.parse_space()
            self.expect(END_KW)
            return Fun(param, body)

        if self.cursor.starts_with(LET_KW):
            self.expect(LET_KW)
            name = self.parse_variable()
            self.parse_space()
            self.expect("=")
            self.parse_space()
            init = self.parse_term()
            self.parse_space()
            body = self.parse_term()
            return Let(name, init, body)

        return self.parse_variable()

    def parse_term(self) -> Term:
        term = self.parse_atom()
        while self.cursor.starts_with("("):
            self.expect("(")
            operand = self.parse_term()
            self.expect(")")
            term = App(term, operand)
        return term

    def parse_document(self) -> Term:
        term = self.parse_term()
        self.parse_eof()
        return term


def parse(text: str) -> Term:
    """Parse a whole document. Raises FunletSyntaxError on the first error."""
    return Parser(text).parse_document()
