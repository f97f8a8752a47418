from hypothesis import given

from funlet.analysis.binder import resolve, unbound
from funlet.reader.parser import parse
from funlet.types.position import Position, Span
from funlet.types.scope import Scope
from funlet.types.term import Var, iter_vars

from strategies import terms


def _rows(source):
    """(name, occurrence start, target start or None) per table row."""
    return [
        (b.occurrence.name, b.occurrence.span.start, b.target.span.start if b.target else None)
        for b in resolve(parse(source))
    ]


def test_free_variable_is_unbound():
    assert _rows("y") == [("y", Position(0, 0), None)]


def test_function_parameter_binds_body():
    assert _rows("function(x): x end") == [
        ("x", Position(0, 9), Position(0, 9)),
        ("x", Position(0, 13), Position(0, 9)),
    ]


def test_shadowing_resolves_to_inner_parameter():
    table = resolve(parse("function(x): function(x): x end end"))
    outer, inner, use = table
    assert outer.target is outer.occurrence and inner.target is inner.occurrence
    assert use.target is inner.occurrence
    assert use.target.span == Span(Position(0, 22), Position(0, 23))


def test_let_is_not_recursive():
    table = resolve(parse("let f = f f"))
    binder, in_init, in_body = table
    assert binder.target is binder.occurrence
    assert in_init.is_unbound
    assert in_body.target is binder.occurrence


def test_sibling_scopes_do_not_leak():
    # x is bound in the function but not in its argument
    rows = _rows("function(x): x end(x)")
    assert rows == [
        ("x", Position(0, 9), Position(0, 9)),
        ("x", Position(0, 13), Position(0, 9)),
        ("x", Position(0, 19), None),
    ]


def test_table_is_pre_order():
    names = [b.occurrence.name for b in resolve(parse("let a = f(b) function(c): a(c)(d) end"))]
    assert names == ["a", "f", "b", "c", "a", "c", "d"]


def test_unbound_helper():
    table = resolve(parse("let a = b a(c)"))
    assert [v.name for v in unbound(table)] == ["b", "c"]


def test_resolve_under_enclosing_scope():
    outer = Var("y", Span(Position(9, 0), Position(9, 1)))
    (row,) = resolve(parse("y"), Scope().extend(outer))
    assert row.target is outer


def test_scope_extension_is_persistent():
    a = Var("a", Span(Position(0, 0), Position(0, 1)))
    b = Var("b", Span(Position(0, 2), Position(0, 3)))
    root = Scope()
    left = root.extend(a)
    right = root.extend(b)
    assert left.lookup("a") is a and right.lookup("a") is None
    assert right.lookup("b") is b and left.lookup("b") is None
    assert root.lookup("a") is None
    assert list(left.extend(b)) == [b, a]


@given(terms)
def test_every_var_appears_exactly_once(term):
    table = resolve(term)
    occurrences = [b.occurrence for b in table]
    expected = list(iter_vars(term))
    assert len(occurrences) == len(expected)
    assert all(o is e for o, e in zip(occurrences, expected))


def test_scope_lookup_prefers_innermost():
    outer = Var("a", Span(Position(0, 0), Position(0, 1)))
    inner = Var("a", Span(Position(1, 0), Position(1, 1)))
    scope = Scope().extend(outer).extend(inner)
    assert scope.lookup("a") is inner
    assert list(scope) == [inner, outer]
