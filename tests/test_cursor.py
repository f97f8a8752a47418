import pytest

from funlet.errors import FunletOutOfBounds
from funlet.reader.cursor import Cursor
from funlet.types.position import Position


def test_make_starts_at_origin():
    c = Cursor.make("ab")
    assert c.index == 0
    assert c.position == Position(0, 0)
    assert not c.at_end()


def test_advance_counts_characters_and_lines():
    c = Cursor.make("a\nbc")
    positions = []
    while not c.at_end():
        c = c.advance()
        positions.append(c.position)
    assert positions == [Position(0, 1), Position(1, 0), Position(1, 1), Position(1, 2)]


def test_advance_returns_new_cursor():
    c = Cursor.make("xy")
    d = c.advance()
    assert c.index == 0 and c.peek() == "x"
    assert d.index == 1 and d.peek() == "y"


@pytest.mark.parametrize("text", ["", "a"])
def test_out_of_bounds(text):
    c = Cursor.make(text).advance_by(len(text))
    assert c.at_end()
    with pytest.raises(FunletOutOfBounds):
        c.peek()
    with pytest.raises(FunletOutOfBounds):
        c.advance()


@pytest.mark.parametrize(
    "text, literal, expected",
    [
        ("function(x)", "function(", True),
        ("func", "function(", False),
        ("let x", "let ", True),
        ("letx", "let ", False),
        ("", "", True),
    ],
)
def test_starts_with(text, literal, expected):
    assert Cursor.make(text).starts_with(literal) is expected


def test_matches_is_false_at_end():
    c = Cursor.make("a")
    assert c.matches(str.isalpha)
    assert not c.advance().matches(lambda ch: True)
