import pytest

import lisparser
from lisparser import FAILURE, Cursor, Success


def test_literal_matches():
    result = lisparser.literal("foo")(Cursor("foobar"))
    assert result == Success("foo", Cursor("foobar", 3))


def test_literal_mismatch_fails():
    assert lisparser.literal("foo")(Cursor("fob")) is FAILURE


def test_literal_at_offset():
    result = lisparser.literal("bar")(Cursor("foobar", 3))
    assert result.value == "bar"
    assert result.cursor.at_end


def test_literal_longer_than_input_fails():
    assert not lisparser.literal("foobar")(Cursor("foo"))


def test_char_matching():
    digit = lisparser.char_matching(str.isdigit)
    assert digit(Cursor("7a")) == Success("7", Cursor("7a", 1))
    assert not digit(Cursor("a7"))


def test_char_matching_at_end_fails_cleanly():
    called = []

    def predicate(ch):
        called.append(ch)
        return True

    assert not lisparser.char_matching(predicate)(Cursor(""))
    assert called == []


def test_char_in():
    paren = lisparser.char_in("()")
    assert paren(Cursor("(")).value == "("
    assert paren(Cursor(")")).value == ")"
    assert not paren(Cursor("x"))


def test_char_in_empty_never_matches():
    assert not lisparser.char_in("")(Cursor("123"))


def test_char_range():
    lower = lisparser.many(lisparser.char_range("a", "z"))
    result = lower(Cursor("hello!"))
    assert result.value == ["h", "e", "l", "l", "o"]
    assert result.cursor.remaining == "!"


def test_char_range_empty_never_matches():
    assert not lisparser.char_range("b", "a")(Cursor("a"))


def test_char_range_single():
    assert not lisparser.char_range("a", "a")(Cursor("123"))
    assert lisparser.char_range("a", "a")(Cursor("a")).value == "a"


def test_any_char():
    assert lisparser.any_char()(Cursor("()")) == Success("(", Cursor("()", 1))
    assert not lisparser.any_char()(Cursor(""))


def test_end_of_input():
    eof = lisparser.end_of_input()
    assert eof(Cursor("ab", 2)) == Success(None, Cursor("ab", 2))
    assert not eof(Cursor("ab", 1))


def test_integer():
    result = lisparser.integer()(Cursor("123 rest"))
    assert result.value == 123
    assert result.cursor.remaining == " rest"
    assert not lisparser.integer()(Cursor(""))
    assert not lisparser.integer()(Cursor("asd"))


def test_whitespace_skips_all_kinds():
    result = lisparser.whitespace()(Cursor("   \n    \tasdf"))
    assert result.value is None
    assert result.cursor.remaining == "asdf"


def test_whitespace_always_succeeds():
    assert lisparser.whitespace()(Cursor("")) == Success(None, Cursor(""))
    assert lisparser.whitespace()(Cursor("x")) == Success(None, Cursor("x"))


def test_whitespace1_requires_one():
    assert not lisparser.whitespace1()(Cursor("x"))
    assert lisparser.whitespace1()(Cursor(" \tx")).cursor.offset == 2


def test_failure_is_falsy_and_success_truthy():
    assert not FAILURE
    assert Success(None, Cursor(""))
    assert Success([], Cursor(""))


def test_parse_prefix_does_not_require_end():
    result = lisparser.literal("ab").parse_prefix("abc")
    assert result.value == "ab"
    assert result.cursor.remaining == "c"


@pytest.mark.parametrize("source", ["", "x", "()"])
def test_failed_parser_is_reusable(source):
    foo = lisparser.literal("foo")
    assert not foo(Cursor(source))
    assert foo(Cursor("foo")).value == "foo"


def test_parser_repr_names_combinator():
    assert repr(lisparser.literal("foo")) == "<Parser literal('foo')>"
    assert repr(lisparser.many(lisparser.char_in("ab"))) == "<Parser many(char_in('ab'))>"
    assert repr(lisparser.choice(lisparser.literal("a"), lisparser.any_char())) == (
        "<Parser choice(literal('a'), any_char())>"
    )


def test_parser_repr_from_function_name():
    def digit(cursor):
        return lisparser.FAILURE

    assert "digit" in repr(lisparser.Parser(digit))
