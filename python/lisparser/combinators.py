"""Parser combinators.

A :class:`Parser` wraps one function from :class:`Cursor` to :class:`Result`.
Applying it either succeeds with a value and the cursor after the match, or
returns :data:`FAILURE`.  A failure never carries a cursor, so a combinator
that fails part way through cannot leak the position it reached: the caller
still holds the cursor it started from.

Parsers are plain values.  They hold no mutable state and can be applied any
number of times, from any number of threads.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Final, Generic, TypeVar, Union

from lisparser.errors import GrammarMismatch, NestingTooDeep, NonProgressingParser, TrailingInput

T = TypeVar("T")
U = TypeVar("U")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cursor:
    """Read position within an immutable source text."""

    text: str
    offset: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.offset <= len(self.text):
            raise ValueError(f"offset {self.offset} outside text of length {len(self.text)}")

    @property
    def at_end(self) -> bool:
        return self.offset == len(self.text)

    @property
    def remaining(self) -> str:
        return self.text[self.offset:]

    def peek(self) -> str | None:
        """Next character, or ``None`` at the end of the text."""
        if self.at_end:
            return None
        return self.text[self.offset]

    def startswith(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.offset)

    def advance(self, count: int = 1) -> Cursor:
        """Return a new cursor ``count`` characters further on."""
        return Cursor(self.text, self.offset + count)


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T
    cursor: Cursor

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    def __bool__(self) -> bool:
        return False


FAILURE: Final[Failure] = Failure()

Result = Union[Success[T], Failure]


class _Absent:
    __slots__ = ()

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


#: Value produced by :func:`optional` when its parser did not match.
ABSENT: Final[Any] = _Absent()


class Parser(Generic[T]):
    """A parser value: call it with a :class:`Cursor` to get a :data:`Result`.

    The methods are shorthands for the module-level combinators so grammars
    can be written left to right::

        literal("(").right(many(item)).left(literal(")"))

    Combinators call each other's wrapped function directly rather than going
    through :meth:`__call__`, which keeps the interpreter stack shallow on
    deeply nested input.
    """

    __slots__ = ("_fn", "name")

    def __init__(self, fn: Callable[[Cursor], Result[T]], name: str | None = None) -> None:
        self._fn = fn
        self.name = name or getattr(fn, "__qualname__", repr(fn))

    def __call__(self, cursor: Cursor) -> Result[T]:
        return self._fn(cursor)

    def __repr__(self) -> str:
        return f"<Parser {self.name}>"

    def __or__(self, other: Parser[U]) -> Parser[T | U]:
        return choice(self, other)

    def or_(self, other: Parser[U]) -> Parser[T | U]:
        return choice(self, other)

    def map(self, f: Callable[[T], U]) -> Parser[U]:
        """Apply ``f`` to the parsed value.  Success, failure and cursor are unchanged."""
        run = self._fn

        def parse_map(cursor: Cursor) -> Result[U]:
            result = run(cursor)
            if not result:
                return FAILURE
            return Success(f(result.value), result.cursor)

        return Parser(parse_map, self.name)

    def bind(self, f: Callable[[T], Parser[U]]) -> Parser[U]:
        return bind(self, f)

    def then(self, other: Parser[U]) -> Parser[tuple[T, U]]:
        return sequence(self, other)

    def left(self, other: Parser[Any]) -> Parser[T]:
        return left(self, other)

    def right(self, other: Parser[U]) -> Parser[U]:
        return right(self, other)

    def many(self) -> Parser[list[T]]:
        return many(self)

    def many1(self) -> Parser[list[T]]:
        return many1(self)

    def optional(self, default: Any = ABSENT) -> Parser[Any]:
        return optional(self, default)

    def until(self, stop: Parser[Any]) -> Parser[list[T]]:
        return until(self, stop)

    def parse_prefix(self, source: str | bytes | bytearray) -> Result[T]:
        """Apply the parser at the start of ``source`` without requiring full consumption."""
        return self._fn(Cursor(_as_text(source)))


# --- primitives ---


def literal(expected: str) -> Parser[str]:
    """Match exactly ``expected``."""

    def parse_literal(cursor: Cursor) -> Result[str]:
        if cursor.startswith(expected):
            return Success(expected, cursor.advance(len(expected)))
        return FAILURE

    return Parser(parse_literal, f"literal({expected!r})")


def char_matching(predicate: Callable[[str], bool]) -> Parser[str]:
    """Match one character for which ``predicate`` is true.

    Fails, without calling ``predicate``, at the end of the text.
    """

    def parse_char(cursor: Cursor) -> Result[str]:
        ch = cursor.peek()
        if ch is not None and predicate(ch):
            return Success(ch, cursor.advance())
        return FAILURE

    return Parser(parse_char, f"char_matching({getattr(predicate, '__qualname__', predicate)!s})")


def char_in(chars: str) -> Parser[str]:
    """Match one character out of ``chars``.  An empty set never matches."""
    members = frozenset(chars)
    return Parser(char_matching(members.__contains__)._fn, f"char_in({chars!r})")


def char_range(first: str, last: str) -> Parser[str]:
    """Match one character between ``first`` and ``last`` inclusive."""
    return Parser(char_matching(lambda ch: first <= ch <= last)._fn, f"char_range({first!r}, {last!r})")


def any_char() -> Parser[str]:
    return Parser(char_matching(lambda ch: True)._fn, "any_char()")


def end_of_input() -> Parser[None]:
    def parse_end(cursor: Cursor) -> Result[None]:
        if cursor.at_end:
            return Success(None, cursor)
        return FAILURE

    return Parser(parse_end, "end_of_input()")


# --- combinators ---


def _names(parsers: tuple[Parser[Any], ...]) -> str:
    return ", ".join(parser.name for parser in parsers)


def sequence(*parsers: Parser[Any]) -> Parser[tuple[Any, ...]]:
    """Apply ``parsers`` one after another and collect their values in a tuple.

    If any of them fails the whole sequence fails, so nothing consumed by the
    earlier ones is visible to the caller.
    """
    if not parsers:
        raise TypeError("sequence() needs at least one parser")
    runs = [parser._fn for parser in parsers]

    def parse_sequence(cursor: Cursor) -> Result[tuple[Any, ...]]:
        values = []
        for run in runs:
            result = run(cursor)
            if not result:
                return FAILURE
            values.append(result.value)
            cursor = result.cursor
        return Success(tuple(values), cursor)

    return Parser(parse_sequence, f"sequence({_names(parsers)})")


def choice(*parsers: Parser[Any]) -> Parser[Any]:
    """Try ``parsers`` in order from the same cursor; the first match wins."""
    if not parsers:
        raise TypeError("choice() needs at least one parser")
    runs = [parser._fn for parser in parsers]

    def parse_choice(cursor: Cursor) -> Result[Any]:
        for run in runs:
            result = run(cursor)
            if result:
                return result
        return FAILURE

    return Parser(parse_choice, f"choice({_names(parsers)})")


def left(first: Parser[T], second: Parser[Any]) -> Parser[T]:
    """Sequence keeping the value of ``first``."""
    run_first, run_second = first._fn, second._fn

    def parse_left(cursor: Cursor) -> Result[T]:
        kept = run_first(cursor)
        if not kept:
            return FAILURE
        dropped = run_second(kept.cursor)
        if not dropped:
            return FAILURE
        return Success(kept.value, dropped.cursor)

    return Parser(parse_left, f"left({first.name}, {second.name})")


def right(first: Parser[Any], second: Parser[U]) -> Parser[U]:
    """Sequence keeping the value of ``second``."""
    run_first, run_second = first._fn, second._fn

    def parse_right(cursor: Cursor) -> Result[U]:
        dropped = run_first(cursor)
        if not dropped:
            return FAILURE
        return run_second(dropped.cursor)

    return Parser(parse_right, f"right({first.name}, {second.name})")


def delimited(opening: Parser[Any], inner: Parser[T], closing: Parser[Any]) -> Parser[T]:
    run_opening, run_inner, run_closing = opening._fn, inner._fn, closing._fn

    def parse_delimited(cursor: Cursor) -> Result[T]:
        opened = run_opening(cursor)
        if not opened:
            return FAILURE
        kept = run_inner(opened.cursor)
        if not kept:
            return FAILURE
        closed = run_closing(kept.cursor)
        if not closed:
            return FAILURE
        return Success(kept.value, closed.cursor)

    return Parser(parse_delimited, f"delimited({_names((opening, inner, closing))})")


def bind(parser: Parser[T], f: Callable[[T], Parser[U]]) -> Parser[U]:
    """Choose the parser for the rest of the input from the value parsed so far."""
    run = parser._fn

    def parse_bind(cursor: Cursor) -> Result[U]:
        result = run(cursor)
        if not result:
            return FAILURE
        return f(result.value)._fn(result.cursor)

    return Parser(parse_bind, f"bind({parser.name})")


def _check_progress(parser: Parser[Any], before: Cursor, after: Cursor) -> None:
    if after.offset == before.offset:
        raise NonProgressingParser(
            f"repeated parser {parser.name} matched without consuming input at offset {before.offset}"
        )


def many(parser: Parser[T]) -> Parser[list[T]]:
    """Apply ``parser`` until it fails.  Always succeeds, possibly with no values.

    Raises:
        NonProgressingParser: If ``parser`` succeeds without consuming input.

    """
    run = parser._fn

    def parse_many(cursor: Cursor) -> Result[list[T]]:
        values = []
        while True:
            result = run(cursor)
            if not result:
                return Success(values, cursor)
            _check_progress(parser, cursor, result.cursor)
            values.append(result.value)
            cursor = result.cursor

    return Parser(parse_many, f"many({parser.name})")


def many1(parser: Parser[T]) -> Parser[list[T]]:
    """As :func:`many`, but fails when ``parser`` matches zero times."""
    run = many(parser)._fn

    def parse_many1(cursor: Cursor) -> Result[list[T]]:
        result = run(cursor)
        if not result or not result.value:
            return FAILURE
        return result

    return Parser(parse_many1, f"many1({parser.name})")


def optional(parser: Parser[T], default: Any = ABSENT) -> Parser[Any]:
    """Always succeed, yielding ``default`` at an unchanged cursor if ``parser`` fails."""
    run = parser._fn

    def parse_optional(cursor: Cursor) -> Result[Any]:
        result = run(cursor)
        if not result:
            return Success(default, cursor)
        return result

    return Parser(parse_optional, f"optional({parser.name})")


def separated_list(item: Parser[T], separator: Parser[Any]) -> Parser[list[T]]:
    """Zero or more ``item`` values with one ``separator`` between each pair.

    A trailing separator is not consumed: the last ``separator, item`` pair
    fails as a whole and is backed out.

    Raises:
        NonProgressingParser: If a ``separator, item`` pair succeeds without
                              consuming input.

    """
    run_item = item._fn
    pair = right(separator, item)
    run_pair = pair._fn

    def parse_separated(cursor: Cursor) -> Result[list[T]]:
        first = run_item(cursor)
        if not first:
            return Success([], cursor)
        values = [first.value]
        cursor = first.cursor
        while True:
            result = run_pair(cursor)
            if not result:
                return Success(values, cursor)
            _check_progress(pair, cursor, result.cursor)
            values.append(result.value)
            cursor = result.cursor

    return Parser(parse_separated, f"separated_list({item.name}, {separator.name})")


def until(parser: Parser[T], stop: Parser[Any]) -> Parser[list[T]]:
    """Collect ``parser`` values until ``stop`` would match.  ``stop`` is not consumed.

    Fails on empty input, and when ``parser`` fails before ``stop`` matches.

    Raises:
        NonProgressingParser: If ``parser`` succeeds without consuming input.

    """
    run, run_stop = parser._fn, stop._fn

    def parse_until(cursor: Cursor) -> Result[list[T]]:
        if cursor.at_end:
            return FAILURE
        values = []
        while not run_stop(cursor):
            result = run(cursor)
            if not result:
                return FAILURE
            _check_progress(parser, cursor, result.cursor)
            values.append(result.value)
            cursor = result.cursor
        return Success(values, cursor)

    return Parser(parse_until, f"until({parser.name}, {stop.name})")


def lazy(thunk: Callable[[], Parser[T]]) -> Parser[T]:
    """Defer to the parser returned by ``thunk`` each time this one is applied.

    Used at the self-referential edge of a recursive grammar.
    """
    return Parser(lambda cursor: thunk()._fn(cursor), "lazy()")


# --- common parsers ---


def whitespace() -> Parser[None]:
    """Skip zero or more whitespace characters.  Always succeeds."""
    return many(char_matching(str.isspace)).map(lambda _: None)


def whitespace1() -> Parser[None]:
    return many1(char_matching(str.isspace)).map(lambda _: None)


def integer() -> Parser[int]:
    """A run of ASCII digits, as an ``int``."""
    return many1(char_range("0", "9")).map(lambda digits: int("".join(digits)))


# --- entry point ---


def _as_text(source: str | bytes | bytearray) -> str:
    if isinstance(source, str):
        return source
    if isinstance(source, (bytes, bytearray)):
        return bytes(source).decode("utf-8")
    raise TypeError(f"expected str, bytes or bytearray, not {type(source).__name__}")


def parse(parser: Parser[T], source: str | bytes | bytearray) -> T:
    """Apply ``parser`` to the whole of ``source`` and return the parsed value.

    Bytes are decoded as UTF-8.

    Every :class:`RecursionError` raised while the parser runs is reported as
    :class:`NestingTooDeep`, including one raised by a ``map`` or ``bind``
    callback that recurses on its own.  Each nesting level of a recursive
    grammar costs a handful of interpreter frames, so the reachable depth
    scales with :func:`sys.getrecursionlimit`.

    Raises:
        GrammarMismatch: If ``parser`` does not match.
        TrailingInput:   If ``parser`` matched but did not reach the end of the text.
        NestingTooDeep:  If the input nests past the interpreter's recursion limit.
        TypeError:       If ``source`` is not text or bytes.
        ValueError:      If bytes are not valid UTF-8.

    """
    text = _as_text(source)
    logger.debug("parsing %d characters", len(text))
    try:
        result = parser(Cursor(text))
    except RecursionError:
        logger.debug("recursion limit reached")
        raise NestingTooDeep("input nests too deeply to parse") from None
    if not result:
        logger.debug("no match")
        raise GrammarMismatch("input does not match the grammar")
    if not result.cursor.at_end:
        logger.debug("unconsumed input after match")
        raise TrailingInput("unexpected input after the parsed value")
    return result.value


__all__ = [
    "ABSENT",
    "FAILURE",
    "Cursor",
    "Failure",
    "Parser",
    "Result",
    "Success",
    "any_char",
    "bind",
    "char_in",
    "char_matching",
    "char_range",
    "choice",
    "delimited",
    "end_of_input",
    "integer",
    "lazy",
    "left",
    "literal",
    "many",
    "many1",
    "optional",
    "parse",
    "right",
    "separated_list",
    "sequence",
    "until",
    "whitespace",
    "whitespace1",
]
