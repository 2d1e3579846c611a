"""Lisp object grammar, assembled from :mod:`lisparser.combinators`.

::

    lisp_object   = list | string_literal | ident
    list          = "(" ws [lisp_object (ws lisp_object)*] ws ")"
    string_literal = '"' (any char but '"')* '"'
    ident         = token char+

Whitespace is only skipped where a rule says so; nothing is skipped inside a
string literal.
"""

from __future__ import annotations

from lisparser.combinators import (
    Parser,
    char_matching,
    choice,
    delimited,
    lazy,
    left,
    literal,
    many,
    many1,
    parse,
    right,
    separated_list,
    whitespace,
)
from lisparser.objects import Ident, LispObject, List, String, is_token_char


def token_text() -> Parser[str]:
    """The raw text of a bare token: a maximal run of non-delimiter characters."""
    return many1(char_matching(is_token_char)).map("".join)


def quoted_text() -> Parser[str]:
    """The raw text between a pair of double quotes.

    An unterminated literal fails as a whole.
    """
    quote = literal('"')
    return delimited(quote, many(char_matching(lambda ch: ch != '"')), quote).map("".join)


def ident() -> Parser[LispObject]:
    return token_text().map(Ident)


def string_literal() -> Parser[LispObject]:
    return quoted_text().map(String)


def lisp_list(item: Parser[LispObject]) -> Parser[LispObject]:
    """A parenthesised list of ``item`` values separated by whitespace.

    The separator may be empty, so ``(a(b))`` reads as two children; a bare
    token ends at any delimiter.
    """
    return delimited(
        left(literal("("), whitespace()),
        separated_list(item, whitespace()),
        right(whitespace(), literal(")")),
    ).map(List)


def lisp_object() -> Parser[LispObject]:
    """Parser for one :class:`~lisparser.objects.LispObject`.

    Lists are tried before strings and strings before identifiers.  A bare
    token never starts with ``(`` or ``"``, so the order only decides which
    rule reports the match.
    """
    obj: Parser[LispObject] = choice(
        lisp_list(lazy(lambda: obj)),
        string_literal(),
        ident(),
    )
    return obj


def document() -> Parser[LispObject]:
    """One object with optional surrounding whitespace."""
    return delimited(whitespace(), lisp_object(), whitespace())


def read(source: str | bytes | bytearray) -> LispObject:
    """Parse ``source`` as a single Lisp object.

    Raises:
        GrammarMismatch: If the source is not a Lisp object
                         (unterminated string, unclosed list, empty input, etc.).
        TrailingInput:   If anything but whitespace follows the object.
        NestingTooDeep:  If lists nest past the interpreter's recursion limit.

    """
    return parse(document(), source)


__all__ = [
    "document",
    "ident",
    "lisp_list",
    "lisp_object",
    "quoted_text",
    "read",
    "string_literal",
    "token_text",
]
