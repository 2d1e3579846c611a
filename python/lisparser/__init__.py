"""S-expression parser built from composable parser combinators."""

from lisparser.combinators import (
    ABSENT,
    FAILURE,
    Cursor,
    Failure,
    Parser,
    Result,
    Success,
    any_char,
    bind,
    char_in,
    char_matching,
    char_range,
    choice,
    delimited,
    end_of_input,
    integer,
    lazy,
    left,
    literal,
    many,
    many1,
    optional,
    parse,
    right,
    separated_list,
    sequence,
    until,
    whitespace,
    whitespace1,
)
from lisparser.errors import (
    GrammarMismatch,
    NestingTooDeep,
    NonProgressingParser,
    ParseFailure,
    TrailingInput,
)
from lisparser.grammar import (
    document,
    ident,
    lisp_list,
    lisp_object,
    quoted_text,
    read,
    string_literal,
    token_text,
)
from lisparser.objects import Ident, LispObject, List, String

__all__ = [
    "ABSENT",
    "FAILURE",
    "Cursor",
    "Failure",
    "GrammarMismatch",
    "Ident",
    "LispObject",
    "List",
    "NestingTooDeep",
    "NonProgressingParser",
    "ParseFailure",
    "Parser",
    "Result",
    "String",
    "Success",
    "TrailingInput",
    "any_char",
    "bind",
    "char_in",
    "char_matching",
    "char_range",
    "choice",
    "delimited",
    "document",
    "end_of_input",
    "ident",
    "integer",
    "lazy",
    "left",
    "lisp_list",
    "lisp_object",
    "literal",
    "many",
    "many1",
    "optional",
    "parse",
    "quoted_text",
    "read",
    "right",
    "separated_list",
    "sequence",
    "string_literal",
    "token_text",
    "until",
    "whitespace",
    "whitespace1",
]
