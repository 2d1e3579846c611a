"""Exceptions raised at the boundary of the parsing library."""

from __future__ import annotations


class ParseFailure(ValueError):
    """The source text is not accepted by the grammar.

    Carries no location: a failure is an opaque "no match" signal.
    """


class GrammarMismatch(ParseFailure):
    """The top-level parser did not match the source."""


class TrailingInput(ParseFailure):
    """A prefix of the source matched but input was left over."""


class NestingTooDeep(ParseFailure):
    """The source nests deeper than the interpreter's recursion limit."""


class NonProgressingParser(RuntimeError):
    """A repeated parser succeeded without consuming input.

    This is a bug in the grammar definition, not in the source text, so it
    is not a :class:`ParseFailure`.
    """
