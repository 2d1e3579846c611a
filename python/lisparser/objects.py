"""Tree values produced by the Lisp grammar.

A parsed document is a :class:`LispObject`: an :class:`Ident`, a
:class:`String` or a :class:`List` of further objects.  Every value is frozen
and owns its children outright, so a tree is acyclic and can be shared freely
between threads.

``str(obj)`` renders canonical source text that reads back to an equal
object; construction rejects atoms that could not be rendered that way.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Final, overload

#: Characters with structural meaning.  They end a bare token.
DELIMITERS: Final[frozenset[str]] = frozenset('()"')


def is_token_char(ch: str) -> bool:
    """``True`` if ``ch`` may appear in a bare identifier."""
    return not ch.isspace() and ch not in DELIMITERS


class LispObject:
    """Base class of the three tree variants."""

    __slots__ = ()

    @property
    def is_atom(self) -> bool:
        """``True`` for :class:`Ident` and :class:`String`, ``False`` for :class:`List`."""
        return True

    @property
    def value(self) -> str:
        """Text of an atom.

        Raises:
            TypeError: If the object is a :class:`List`.

        """
        raise TypeError(f"{type(self).__name__} has no value")

    @property
    def depth(self) -> int:
        """Nesting depth: 0 for an atom, 1 for a list of atoms."""
        return 0


@dataclass(frozen=True, repr=False)
class Ident(LispObject):
    """A bare token such as ``foo`` or ``+``."""

    text: str

    def __post_init__(self) -> None:
        if not self.text or not all(is_token_char(ch) for ch in self.text):
            raise ValueError(f"not a valid identifier: {self.text!r}")

    @property
    def value(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"Ident({self.text!r})"


@dataclass(frozen=True, repr=False)
class String(LispObject):
    """The characters between a pair of double quotes.  No escapes are processed."""

    text: str

    def __post_init__(self) -> None:
        if '"' in self.text:
            raise ValueError(f"string literal cannot contain a double quote: {self.text!r}")

    @property
    def value(self) -> str:
        return self.text

    def __str__(self) -> str:
        return f'"{self.text}"'

    def __repr__(self) -> str:
        return f"String({self.text!r})"


@dataclass(frozen=True, repr=False)
class List(LispObject):
    """An ordered sequence of objects.

    Supports ``len``, iteration and indexing.  Indexing by ``str`` finds the
    first child list headed by that identifier::

        >>> doc = List([Ident("player"), List([Ident("pos"), Ident("1")])])
        >>> doc["pos"]
        List([Ident('pos'), Ident('1')])
    """

    items: tuple[LispObject, ...] = ()

    def __post_init__(self) -> None:
        items = tuple(self.items)
        for item in items:
            if not isinstance(item, LispObject):
                raise TypeError(f"list items must be LispObject, not {type(item).__name__}")
        object.__setattr__(self, "items", items)

    @classmethod
    def of(cls, *items: LispObject) -> List:
        return cls(items)

    @property
    def is_atom(self) -> bool:
        return False

    @property
    def depth(self) -> int:
        return 1 + max((item.depth for item in self.items), default=0)

    @property
    def head(self) -> LispObject:
        """First child.

        Raises:
            IndexError: If the list is empty.

        """
        if not self.items:
            raise IndexError("head of empty list")
        return self.items[0]

    @property
    def tail(self) -> Iterator[LispObject]:
        """Iterator over all children after the first (i.e. ``items[1:]``)."""
        return iter(self.items[1:])

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[LispObject]:
        return iter(self.items)

    @overload
    def __getitem__(self, key: int) -> LispObject: ...
    @overload
    def __getitem__(self, key: slice) -> List: ...
    @overload
    def __getitem__(self, key: str) -> List: ...
    def __getitem__(self, key: int | slice | str) -> LispObject:
        if isinstance(key, int):
            return self.items[key]
        if isinstance(key, slice):
            return List(self.items[key])
        if isinstance(key, str):
            for item in self.items:
                if isinstance(item, List) and item.items:
                    first = item.items[0]
                    if isinstance(first, Ident) and first.text == key:
                        return item
            raise KeyError(key)
        raise TypeError(f"list indices must be int, slice or str, not {type(key).__name__}")

    def __str__(self) -> str:
        return "(" + " ".join(str(item) for item in self.items) + ")"

    def __repr__(self) -> str:
        return "List([" + ", ".join(repr(item) for item in self.items) + "])"
