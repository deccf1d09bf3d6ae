"""Alphabets: ordered sets of symbols."""

from __future__ import annotations

from typing import Iterable, Iterator

from cyatools.strings import Symbol, Word


class Alphabet:
    """A set of symbols, printed in sorted order as ``{ a, b}``."""

    def __init__(self, symbols: Iterable[Symbol] | None = None) -> None:
        self._symbols: set[Symbol] = set(symbols) if symbols is not None else set()

    @classmethod
    def from_word(cls, word: Word) -> "Alphabet":
        """Build the alphabet made of every symbol that appears in ``word``."""
        return cls(word)

    def add(self, symbol: Symbol) -> None:
        """Add ``symbol`` to the alphabet; adding it twice has no effect."""
        self._symbols.add(symbol)

    def cardinal(self) -> int:
        """Number of distinct symbols."""
        return len(self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(sorted(self._symbols))

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._symbols

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._symbols == other._symbols

    def __str__(self) -> str:
        return "{ " + ", ".join(str(symbol) for symbol in self) + "}"

    def __repr__(self) -> str:
        return f"Alphabet({sorted(self._symbols)!r})"