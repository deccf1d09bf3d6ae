"""Symbols, words over an alphabet and finite languages of words."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

EMPTY_MARK = "&"
EMPTY_LANGUAGE_MARK = "{}"


@dataclass(frozen=True, order=True)
class Symbol:
    """A single symbol of an alphabet, usually one character."""

    value: str

    def __str__(self) -> str:
        return self.value


_EMPTY_SYMBOL = Symbol(EMPTY_MARK)


@dataclass(frozen=True, order=True, init=False)
class Word:
    """An immutable sequence of symbols; the lone symbol "&" is the empty word."""

    symbols: tuple[Symbol, ...]

    def __init__(self, symbols: Iterable[Symbol] | None = None) -> None:
        value = (_EMPTY_SYMBOL,) if symbols is None else tuple(symbols)
        object.__setattr__(self, "symbols", value)

    @classmethod
    def from_text(cls, text: str) -> "Word":
        """Build a word with one symbol per character of ``text``."""
        return cls(Symbol(char) for char in text)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self.symbols)

    def length(self) -> int:
        """Number of symbols, with the empty word "&" counting as zero."""
        if self.symbols == (_EMPTY_SYMBOL,):
            return 0
        return len(self.symbols)

    def append(self, symbol: Symbol) -> "Word":
        """Return a new word with ``symbol`` added at the end."""
        return Word(self.symbols + (symbol,))

    def reversed(self) -> "Word":
        """Return the word read backwards."""
        return Word(self.symbols[::-1])

    def prefixes(self) -> "Language":
        """All prefixes of the word, the empty word "&" included.

        Each prefix is held as one symbol made of the leading character of
        every symbol it covers.
        """
        words = {Word((_EMPTY_SYMBOL,))}
        prefix = ""
        for symbol in self.symbols:
            prefix += symbol.value[0]
            words.add(Word((Symbol(prefix),)))
        return Language(words)

    def suffixes(self) -> "Language":
        """All suffixes of the word, the empty word "&" included."""
        words = {Word((_EMPTY_SYMBOL,))}
        words.update(Word(self.symbols[start:]) for start in range(len(self.symbols)))
        return Language(words)

    def __str__(self) -> str:
        return "".join(symbol.value for symbol in self.symbols)


_EMPTY_LANGUAGE_WORD = Word((Symbol(EMPTY_LANGUAGE_MARK),))


class Language:
    """A finite set of words, printed in sorted order."""

    def __init__(self, words: Iterable[Word] | None = None) -> None:
        if words is None:
            self._words = frozenset({_EMPTY_LANGUAGE_WORD})
        else:
            self._words = frozenset(words)

    def __iter__(self) -> Iterator[Word]:
        return iter(sorted(self._words))

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Language):
            return NotImplemented
        return self._words == other._words

    def __hash__(self) -> int:
        return hash(self._words)

    def cardinal(self) -> int:
        """Number of words, zero for the empty language."""
        if len(self._words) == 1 and _EMPTY_LANGUAGE_WORD in self._words:
            return 0
        return len(self._words)

    def __str__(self) -> str:
        if self.cardinal() == 0:
            return "{}"
        return "{" + ", ".join(str(word) for word in self) + "}"

    def __repr__(self) -> str:
        return f"Language({sorted(self._words)!r})"