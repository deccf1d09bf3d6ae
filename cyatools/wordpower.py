"""The cube of a word: the word written three times in a row."""

from __future__ import annotations

from cyatools.strings import Language, Word


def cube(word: Word) -> Language:
    """The language holding the word concatenated with itself three times.

    The empty word "&" yields a language holding the word with no symbols.
    """
    if word.length() == 0:
        return Language({Word.from_text("")})
    text = "".join(symbol.value for symbol in word)
    return Language({Word.from_text(text * 3)})