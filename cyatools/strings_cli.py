"""Command that applies a word operation to every line of a file."""

from __future__ import annotations

import sys
from typing import Iterable

from cyatools.alphabet import Alphabet
from cyatools.strings import Word

PROG = "cyatools-strings"

_HELP = """\
Program features:
Each line of the input file holds one input word, for example: abbab
Depending on the opcode, the output file receives for each word:
1. Alphabet: the alphabet of the word.
2. Length: the length of the word.
3. Reverse: the word read backwards.
4. Prefixes: the set of prefixes of the word.
5. Suffixes: the set of suffixes of the word."""


def _alphabet(line: str) -> str:
    return str(Alphabet.from_word(Word.from_text(line)))


def _length(line: str) -> str:
    return str(Word.from_text(line).length())


def _reverse(line: str) -> str:
    return str(Word.from_text(line).reversed())


def _prefixes(line: str) -> str:
    return str(Word.from_text(line).prefixes())


def _suffixes(line: str) -> str:
    return str(Word.from_text(line).suffixes())


_OPERATIONS = {
    1: _alphabet,
    2: _length,
    3: _reverse,
    4: _prefixes,
    5: _suffixes,
}


def process_lines(lines: Iterable[str], opcode: int) -> list[str]:
    """Apply the operation named by ``opcode`` to each line.

    An unknown opcode yields no output at all.
    """
    operation = _OPERATIONS.get(opcode)
    if operation is None:
        return []
    return [operation(line) for line in lines]


def main(argv: list[str] | None = None) -> int:
    """Read words from a file, apply the operation and write the results."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args or (len(args) == 1 and args[0] == "--help"):
        print(f"Usage: {PROG} filein.txt fileout.txt opcode")
        if not args:
            print(f"Try '{PROG} --help' for more information")
        else:
            print(_HELP)
        return 0
    if len(args) != 3:
        print(f"Try '{PROG} --help' for more information")
        return 1

    input_path, output_path, opcode_text = args
    try:
        opcode = int(opcode_text)
    except ValueError:
        print(f"{PROG}: invalid opcode: {opcode_text}", file=sys.stderr)
        return 1
    try:
        with open(input_path, encoding="utf-8") as source:
            text = source.read()
    except OSError as error:
        print(f"{PROG}: cannot read {input_path}: {error}", file=sys.stderr)
        return 1

    results = process_lines(text.split("\n"), opcode)
    with open(output_path, "w", encoding="utf-8") as target:
        for result in results:
            target.write(result + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())