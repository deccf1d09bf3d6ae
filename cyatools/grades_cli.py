"""Interactive menu over a grade book loaded from a file."""

from __future__ import annotations

import itertools
import sys
from typing import Iterable, Iterator, TextIO

from cyatools.grades import MultipleGrades, SingleGrades, _parse_grade

_EXISTING = "The student already exists. Updating the grade.\n"


class _Scanner:
    """Reads whitespace-separated input lazily from an iterable of lines."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._chars: Iterator[str] = itertools.chain.from_iterable(lines)

    def _skip_space(self) -> str | None:
        for char in self._chars:
            if not char.isspace():
                return char
        return None

    def char(self) -> str | None:
        return self._skip_space()

    def word(self) -> str | None:
        first = self._skip_space()
        if first is None:
            return None
        chars = [first]
        for char in self._chars:
            if char.isspace():
                break
            chars.append(char)
        return "".join(chars)


def _menu(final_option: bool) -> str:
    entries = ["1. Show grades", "2. Insert student and grade"]
    if final_option:
        entries += ["3. Show final state of the grades", "4. Exit"]
    else:
        entries.append("3. Exit")
    return "\nSelect an option:\n" + "\n".join(entries) + "\n"


def run_menu(book, lines: Iterable[str], out: TextIO, final_option: bool = False) -> None:
    """Run the menu, reading choices from ``lines`` until exit or end of input."""
    scanner = _Scanner(lines)
    exit_option = "4" if final_option else "3"
    while True:
        out.write(_menu(final_option))
        out.flush()
        option = scanner.char()
        if option is None:
            return
        if option == "1" or (final_option and option == "3"):
            out.write(book.render())
        elif option == "2":
            out.write("Enter the student's name: ")
            out.flush()
            student = scanner.word()
            if student is None:
                return
            out.write("Enter the grade: ")
            out.flush()
            grade_text = scanner.word()
            if grade_text is None:
                return
            if book.insert(student, _parse_grade(grade_text)):
                out.write(_EXISTING)
        elif option == exit_option:
            return
        else:
            out.write("Invalid option. Try again.\n")


def _main(argv: list[str] | None, book_cls, final_option: bool, prog: str) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args or (len(args) == 1 and args[0] == "--help"):
        print(f"Usage: {prog} grades.txt")
        if not args:
            print(f"Try '{prog} --help' for more information")
            return 1
        return 0
    if len(args) != 1:
        print(f"Try '{prog} --help' for more information")
        return 1
    try:
        with open(args[0], encoding="utf-8") as source:
            book = book_cls.from_lines(source)
    except OSError:
        print("Could not open the file", file=sys.stderr)
        return 1
    run_menu(book, sys.stdin, sys.stdout, final_option)
    return 0


def main_single(argv: list[str] | None = None) -> int:
    """Menu over a book that keeps one grade per student."""
    return _main(argv, SingleGrades, True, "cyatools-grades")


def main_multiple(argv: list[str] | None = None) -> int:
    """Menu over a book that keeps every grade of each student."""
    return _main(argv, MultipleGrades, False, "cyatools-grades-multi")


if __name__ == "__main__":
    sys.exit(main_single())