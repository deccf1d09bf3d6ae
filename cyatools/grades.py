"""Grade books: one grade per student, or every grade a student received."""

from __future__ import annotations

import re
from typing import Iterable

_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _parse_grade(text: str) -> float:
    """Read the leading number of ``text``; anything unreadable counts as 0."""
    match = _NUMBER.match(text)
    return float(match.group()) if match else 0.0


def _parse_line(line: str) -> tuple[str, float] | None:
    """Split a ``student grade`` line, or return None for a blank line."""
    fields = line.split()
    if not fields:
        return None
    grade = _parse_grade(fields[1]) if len(fields) > 1 else 0.0
    return fields[0], grade


def _format_grade(grade: float) -> str:
    return f"{grade:g}"


class SingleGrades:
    """A grade book holding a single grade for each student."""

    def __init__(self) -> None:
        self._grades: dict[str, float] = {}

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "SingleGrades":
        """Load ``student grade`` lines, keeping each student's highest grade."""
        book = cls()
        for line in lines:
            record = _parse_line(line)
            if record is None:
                continue
            student, grade = record
            current = book._grades.get(student)
            if current is None or current < grade:
                book._grades[student] = grade
        return book

    @property
    def grades(self) -> dict[str, float]:
        """The grades, ordered by student."""
        return dict(sorted(self._grades.items()))

    def __len__(self) -> int:
        return len(self._grades)

    def insert(self, student: str, grade: float) -> bool:
        """Set a student's grade, dropping leading zeros from the identifier.

        Returns True when the student already existed and the grade was
        replaced, False when the student was added.
        """
        key = student.lstrip("0")
        existed = key in self._grades
        self._grades[key] = grade
        return existed

    def render(self) -> str:
        """One ``student grade`` line per student, in student order."""
        return "".join(
            f"{student} {_format_grade(grade)}\n"
            for student, grade in sorted(self._grades.items())
        )


class MultipleGrades:
    """A grade book holding every grade each student received."""

    def __init__(self) -> None:
        self._grades: dict[str, list[float]] = {}

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "MultipleGrades":
        """Load ``student grade`` lines, keeping every grade."""
        book = cls()
        for line in lines:
            record = _parse_line(line)
            if record is not None:
                book.insert(*record)
        return book

    @property
    def grades(self) -> dict[str, list[float]]:
        """Each student's grades in the order received, ordered by student."""
        return {student: list(self._grades[student]) for student in sorted(self._grades)}

    def __len__(self) -> int:
        return sum(len(grades) for grades in self._grades.values())

    def insert(self, student: str, grade: float) -> None:
        """Add one more grade for ``student``."""
        self._grades.setdefault(student, []).append(grade)

    def render(self) -> str:
        """Each student on a line of its own as ``student: g1 g2 ...``."""
        parts: list[str] = []
        current = ""
        for student in sorted(self._grades):
            for grade in self._grades[student]:
                if student != current:
                    parts.append(f"\n{student}: {_format_grade(grade)}")
                else:
                    parts.append(f" {_format_grade(grade)}")
                current = student
        return "".join(parts) + "\n"