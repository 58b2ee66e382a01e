"""In-memory student records kept in insertion order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

NAME_MAX_BYTES = 99
"""Longest name, in UTF-8 bytes, that a record can hold."""

NO_STUDENTS_MESSAGE = "没有学生信息。"


def _truncate_name(name: str) -> str:
    """Cut *name* to at most NAME_MAX_BYTES UTF-8 bytes without splitting a character."""
    encoded = name.encode("utf-8")
    if len(encoded) <= NAME_MAX_BYTES:
        return name
    return encoded[:NAME_MAX_BYTES].decode("utf-8", errors="ignore")


def _ljust(text: str, width: int) -> str:
    """Left-justify by UTF-8 byte width, as a byte-oriented printf does."""
    return text + " " * max(width - len(text.encode("utf-8")), 0)


def _rjust(text: str, width: int) -> str:
    """Right-justify by UTF-8 byte width."""
    return " " * max(width - len(text.encode("utf-8")), 0) + text


@dataclass
class Student:
    """One student record."""

    id: int
    name: str
    age: int
    score: float

    def __post_init__(self) -> None:
        self.name = _truncate_name(self.name)


class StudentNotFoundError(LookupError):
    """Raised when no student has the requested id."""

    def __init__(self, student_id: int) -> None:
        super().__init__(f"学生ID {student_id} 不存在。")
        self.student_id = student_id


class StudentRegistry:
    """An ordered collection of students, looked up by id."""

    def __init__(self, students: Iterable[Student] = ()) -> None:
        self._students: list[Student] = list(students)

    def __iter__(self) -> Iterator[Student]:
        return iter(self._students)

    def __len__(self) -> int:
        return len(self._students)

    def __contains__(self, student_id: object) -> bool:
        return any(student.id == student_id for student in self._students)

    def add(self, student: Student) -> None:
        """Append *student* at the end."""
        self._students.append(student)

    def delete(self, student_id: int) -> Student:
        """Remove the first student with *student_id* and return it."""
        student = self.find(student_id)
        if student is None:
            raise StudentNotFoundError(student_id)
        self._students = [s for s in self._students if s is not student]
        return student

    def update(self, student_id: int, name: str, age: int, score: float) -> Student:
        """Change the name, age and score of the student with *student_id*."""
        student = self.find(student_id)
        if student is None:
            raise StudentNotFoundError(student_id)
        student.name = _truncate_name(name)
        student.age = age
        student.score = score
        return student

    def find(self, student_id: int) -> Optional[Student]:
        """Return the first student with *student_id*, or None."""
        return next((s for s in self._students if s.id == student_id), None)

    def clear(self) -> None:
        """Remove every student."""
        self._students = []

    def replace_all(self, students: Iterable[Student]) -> None:
        """Discard the current students and take *students* in their place."""
        self._students = list(students)

    def format_table(self) -> str:
        """Render all students as a text table."""
        if not self._students:
            return NO_STUDENTS_MESSAGE + "\n"
        rule = "=" * 40
        lines = [
            rule,
            "所有学生信息：",
            rule,
            f"{_ljust('ID', 6)} {_ljust('姓名', 12)} {_ljust('年龄', 6)} {_rjust('成绩', 8)}",
            "-" * 40,
        ]
        lines.extend(
            f"{s.id:<6d} {_ljust(s.name, 12)} {s.age:<6d} {s.score:<8.2f}"
            for s in self._students
        )
        lines.append(rule)
        return "\n".join(lines) + "\n"