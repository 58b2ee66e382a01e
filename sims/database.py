"""SQLite storage of student records."""

from __future__ import annotations

import os
import sqlite3
from typing import Optional, Union

from sims.students import Student, StudentNotFoundError

DATABASE_PATH = "data/students.db"

_CREATE_TABLE = (
    "CREATE TABLE IF NOT EXISTS students ("
    "id INTEGER PRIMARY KEY,"
    "name TEXT NOT NULL,"
    "age INTEGER NOT NULL,"
    "score REAL NOT NULL"
    ");"
)
_INSERT = "INSERT OR REPLACE INTO students (id, name, age, score) VALUES (?, ?, ?, ?);"
_DELETE = "DELETE FROM students WHERE id = ?;"
_UPDATE = "UPDATE students SET name = ?, age = ?, score = ? WHERE id = ?;"
_SELECT_ONE = "SELECT id, name, age, score FROM students WHERE id = ?;"
_SELECT_ALL = "SELECT id, name, age, score FROM students ORDER BY id;"


class DatabaseError(Exception):
    """Raised when the student database cannot be used."""


class StudentDatabase:
    """A connection to the students table of an SQLite file."""

    def __init__(self, path: Union[str, "os.PathLike[str]"] = DATABASE_PATH) -> None:
        self.path = path
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def __enter__(self) -> "StudentDatabase":
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def open(self) -> None:
        """Open the database file and create the students table if needed."""
        if self._conn is not None:
            return
        try:
            conn = sqlite3.connect(self.path)
        except sqlite3.Error as exc:
            raise DatabaseError(f"无法打开数据库: {exc}") from exc
        try:
            with conn:
                conn.execute(_CREATE_TABLE)
        except sqlite3.Error as exc:
            conn.close()
            raise DatabaseError(f"创建表失败: {exc}") from exc
        self._conn = conn

    def close(self) -> None:
        """Close the connection; closing twice does nothing."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def _execute(self, operation: str, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        if self._conn is None:
            raise DatabaseError("数据库未初始化。")
        try:
            with self._conn:
                return self._conn.execute(sql, params)
        except sqlite3.Error as exc:
            raise DatabaseError(f"{operation}失败: {exc}") from exc

    def save(self, student: Student) -> None:
        """Insert *student*, replacing any row with the same id."""
        self._execute(
            "插入学生数据",
            _INSERT,
            (student.id, student.name, student.age, student.score),
        )

    def delete(self, student_id: int) -> None:
        """Delete the row with *student_id*."""
        cursor = self._execute("删除学生数据", _DELETE, (student_id,))
        if cursor.rowcount <= 0:
            raise StudentNotFoundError(student_id)

    def update(self, student_id: int, name: str, age: int, score: float) -> None:
        """Change the name, age and score stored for *student_id*."""
        cursor = self._execute(
            "更新学生数据", _UPDATE, (name, age, score, student_id)
        )
        if cursor.rowcount <= 0:
            raise StudentNotFoundError(student_id)

    def find(self, student_id: int) -> Optional[Student]:
        """Return the stored student with *student_id*, or None."""
        row = self._execute("查询学生数据", _SELECT_ONE, (student_id,)).fetchone()
        return Student(*row) if row is not None else None

    def load_all(self) -> list[Student]:
        """Return every stored student, ordered by id."""
        rows = self._execute("查询所有学生", _SELECT_ALL).fetchall()
        return [Student(*row) for row in rows]