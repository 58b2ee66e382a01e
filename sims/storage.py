"""Fixed-size binary record files of students."""

from __future__ import annotations

import os
import struct
from pathlib import Path
from typing import Iterable, Union

from sims.students import Student

DEFAULT_FILENAME = "data/stu_info.dat"

# id, 100-byte NUL-padded name, age, 32-bit score, then 8 unused link bytes.
RECORD = struct.Struct("<i100sif8x")

PathType = Union[str, "os.PathLike[str]"]


def save_students(students: Iterable[Student], path: PathType) -> None:
    """Write *students* to *path*, one fixed-size record each, replacing the file."""
    with open(path, "wb") as stream:
        for student in students:
            stream.write(
                RECORD.pack(
                    student.id,
                    student.name.encode("utf-8"),
                    student.age,
                    student.score,
                )
            )


def load_students(path: PathType) -> list[Student]:
    """Read every complete record from *path*; a trailing partial record is ignored."""
    data = Path(path).read_bytes()
    usable = len(data) - len(data) % RECORD.size
    return [
        Student(
            student_id,
            raw_name.split(b"\0", 1)[0].decode("utf-8", errors="replace"),
            age,
            score,
        )
        for student_id, raw_name, age, score in RECORD.iter_unpack(data[:usable])
    ]