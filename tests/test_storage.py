import pytest

from sims.storage import RECORD, load_students, save_students
from sims.students import Student


@pytest.fixture
def students():
    return [
        Student(1, "Alice", 20, 88.5),
        Student(2, "李明", 21, 75.25),
        Student(3, "Carol", 19, 92.0),
    ]


def test_round_trip(tmp_path, students):
    path = tmp_path / "stu_info.dat"
    save_students(students, path)
    assert load_students(path) == students


def test_single_record_occupies_fixed_layout_size(tmp_path):
    path = tmp_path / "single.dat"
    save_students([Student(7, "Dave", 22, 60.5)], path)
    assert path.stat().st_size == 120
    assert RECORD.size == 120


def test_file_size_is_record_multiple(tmp_path, students):
    path = tmp_path / "stu_info.dat"
    save_students(students, path)
    assert path.stat().st_size == RECORD.size * len(students)


def test_empty_list_writes_empty_file(tmp_path):
    path = tmp_path / "empty.dat"
    save_students([], path)
    assert path.read_bytes() == b""
    assert load_students(path) == []


def test_trailing_partial_record_ignored(tmp_path, students):
    path = tmp_path / "stu_info.dat"
    save_students(students, path)
    with open(path, "ab") as stream:
        stream.write(b"\x01\x02\x03")
    assert load_students(path) == students


def test_save_overwrites_existing(tmp_path, students):
    path = tmp_path / "stu_info.dat"
    save_students(students, path)
    save_students(students[:1], path)
    assert load_students(path) == students[:1]


def test_record_fields_encoded_little_endian(tmp_path):
    path = tmp_path / "one.dat"
    save_students([Student(1, "A", 2, 0.0)], path)
    data = path.read_bytes()
    assert data[:4] == b"\x01\x00\x00\x00"
    assert data[4:6] == b"A\x00"


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_students(tmp_path / "absent.dat")


def test_save_into_missing_directory_raises(tmp_path, students):
    with pytest.raises(FileNotFoundError):
        save_students(students, tmp_path / "no_dir" / "stu_info.dat")