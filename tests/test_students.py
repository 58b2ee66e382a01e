import pytest

from sims.students import (
    NAME_MAX_BYTES,
    NO_STUDENTS_MESSAGE,
    Student,
    StudentNotFoundError,
    StudentRegistry,
)


@pytest.fixture
def registry():
    reg = StudentRegistry()
    reg.add(Student(1, "Alice", 20, 88.5))
    reg.add(Student(2, "Bob", 21, 75.0))
    reg.add(Student(3, "Carol", 19, 92.25))
    return reg


def test_add_keeps_insertion_order(registry):
    assert [s.id for s in registry] == [1, 2, 3]
    registry.add(Student(0, "Zed", 30, 50.0))
    assert [s.id for s in registry] == [1, 2, 3, 0]


def test_find_returns_matching_student(registry):
    found = registry.find(2)
    assert found is not None
    assert found.name == "Bob"
    assert found.age == 21


def test_find_missing_returns_none(registry):
    assert registry.find(42) is None


def test_find_returns_first_duplicate():
    reg = StudentRegistry()
    reg.add(Student(5, "First", 10, 1.0))
    reg.add(Student(5, "Second", 11, 2.0))
    assert reg.find(5).name == "First"


def test_delete_removes_student(registry):
    removed = registry.delete(2)
    assert removed.name == "Bob"
    assert [s.id for s in registry] == [1, 3]
    assert 2 not in registry


def test_delete_head(registry):
    registry.delete(1)
    assert [s.id for s in registry] == [2, 3]


def test_delete_missing_raises(registry):
    with pytest.raises(StudentNotFoundError) as info:
        registry.delete(99)
    assert info.value.student_id == 99
    assert len(registry) == 3


def test_delete_from_empty_raises():
    with pytest.raises(StudentNotFoundError):
        StudentRegistry().delete(1)


def test_update_changes_fields(registry):
    registry.update(3, "Caroline", 20, 95.5)
    student = registry.find(3)
    assert (student.name, student.age, student.score) == ("Caroline", 20, 95.5)


def test_update_missing_raises(registry):
    with pytest.raises(StudentNotFoundError):
        registry.update(77, "Nobody", 1, 1.0)


def test_update_truncates_name(registry):
    registry.update(1, "x" * 300, 20, 1.0)
    assert registry.find(1).name == "x" * NAME_MAX_BYTES


def test_clear_empties_registry(registry):
    registry.clear()
    assert len(registry) == 0
    assert list(registry) == []


def test_replace_all(registry):
    registry.replace_all([Student(9, "Nina", 22, 60.0)])
    assert [s.id for s in registry] == [9]


def test_student_name_truncated_to_limit():
    student = Student(1, "a" * 200, 20, 1.0)
    assert student.name == "a" * NAME_MAX_BYTES


def test_student_multibyte_name_not_split():
    original = "张" * 50
    student = Student(1, original, 20, 1.0)
    assert len(student.name.encode("utf-8")) <= NAME_MAX_BYTES
    assert original.startswith(student.name)
    assert student.name


def test_format_table_empty():
    assert StudentRegistry().format_table() == NO_STUDENTS_MESSAGE + "\n"


def test_format_table_lists_every_student(registry):
    table = registry.format_table()
    lines = table.splitlines()
    assert "所有学生信息：" in lines
    for student in registry:
        row = next(line for line in lines if student.name in line)
        assert row.startswith(str(student.id))
        assert f"{student.score:.2f}" in row
    assert lines[0] == lines[-1]