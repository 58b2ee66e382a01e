# sims

A small console application for keeping student records. Each record has an
ID, a name, an age and a score. The records are kept in memory while you
work. They can be stored in a SQLite database and exported to a binary file
of fixed-size records. The menu and its messages are in Chinese.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

Start the interactive menu with:

```
sims
```

The command takes two options:

- `--database PATH` sets the SQLite database file. The default is
  `data/students.db`.
- `--data-file PATH` sets the binary export file. The default is
  `data/stu_info.dat`.

The defaults are relative paths, so run the command from a directory that has
a `data/` folder, or pass other paths. When it starts, the program opens the
database and creates the `students` table if it is missing. Then it loads
every stored student into memory, ordered by ID. If the database cannot be
opened, the program prints an error and exits with status 1.

The menu offers these choices:

1. Add a student. The program asks for the ID, the name (one word), the age
   and the score. The student is kept in memory and saved to the database
   straight away. A database row with the same ID is replaced.
2. Delete a student from memory by ID.
3. Update a student in memory. The program shows the current record, then
   asks for a new name, age and score.
4. Find a student in memory by ID and show the details.
5. Show all students in memory as a table.
6. Write all students in memory to the data file.
7. Reload the students from the database. This replaces what is in memory.
8. Save every student in memory to the database and report how many were
   saved. A row with the same ID is replaced.
9. Exit. This closes the database connection.

A choice that is not a number from 1 to 9 is reported as invalid and the menu
appears again. Input that cannot be read as a number while a choice is being
handled is also reported, and the menu appears again. The program also ends
when its input runs out.

## Library use

The parts behind the menu can be used on their own:

```python
from sims.students import Student, StudentRegistry
from sims.database import StudentDatabase
from sims.storage import save_students, load_students

registry = StudentRegistry()
registry.add(Student(1, "Alice", 20, 91.5))
print(registry.format_table(), end="")

with StudentDatabase("data/students.db") as db:
    db.save(registry.find(1))
    registry.replace_all(db.load_all())

save_students(registry, "data/stu_info.dat")
print(load_students("data/stu_info.dat"))
```

- `sims.students` has `Student`, a dataclass with the fields `id`, `name`,
  `age` and `score`. Names longer than 99 UTF-8 bytes are cut short. It also
  has `StudentRegistry`, an ordered collection that supports `add`, `find`,
  `delete`, `update`, `clear`, `replace_all` and `format_table`, and can be
  iterated, measured with `len` and tested with `in` for an ID. `find`
  returns `None` for an unknown ID. `delete` and `update` raise
  `StudentNotFoundError` in that case.
- `sims.database` has `StudentDatabase`. It supports `open`, `close`, `save`,
  `delete`, `update`, `find` and `load_all`, and works as a context manager.
  An operation that fails, or one that is tried before `open`, raises
  `DatabaseError`. `delete` and `update` raise `StudentNotFoundError` when no
  row has the ID. `find` returns `None` in that case.
- `sims.storage` has `save_students` and `load_students` for the binary file.
  Each record holds the ID, a name of up to 100 bytes, the age and the score
  as a 32-bit float, so a score read back may differ slightly in its last
  digits. A partial record at the end of a file is ignored.

## What it does not do

- The menu changes the database only when a student is added (choice 1) or
  when you save all students (choice 8). Deleting or updating a student in
  the menu changes only the records in memory.
- The menu can write the binary data file but cannot read it back. Reading it
  is only possible through `sims.storage.load_students`.