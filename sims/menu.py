"""Interactive text menu for managing student records."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from enum import IntEnum
from typing import Callable, Optional, TextIO

from sims.database import DATABASE_PATH, DatabaseError, StudentDatabase
from sims.storage import DEFAULT_FILENAME, save_students
from sims.students import Student, StudentNotFoundError, StudentRegistry

RULE = "=" * 40
SHORT_RULE = "=" * 25


class MenuChoice(IntEnum):
    """Numbers the user types to pick a menu entry."""

    ADD_STUDENT = 1
    DELETE_STUDENT = 2
    UPDATE_STUDENT = 3
    FIND_STUDENT = 4
    DISPLAY_ALL_STUDENTS = 5
    SAVE_FILE = 6
    LOAD_FROM_DB = 7
    SAVE_TO_DB = 8
    EXIT = 9


def _ljust(text: str, width: int) -> str:
    """Left-justify by UTF-8 byte width."""
    return text + " " * max(width - len(text.encode("utf-8")), 0)


class _TokenReader:
    """Reads whitespace-separated tokens from a text stream, line by line."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: deque[str] = deque()

    def token(self) -> str:
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._pending.extend(line.split())
        return self._pending.popleft()

    def integer(self) -> int:
        return int(self.token())

    def number(self) -> float:
        return float(self.token())

    def wait_for_enter(self) -> None:
        """Drop what is left of the current line and wait for one more line."""
        self._pending.clear()
        self._stream.readline()


class StudentApp:
    """The menu-driven front end over a registry and a database."""

    def __init__(
        self,
        registry: Optional[StudentRegistry] = None,
        database: Optional[StudentDatabase] = None,
        data_file: str = DEFAULT_FILENAME,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ) -> None:
        self.registry = registry if registry is not None else StudentRegistry()
        self.database = database if database is not None else StudentDatabase()
        self.data_file = data_file
        self._input = _TokenReader(stdin if stdin is not None else sys.stdin)
        self._out = stdout if stdout is not None else sys.stdout
        self._err = stderr if stderr is not None else sys.stderr

    def _say(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self._out)

    def _complain(self, text: str) -> None:
        print(text, file=self._err)

    def _wait(self) -> None:
        self._say("\n按任意键继续...")
        self._input.wait_for_enter()

    def display_menu(self) -> None:
        """Print the main menu and the choice prompt."""
        for line in (
            RULE,
            "       学生信息管理系统",
            RULE,
            "1. 添加学生",
            "2. 删除学生",
            "3. 更新学生信息",
            "4. 查找学生",
            "5. 显示所有学生",
            "6. 保存学生信息到文件",
            "7. 从数据库加载学生信息",
            "8. 保存学生信息到数据库",
            "9. 退出系统",
            RULE,
        ):
            self._say(line)
        self._say("请选择操作 (1-9): ", end="")

    def handle_add(self) -> None:
        """Ask for a new student, keep it in memory and store it in the database."""
        self._say("输入学生ID: ", end="")
        student_id = self._input.integer()
        self._say("输入学生姓名: ", end="")
        name = self._input.token()
        self._say("输入学生年龄: ", end="")
        age = self._input.integer()
        self._say("输入学生成绩: ", end="")
        score = self._input.number()

        student = Student(student_id, name, age, score)
        self.registry.add(student)
        try:
            self.database.save(student)
        except DatabaseError as exc:
            self._complain(str(exc))
            self._say("学生信息已添加到内存，但保存到数据库失败。")
        else:
            self._say("学生信息已添加并保存到数据库。")
        self._wait()

    def handle_delete(self) -> None:
        """Ask for an id and remove that student from memory."""
        self._say("输入要删除的学生ID: ", end="")
        student_id = self._input.integer()
        try:
            self.registry.delete(student_id)
        except StudentNotFoundError as exc:
            self._say(str(exc))
            self._wait()
        else:
            self._say("删除成功。")
        self._wait()

    def handle_update(self) -> None:
        """Show a student, then ask for and apply a new name, age and score."""
        self._say("输入要更新的学生ID: ", end="")
        student_id = self._input.integer()
        self._say("原学生信息：")
        self._say(RULE)
        self._say("ID        姓名       年龄      成绩")
        student = self.registry.find(student_id)
        if student is not None:
            self._say(
                f"{student.id:<8d} {_ljust(student.name, 12)} "
                f"{student.age:<8d} {student.score:<8.2f}"
            )
        else:
            self._say("未找到该学生。")
        self._say(RULE)
        self._say("输入新的姓名: ", end="")
        name = self._input.token()
        self._say("输入新的年龄: ", end="")
        age = self._input.integer()
        self._say("输入新的成绩: ", end="")
        score = self._input.number()
        try:
            self.registry.update(student_id, name, age, score)
        except StudentNotFoundError:
            pass
        self._wait()

    def handle_find(self) -> None:
        """Ask for an id and print that student's details."""
        self._say("输入要查找的学生ID: ", end="")
        student_id = self._input.integer()
        student = self.registry.find(student_id)
        if student is not None:
            self._say(SHORT_RULE)
            self._say(f"学生ID: {student.id}")
            self._say(f"学生姓名: {student.name}")
            self._say(f"学生年龄: {student.age}")
            self._say(f"学生成绩: {student.score:.2f}")
            self._say(SHORT_RULE)
        else:
            self._say("未找到该学生。")
        self._wait()

    def handle_display_all(self) -> None:
        """Print every student as a table."""
        self._say(self.registry.format_table(), end="")
        self._wait()

    def handle_save_file(self) -> None:
        """Write all students to the data file."""
        try:
            save_students(self.registry, self.data_file)
        except OSError:
            self._complain(f"无法打开文件 {self.data_file}")
        self._say(f"学生信息已保存到文件 {self.data_file}")
        self._wait()

    def handle_load_from_db(self) -> None:
        """Replace the students in memory with those in the database."""
        self.registry.clear()
        try:
            self.registry.replace_all(self.database.load_all())
        except DatabaseError as exc:
            self._complain(str(exc))
            self._say("从数据库加载学生信息失败。")
        else:
            self._say("从数据库加载学生信息成功。")
        self._wait()

    def handle_save_to_db(self) -> None:
        """Store every student in memory in the database."""
        count = 0
        for student in self.registry:
            try:
                self.database.save(student)
            except DatabaseError as exc:
                self._complain(str(exc))
            else:
                count += 1
        self._say(f"成功保存 {count} 条学生信息到数据库。")
        self._wait()

    def _shut_down(self) -> None:
        self.registry.clear()
        if self.database.is_open:
            self.database.close()
            self._say("数据库连接已关闭。")

    def run(self) -> None:
        """Show the menu and handle choices until the user exits or input ends."""
        handlers: dict[MenuChoice, Callable[[], None]] = {
            MenuChoice.ADD_STUDENT: self.handle_add,
            MenuChoice.DELETE_STUDENT: self.handle_delete,
            MenuChoice.UPDATE_STUDENT: self.handle_update,
            MenuChoice.FIND_STUDENT: self.handle_find,
            MenuChoice.DISPLAY_ALL_STUDENTS: self.handle_display_all,
            MenuChoice.SAVE_FILE: self.handle_save_file,
            MenuChoice.LOAD_FROM_DB: self.handle_load_from_db,
            MenuChoice.SAVE_TO_DB: self.handle_save_to_db,
        }
        while True:
            self.display_menu()
            try:
                raw = self._input.token()
            except EOFError:
                self._shut_down()
                return
            try:
                choice = MenuChoice(int(raw))
            except ValueError:
                self._say("无效的选择，请重试。")
                continue
            if choice is MenuChoice.EXIT:
                self._shut_down()
                self._say("感谢使用学生信息管理系统！")
                return
            try:
                handlers[choice]()
            except EOFError:
                self._shut_down()
                return
            except ValueError:
                self._say("输入无效，请重试。")


def main(argv: Optional[list[str]] = None) -> int:
    """Open the database, load its students and run the menu."""
    parser = argparse.ArgumentParser(prog="sims", description="学生信息管理系统")
    parser.add_argument("--database", default=DATABASE_PATH, help="SQLite database file")
    parser.add_argument("--data-file", default=DEFAULT_FILENAME, help="binary record file")
    args = parser.parse_args(argv)

    database = StudentDatabase(args.database)
    try:
        database.open()
    except DatabaseError as exc:
        print(exc, file=sys.stderr)
        print("数据库初始化失败，程序退出。", file=sys.stderr)
        return 1
    print("数据库初始化成功。")

    registry = StudentRegistry()
    try:
        registry.replace_all(database.load_all())
    except DatabaseError as exc:
        print(exc, file=sys.stderr)

    StudentApp(registry=registry, database=database, data_file=args.data_file).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())