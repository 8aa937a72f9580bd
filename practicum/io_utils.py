# practicum/io_utils.py
"""Модуль для операций ввода/вывода: файл базы студентов и двойной вывод консоль+файл."""
import logging
import sys
from contextlib import ExitStack
from typing import Iterable, List, Optional, TextIO

from .models import Student
from .errors import NotFoundIOError, WriteIOError

def read_students(filepath) -> List[Student]:
    """Читает записи студентов из текстового файла базы.

    Отсутствующий файл не ошибка: пишем предупреждение и возвращаем пустой
    список, вызывающий код сам заполнит базу примерами. Строки, которые не
    разбираются на пять полей, пропускаются молча; разобранные, но
    некорректные записи пропускаются с предупреждением.
    """
    students = []
    try:
        with open(filepath, mode='rb') as file:
            for line_num, raw in enumerate(file, start=1):
                if not raw.strip():
                    continue
                try:
                    # Строки декодируются по одной, битая строка пропускается
                    student = Student.from_line(raw.decode('utf-8'))
                except ValueError as e:
                    logging.debug(f"Строка {line_num} пропущена: {e}")
                    continue

                if student.is_valid():
                    students.append(student)
                else:
                    logging.warning(f"Skipping invalid record (ID: {student.id})")
    except OSError as e:
        logging.warning(f"Database file '{filepath}' not found. Starting fresh. ({e.__class__.__name__})")
        return []

    return students

def write_students(filepath, students: Iterable[Student]):
    """Полностью перезаписывает файл базы текущими записями в порядке их следования."""
    try:
        with open(filepath, mode='w', encoding='utf-8') as file:
            for s in students:
                file.write(s.to_line() + "\n")
    except OSError as e:
        raise WriteIOError(f"Cannot open database file for writing: {filepath} ({e})")

def read_tokens(filepath) -> List[str]:
    """Читает входной файл задания и возвращает все токены, разделённые пробельными символами."""
    try:
        with open(filepath, mode='r', encoding='utf-8') as file:
            return file.read().split()
    except OSError:
        raise NotFoundIOError(f"Input file '{filepath}' not found")


class DualWriter:
    """Пишет одно и то же в консоль и в каждый из заданных файлов.

    Используется как контекстный менеджер: все файлы открываются на входе и
    гарантированно закрываются на выходе, в том числе при исключении.
    """
    def __init__(self, *filepaths, append: bool = False, console: Optional[TextIO] = None):
        self.filepaths = filepaths
        self.append = append
        self._console = console
        self._files: List[TextIO] = []
        self._stack: Optional[ExitStack] = None

    def __enter__(self) -> "DualWriter":
        mode = 'a' if self.append else 'w'
        stack = ExitStack()
        try:
            for path in self.filepaths:
                self._files.append(stack.enter_context(open(path, mode=mode, encoding='utf-8')))
        except OSError as e:
            stack.close()
            self._files = []
            raise WriteIOError(f"Cannot open file: {e.filename or path}")
        self._stack = stack
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._stack is not None:
            self._stack.close()
            self._stack = None
        self._files = []
        return False

    @property
    def console(self) -> TextIO:
        # sys.stdout берём в момент вызова, чтобы работал перехват вывода в тестах
        return self._console if self._console is not None else sys.stdout

    def write(self, text: str) -> "DualWriter":
        self.console.write(text)
        for file in self._files:
            file.write(text)
        return self

    def line(self, text: str = "") -> "DualWriter":
        return self.write(text + "\n")

    def lines(self, lines: Iterable[str]) -> "DualWriter":
        for text in lines:
            self.line(text)
        return self


def write_report(filepath, lines: Iterable[str], append: bool = False):
    """Выводит строки отчёта в консоль и в файл."""
    with DualWriter(filepath, append=append) as output:
        output.lines(lines)
