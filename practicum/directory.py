# practicum/directory.py
"""Модуль базы студентов: загрузка, поиск по предикату и добавление записей."""
from dataclasses import dataclass
from typing import Callable, List, Optional

from .models import Student, sample_students
from .errors import DuplicateKeyError
from . import io_utils

Predicate = Callable[[Student], bool]

@dataclass(frozen=True)
class Query:
    """Условие поиска вместе с заголовком для таблицы результатов."""
    title: str
    predicate: Predicate

    def __call__(self, student: Student) -> bool:
        return self.predicate(student)

def by_id(student_id: int) -> Query:
    return Query(f"SEARCH RESULTS: ID = {student_id}", lambda s: s.id == student_id)

def by_surname(surname: str) -> Query:
    # Точное совпадение с учётом регистра
    return Query(f"SEARCH RESULTS: Surname = {surname}", lambda s: s.surname == surname)

def by_birth_year(year: int) -> Query:
    return Query(f"SEARCH RESULTS: Birth Year = {year}", lambda s: s.birth_year == year)

def by_study_year(year: int) -> Query:
    return Query(f"SEARCH RESULTS: Study Year = {year}", lambda s: s.study_year == year)

def by_gpa_at_least(threshold: float) -> Query:
    return Query(f"SEARCH RESULTS: GPA >= {threshold:.2f}", lambda s: s.gpa >= threshold)

def custom(predicate: Predicate, title: str = "SEARCH RESULTS") -> Query:
    """Произвольная функция записи -> bool как запрос."""
    return Query(title, predicate)


class StudentDirectory:
    """Упорядоченная база студентов, привязанная к файлу.

    Записи только добавляются; каждое успешное добавление сразу
    перезаписывает файл целиком. Одновременная запись из нескольких
    процессов не поддерживается: побеждает последний.
    """
    def __init__(self, path, students: Optional[List[Student]] = None):
        self.path = path
        self._students: List[Student] = list(students or [])

    @classmethod
    def open(cls, path) -> "StudentDirectory":
        """Загружает базу из файла; если записей нет, заполняет примерами (файл не трогает)."""
        students = io_utils.read_students(path)
        if not students:
            students = sample_students()
        return cls(path, students)

    @property
    def records(self) -> List[Student]:
        return list(self._students)

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self):
        return iter(list(self._students))

    def find_by_id(self, student_id: int) -> Optional[Student]:
        """Первая (в порядке добавления) запись с данным ID или None."""
        return next((s for s in self._students if s.id == student_id), None)

    def search(self, predicate: Predicate) -> List[Student]:
        """Все записи, для которых predicate истинен, в порядке базы."""
        return [s for s in self._students if predicate(s)]

    def add(self, candidate: Student) -> Student:
        """Проверяет и добавляет запись, затем сохраняет всю базу в файл.

        Если сохранение не удалось, WriteIOError пробрасывается дальше, а
        запись остаётся в памяти: база в памяти и файл могут разойтись.
        """
        candidate.validate()
        if self.find_by_id(candidate.id) is not None:
            raise DuplicateKeyError(f"Student with ID {candidate.id} already exists")

        self._students.append(candidate)
        io_utils.write_students(self.path, self._students)
        return candidate
