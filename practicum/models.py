# practicum/models.py
"""Модуль, определяющий основные модели данных, такие как Student."""
from typing import List

from .errors import ValidationError

BIRTH_YEAR_RANGE = (1950, 2015)
STUDY_YEAR_RANGE = (1, 4)
GPA_RANGE = (0.0, 5.0)

def _is_int(value) -> bool:
    # bool - подкласс int, но не годится как ID или год
    return isinstance(value, int) and not isinstance(value, bool)

class Student:
    """Представляет запись студента: ID, фамилия, год рождения, курс и средний балл.

    Конструктор ничего не проверяет: некорректную запись можно создать,
    чтобы загрузчик и add() могли её отклонить через is_valid()/validate().
    """
    def __init__(self, student_id: int, surname: str, birth_year: int,
                 study_year: int, gpa: float):
        self.id = student_id
        self.surname = surname
        self.birth_year = birth_year
        self.study_year = study_year
        self.gpa = gpa

    def problems(self) -> List[str]:
        """Возвращает список нарушенных ограничений (пустой, если запись корректна)."""
        errors = []
        if not _is_int(self.id) or self.id <= 0:
            errors.append(f"ID должен быть положительным целым числом, получено {self.id!r}")
        if not isinstance(self.surname, str) or not self.surname.strip():
            errors.append("Фамилия не может быть пустой")
        elif len(self.surname.split()) != 1:
            # Формат файла разделён пробелами, иначе запись не прочитается обратно.
            errors.append(f"Фамилия не должна содержать пробелов: {self.surname!r}")

        low, high = BIRTH_YEAR_RANGE
        if not _is_int(self.birth_year) or not low <= self.birth_year <= high:
            errors.append(f"Год рождения {self.birth_year} вне диапазона {low}-{high}")
        low, high = STUDY_YEAR_RANGE
        if not _is_int(self.study_year) or not low <= self.study_year <= high:
            errors.append(f"Курс {self.study_year} вне диапазона {low}-{high}")
        low, high = GPA_RANGE
        if isinstance(self.gpa, bool) or not isinstance(self.gpa, (int, float)) or not low <= self.gpa <= high:
            errors.append(f"Средний балл {self.gpa} вне диапазона {low}-{high}")
        return errors

    def is_valid(self) -> bool:
        return not self.problems()

    def validate(self) -> None:
        """Бросает ValidationError с описанием первого нарушенного ограничения."""
        errors = self.problems()
        if errors:
            raise ValidationError(f"Некорректная запись (ID: {self.id}): {errors[0]}")

    def to_line(self) -> str:
        """Строка для файла базы: поля через пробел, балл с одним знаком после запятой."""
        return f"{self.id} {self.surname} {self.birth_year} {self.study_year} {self.gpa:.1f}"

    @classmethod
    def from_line(cls, line: str) -> "Student":
        """Разбирает строку файла базы. Бросает ValueError, если полей не пять или типы не те."""
        tokens = line.split()
        if len(tokens) != 5:
            raise ValueError(f"ожидалось 5 полей, получено {len(tokens)}")
        student_id, surname, birth_year, study_year, gpa = tokens
        return cls(int(student_id), surname, int(birth_year), int(study_year), float(gpa))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return (self.id, self.surname, self.birth_year, self.study_year, self.gpa) == \
            (other.id, other.surname, other.birth_year, other.study_year, other.gpa)

    def __repr__(self) -> str:
        """Возвращает строковое представление объекта для отладки."""
        return (f"Student(id={self.id}, surname='{self.surname}', birth_year={self.birth_year}, "
                f"study_year={self.study_year}, gpa={self.gpa:.2f})")

    def __str__(self) -> str:
        """Возвращает удобное для пользователя строковое представление объекта."""
        return (f"ID: {self.id:<4} | Surname: {self.surname:<15} | Born: {self.birth_year} | "
                f"Year: {self.study_year} | GPA: {self.gpa:.2f}")


def sample_students() -> List[Student]:
    """Пять фиксированных записей для пустой базы."""
    return [
        Student(101, "Ivanov", 2005, 1, 4.5),
        Student(102, "Petrov", 2004, 2, 3.8),
        Student(103, "Sidorov", 2006, 1, 4.2),
        Student(104, "Sokolov", 2003, 3, 3.9),
        Student(105, "Kozlov", 2004, 2, 3.6),
    ]
