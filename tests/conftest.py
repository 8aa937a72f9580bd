# tests/conftest.py
import pytest
from typing import List
from practicum.models import Student, sample_students as make_sample_students

@pytest.fixture
def sample_students() -> List[Student]:
    """Фикстура, предоставляющая пять записей, которыми заполняется пустая база."""
    return make_sample_students()

@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "students_database.txt"

@pytest.fixture
def report_path(tmp_path):
    return tmp_path / "output_students.txt"

@pytest.fixture
def feed_input(monkeypatch):
    """Подменяет input() последовательностью ответов; по окончании бросает EOFError."""
    def _feed(answers):
        sequence = iter(answers)

        def mock_input(prompt=""):
            try:
                return next(sequence)
            except StopIteration:
                raise EOFError
        monkeypatch.setattr('builtins.input', mock_input)
    return _feed
