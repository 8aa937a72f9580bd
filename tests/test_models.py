# tests/test_models.py
import pytest
from practicum.models import Student
from practicum.errors import ValidationError

def test_student_creation():
    s = Student(1, "Testov", 2000, 2, 3.5)
    assert s.id == 1
    assert s.surname == "Testov"
    assert s.birth_year == 2000
    assert s.study_year == 2
    assert s.gpa == 3.5
    assert s.is_valid()

@pytest.mark.parametrize("fields", [
    (1, "Edge", 1950, 1, 0.0),
    (1, "Edge", 2015, 4, 5.0),
])
def test_in_bounds_values_accepted(fields):
    assert Student(*fields).is_valid()

@pytest.mark.parametrize("fields", [
    (0, "Edge", 2000, 1, 4.0),
    (1, "", 2000, 1, 4.0),
    (1, "Edge", 1949, 1, 4.0),
    (1, "Edge", 2016, 1, 4.0),
    (1, "Edge", 2000, 0, 4.0),
    (1, "Edge", 2000, 5, 4.0),
    (1, "Edge", 2000, 1, -0.01),
    (1, "Edge", 2000, 1, 5.01),
])
def test_out_of_bounds_values_rejected(fields):
    s = Student(*fields)
    assert not s.is_valid()
    with pytest.raises(ValidationError):
        s.validate()

def test_surname_with_space_rejected():
    assert not Student(1, "Van Dyke", 2000, 1, 4.0).is_valid()

def test_line_format():
    s = Student(7, "Orlov", 2001, 3, 4.3)
    assert s.to_line() == "7 Orlov 2001 3 4.3"
    assert Student.from_line("7 Orlov 2001 3 4.30") == s

@pytest.mark.parametrize("line", ["7 Orlov 2001 3", "x Orlov 2001 3 4.0", "7 Orlov 2001 3 4.0 extra"])
def test_from_line_rejects_malformed(line):
    with pytest.raises(ValueError):
        Student.from_line(line)

def test_student_str_representation(capsys):
    s = Student(5, "Kotova", 2003, 2, 4.75)
    print(s)
    captured = capsys.readouterr()
    assert "ID: 5" in captured.out
    assert "Kotova" in captured.out
    assert "4.75" in captured.out

@pytest.mark.parametrize("fields", [
    (True, "Flag", 2000, 1, 4.0),
    (1, "Flag", 2000, True, 4.0),
    (1, "Flag", 2000, 1, True),
])
def test_bool_fields_rejected(fields):
    assert not Student(*fields).is_valid()
