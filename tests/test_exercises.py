# tests/test_exercises.py
import pytest
from practicum.arithmetic import arithmetic_report, run_arithmetic
from practicum.arrays import array_report, find_positions, read_integers, run_arrays, selection_sort
from practicum.fibonacci import FibonacciCalculator, fibonacci_report, run_fibonacci
from practicum.sequences import (
    do_while_terms, for_loop_terms, read_initial_value, run_sequences, sequence_report, while_loop_terms,
)
from practicum.errors import InputDataError, MalformedInputError, NotFoundIOError, ValidationError

def test_arithmetic_report():
    lines = arithmetic_report(7, 2)
    assert "A + B = 9" in lines
    assert "A - B = 5" in lines
    assert "A * B = 14" in lines
    assert "A / B = 3.5" in lines
    assert "A++: 7 (now: 8)" in lines
    assert "B--: 2 (now: 1)" in lines

def test_arithmetic_division_by_zero():
    assert "A / B = Error (Division by zero)" in arithmetic_report(1.5, 0)

def test_run_arithmetic_writes_file(feed_input, tmp_path, capsys):
    out = tmp_path / "out.txt"
    feed_input(['3', '4'])
    run_arithmetic(out)
    assert "A * B = 12" in out.read_text(encoding="utf-8")
    assert "A * B = 12" in capsys.readouterr().out

def test_run_arithmetic_rejects_text(feed_input, tmp_path):
    feed_input(['three', '4'])
    with pytest.raises(MalformedInputError):
        run_arithmetic(tmp_path / "out.txt")

def test_loop_variants_agree():
    assert for_loop_terms(1, 2, 4) == [1, 3, 5, 7]
    assert while_loop_terms(1, 2, 4) == for_loop_terms(1, 2, 4)
    assert for_loop_terms(1, 2, 0) == []

def test_do_while_stops_before_limit():
    # 10 + 20 + 30 + 40 = 100, следующий член 50 довёл бы сумму до 150
    assert do_while_terms(10, 10, 10, 120.0) == [10, 20, 30, 40]
    assert do_while_terms(10, 10, 0, 120.0) == []
    assert do_while_terms(200, 1, 3, 120.0) == []

def test_sequence_report():
    lines = sequence_report(1, 1, 3)
    assert lines[0] == "=== PART 1: FOR LOOP ==="
    assert "Sequence terms: 1 2 3" in lines
    assert "Sum: 6" in lines
    assert "Average: 2" in lines
    assert "Average: 0" in sequence_report(200, 1, 2)

def test_sequence_report_negative_n():
    with pytest.raises(ValidationError):
        sequence_report(1, 1, -1)

def test_read_initial_value(tmp_path):
    path = tmp_path / "input_task2.txt"
    path.write_text("2.5\n", encoding="utf-8")
    assert read_initial_value(path) == 2.5

    path.write_text("abc", encoding="utf-8")
    with pytest.raises(InputDataError):
        read_initial_value(path)
    with pytest.raises(NotFoundIOError):
        read_initial_value(tmp_path / "absent.txt")

def test_run_sequences(feed_input, tmp_path, capsys):
    source, out = tmp_path / "in.txt", tmp_path / "out.txt"
    source.write_text("5", encoding="utf-8")
    feed_input(['3', '5'])
    run_sequences(source, out)
    assert "Sequence terms: 5 10 15" in out.read_text(encoding="utf-8")

def test_find_positions_and_sort():
    assert find_positions([4, 1, 4, 3], 4) == [0, 2]
    assert find_positions([4, 1], 9) == []
    assert selection_sort([5, -1, 3, 3, 0]) == [-1, 0, 3, 3, 5]
    assert selection_sort([]) == []

def test_read_integers(tmp_path):
    path = tmp_path / "input_task4.txt"
    path.write_text("3 1 2\n7 end 9", encoding="utf-8")
    assert read_integers(path) == [3, 1, 2, 7]

    path.write_text("", encoding="utf-8")
    with pytest.raises(InputDataError):
        read_integers(path)

def test_array_report():
    lines = array_report([5, 3, 5, 1], 10, 5)
    assert lines[1] == "Original:    5    3    5    1 "
    assert lines[2] == "Sorted:    1    3    5    5 "
    assert "Found at: 0 2" in lines
    assert "Array size: 4" in lines
    assert "Occurrences found: 2" in lines
    assert "Found at: Not found" in array_report([5, 3], 2, 8)

def test_array_report_invalid_n():
    with pytest.raises(ValidationError):
        array_report([1, 2], 0, 1)

def test_run_arrays(feed_input, tmp_path, capsys):
    source, out = tmp_path / "in.txt", tmp_path / "out.txt"
    source.write_text("9 8 7 8", encoding="utf-8")
    feed_input(['3', '8'])
    run_arrays(source, out)
    content = out.read_text(encoding="utf-8")
    assert "Array size: 3" in content
    assert "Found at: 1" in content

def test_fibonacci_values():
    fib = FibonacciCalculator()
    assert [fib.compute(i) for i in range(8)] == [0, 1, 1, 2, 3, 5, 8, 13]
    assert fib.compute(90) == 2880067194370816120

def test_fibonacci_cache_is_per_instance():
    first, second = FibonacciCalculator(), FibonacciCalculator()
    first.compute(30)
    assert first.cache_size > 0
    assert second.cache_size == 0
    first.clear_cache()
    assert first.cache_size == 0

@pytest.mark.parametrize("n", [-1, 101])
def test_fibonacci_bounds(n):
    with pytest.raises(ValidationError):
        FibonacciCalculator().compute(n)

def test_fibonacci_report():
    lines = fibonacci_report(5)
    assert lines[0] == "=== FIBONACCI SEQUENCE (F(0) to F(5)) ==="
    assert "F(5) = 5" in lines
    assert "Total terms: 6" in lines
    assert "Sum of sequence: 12" in lines
    assert "Last term F(5): 5" in lines

def test_run_fibonacci_negative_writes_nothing(feed_input, tmp_path):
    out = tmp_path / "fib.txt"
    feed_input(['-3'])
    with pytest.raises(ValidationError):
        run_fibonacci(out)
    assert not out.exists()
