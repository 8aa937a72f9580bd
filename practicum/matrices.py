# practicum/matrices.py
"""Задания 3 и 5: поэлементные операции над матрицами на pandas.DataFrame."""
from typing import List, Tuple

import pandas as pd

from .errors import InputDataError, MalformedInputError
from .io_utils import DualWriter, read_tokens
from .prompts import read_int, read_text
from . import settings

OPERATIONS = ('+', '-', '*', '/')

def read_matrices(filepath, shape: Tuple[int, int], dtype=float) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """Читает две матрицы подряд из потока чисел во входном файле (сначала A, потом B)."""
    rows, cols = shape
    size = rows * cols
    tokens = read_tokens(filepath)

    matrices = []
    for label, chunk in (("A", tokens[:size]), ("B", tokens[size:2 * size])):
        if len(chunk) < size:
            raise InputDataError(f"Insufficient data in input file for matrix {label}")
        try:
            values = [dtype(token) for token in chunk]
        except ValueError:
            raise InputDataError(f"Error reading matrix {label} data from file")
        matrices.append(pd.DataFrame([values[r * cols:(r + 1) * cols] for r in range(rows)]))
    return matrices[0], matrices[1]

def _is_integer(frame: pd.DataFrame) -> bool:
    return all(pd.api.types.is_integer_dtype(t) for t in frame.dtypes)

def elementwise(a: pd.DataFrame, b: pd.DataFrame, op: str) -> pd.DataFrame:
    """Поэлементная операция. Деление на ноль даёт 0, целые делятся с отбрасыванием дробной части."""
    if op == '+':
        return a + b
    if op == '-':
        return a - b
    if op == '*':
        return a * b
    if op == '/':
        nonzero = b != 0
        result = a / b.where(nonzero, 1)
        if _is_integer(a) and _is_integer(b):
            result = result.astype("int64")
        return result.where(nonzero, 0)
    raise MalformedInputError(f"Invalid operation: {op}")

def max_elementwise(a: pd.DataFrame, b: pd.DataFrame) -> pd.DataFrame:
    return a.where(a > b, b)

def min_max(a: pd.DataFrame, b: pd.DataFrame, choice: int) -> Tuple[str, float]:
    """1: max A, 2: min A, 3: max B, 4: min B."""
    if choice not in (1, 2, 3, 4):
        raise MalformedInputError("Invalid choice: must be 1-4")
    target = a if choice < 3 else b
    if choice % 2 == 1:
        return "Maximum", target.max().max()
    return "Minimum", target.min().min()

def format_matrix(frame: pd.DataFrame, width: int = 8, precision: int = 2) -> List[str]:
    """Строки матрицы с выравниванием вправо; для целых матриц precision не используется."""
    lines = []
    integer = _is_integer(frame)
    for row in frame.itertuples(index=False):
        if integer:
            lines.append("".join(f"{value:>{width}} " for value in row))
        else:
            lines.append("".join(f"{value:>{width}.{precision}f}" for value in row))
    return lines

def matrix_report(a: pd.DataFrame, b: pd.DataFrame) -> List[str]:
    """Отчёт задания 3: обе матрицы, четыре операции, поэлементный максимум и его транспонирование."""
    lines = ["--- Array 1 ---"] + format_matrix(a)
    lines += ["", "--- Array 2 ---"] + format_matrix(b)
    for title, op in (("Sum (+)", '+'), ("Diff (-)", '-'), ("Mult (*)", '*'), ("Div (/)", '/')):
        lines += ["", f"--- {title} ---"] + format_matrix(elementwise(a, b, op))

    maximum = max_elementwise(a, b)
    rows, cols = maximum.shape
    lines += ["", "--- Max Elements ---"] + format_matrix(maximum)
    lines += ["", f"--- Transposed Max Array ({cols}x{rows}) ---"] + format_matrix(maximum.T)
    return lines

def operation_report(a: pd.DataFrame, b: pd.DataFrame, op: str, choice: int = 0) -> List[str]:
    """Одна операция задания 5: '+', '-', '*', '/' или 'm' (минимум/максимум по choice)."""
    lines = [f"Operator: {op}"]
    if op in ('m', 'M'):
        label, value = min_max(a, b, choice)
        lines += ["", f"{label} value: {value}"]
    else:
        lines += ["", "Result:"] + format_matrix(elementwise(a, b, op), width=5)
    return lines

def run_matrix_task(input_path=settings.MATRIX_INPUT, output_path=settings.MATRIX_OUTPUT):
    a, b = read_matrices(input_path, settings.MATRIX_SHAPE, float)
    with DualWriter(output_path) as output:
        output.lines(matrix_report(a, b))
        output.lines(["", f"Task 3 completed. Results saved to '{output_path}'"])

def run_matrix_operations(input_path=settings.INT_MATRIX_INPUT, output_path=settings.INT_MATRIX_OUTPUT):
    """Интерактивная часть задания 5: три операции над целыми матрицами 2x5."""
    a, b = read_matrices(input_path, settings.INT_MATRIX_SHAPE, int)
    total = settings.MATRIX_OPERATIONS
    with DualWriter(output_path) as output:
        output.line("========== MATRIX OPERATIONS ==========")
        output.lines(["", "Array 1:"] + format_matrix(a, width=5))
        output.lines(["", "Array 2:"] + format_matrix(b, width=5))

        for iteration in range(1, total + 1):
            op = read_text(f"\nOperation {iteration}/{total} (+, -, *, /, m for min/max): ")
            if op not in OPERATIONS and op not in ('m', 'M'):
                raise MalformedInputError(f"Invalid operation: {op}")
            choice = 0
            if op in ('m', 'M'):
                choice = read_int("Select (1:max A, 2:min A, 3:max B, 4:min B): ", "choice")
            output.lines(["", f"--- Operation {iteration} ---"])
            output.lines(operation_report(a, b, op, choice))

        output.lines(["", "========== TASK COMPLETED =========="])
