# practicum/arrays.py
"""Задание 4: линейный поиск и сортировка целочисленного массива из файла."""
from typing import List, Sequence

from .errors import InputDataError, ValidationError
from .io_utils import read_tokens, write_report
from .prompts import read_int
from . import settings

def read_integers(filepath) -> List[int]:
    """Читает целые числа из файла до первого токена, который не является целым."""
    values = []
    for token in read_tokens(filepath):
        try:
            values.append(int(token))
        except ValueError:
            break
    if not values:
        raise InputDataError("Input file is empty")
    return values

def find_positions(values: Sequence[int], key: int) -> List[int]:
    """Линейный поиск: все индексы, где встречается key."""
    return [i for i, value in enumerate(values) if value == key]

def selection_sort(values: Sequence[int]) -> List[int]:
    """Сортировка выбором, возвращает новый список."""
    result = list(values)
    n = len(result)
    for i in range(n - 1):
        min_idx = i
        for j in range(i + 1, n):
            if result[j] < result[min_idx]:
                min_idx = j
        result[i], result[min_idx] = result[min_idx], result[i]
    return result

def format_array(values: Sequence[int], label: str) -> str:
    return f"{label}: " + "".join(f"{v:>4} " for v in values)

def array_report(values: Sequence[int], n: int, key: int) -> List[str]:
    n = min(n, len(values))
    if n <= 0:
        raise ValidationError("Invalid n: must be greater than 0")

    original = list(values[:n])
    positions = find_positions(original, key)
    found = " ".join(str(p) for p in positions) if positions else "Not found"
    return [
        "========== ARRAY OPERATIONS ==========",
        format_array(original, "Original"),
        format_array(sorted(original), "Sorted"),
        f"Search key: {key}",
        f"Found at: {found}",
        "========== STATISTICS ==========",
        f"Array size: {n}",
        f"Occurrences found: {len(positions)}",
    ]

def run_arrays(input_path=settings.ARRAY_INPUT, output_path=settings.ARRAY_OUTPUT):
    values = read_integers(input_path)
    n = read_int(f"File has {len(values)} numbers. Enter n to use: ", "n")
    key = read_int("Search key: ", "search key")
    write_report(output_path, array_report(values, n, key))
