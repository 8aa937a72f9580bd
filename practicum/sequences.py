# practicum/sequences.py
"""Задание 2: арифметическая прогрессия тремя видами циклов (for, while, do-while)."""
from typing import List

from .errors import InputDataError, ValidationError
from .io_utils import read_tokens, write_report
from .prompts import read_float, read_int
from . import settings

def read_initial_value(filepath) -> float:
    """Читает первый член прогрессии A0 из входного файла."""
    tokens = read_tokens(filepath)
    try:
        return float(tokens[0])
    except (IndexError, ValueError):
        raise InputDataError("Invalid data in input file: expected numeric A0 value.")

def for_loop_terms(a0: float, d: float, n: int) -> List[float]:
    terms = []
    for i in range(1, n + 1):
        terms.append(a0 + (i - 1) * d)
    return terms

def while_loop_terms(a0: float, d: float, n: int) -> List[float]:
    terms = []
    i = 1
    while i <= n:
        terms.append(a0 + (i - 1) * d)
        i += 1
    return terms

def do_while_terms(a0: float, d: float, n: int, limit: float = settings.SUM_LIMIT) -> List[float]:
    """Члены прогрессии, пока сумма остаётся строго меньше limit."""
    terms = []
    total = 0.0
    i = 1
    if n <= 0:
        return terms
    while True:
        if i > n:
            break
        term = a0 + (i - 1) * d
        if total + term >= limit:
            break
        terms.append(term)
        total += term
        i += 1
    return terms

def _summary(terms: List[float]) -> List[str]:
    total = sum(terms)
    average = total / len(terms) if terms else 0.0
    return [
        "Sequence terms: " + " ".join(f"{t:g}" for t in terms),
        f"Sum: {total:g}",
        f"Average: {average:g}",
    ]

def sequence_report(a0: float, d: float, n: int, limit: float = settings.SUM_LIMIT) -> List[str]:
    if n < 0:
        raise ValidationError("Error: 'n' cannot be negative")

    lines = ["=== PART 1: FOR LOOP ==="]
    lines += _summary(for_loop_terms(a0, d, n))
    lines += ["", "=== PART 2: WHILE LOOP ==="]
    lines += _summary(while_loop_terms(a0, d, n))
    lines += ["", "=== PART 3: DO...WHILE LOOP ===", f"Sum limit: < {limit:g}"]
    lines += _summary(do_while_terms(a0, d, n, limit))
    return lines

def run_sequences(input_path=settings.SEQUENCE_INPUT, output_path=settings.SEQUENCE_OUTPUT):
    a0 = read_initial_value(input_path)
    n = read_int("Enter n (number of terms): ", "n")
    d = read_float("Enter d (common difference): ", "d")
    lines = sequence_report(a0, d, n)
    write_report(output_path, lines + ["", f"Results saved to {output_path}"])
