# practicum/arithmetic.py
"""Задание 1: арифметические операции и постфиксный инкремент/декремент."""
from typing import List

from .io_utils import write_report
from .prompts import read_float
from . import settings

def arithmetic_report(a: float, b: float) -> List[str]:
    """Строки отчёта по двум числам A и B."""
    lines = [
        "--- Arithmetic Operations ---",
        f"A + B = {a + b:g}",
        f"A - B = {a - b:g}",
        f"A * B = {a * b:g}",
    ]
    if b != 0.0:
        lines.append(f"A / B = {a / b:g}")
    else:
        lines.append("A / B = Error (Division by zero)")

    lines.append("")
    lines.append("--- Increment/Decrement (Postfix) ---")
    # x++ возвращает старое значение, после чего x становится x + 1
    for label, value, step in (("A++", a, 1), ("B++", b, 1), ("A--", a, -1), ("B--", b, -1)):
        lines.append(f"{label}: {value:g} (now: {value + step:g})")
    return lines

def run_arithmetic(output_path=settings.ARITHMETIC_OUTPUT):
    a = read_float("Enter value A: ", "A")
    b = read_float("Enter value B: ", "B")
    write_report(output_path, arithmetic_report(a, b) + ["", f"Results saved to {output_path}"])
