# practicum/fibonacci.py
"""Задание 5, часть 1: числа Фибоначчи с мемоизацией."""
from typing import Dict, List, Optional

from .errors import ValidationError
from .io_utils import write_report
from .prompts import read_int
from . import settings

class FibonacciCalculator:
    """Считает F(n) с кэшем, который принадлежит конкретному экземпляру."""
    def __init__(self, max_n: int = settings.FIBONACCI_MAX_N):
        self.max_n = max_n
        self._memo: Dict[int, int] = {}

    def compute(self, n: int) -> int:
        if n < 0:
            raise ValidationError("Fibonacci index cannot be negative")
        if n > self.max_n:
            raise ValidationError(f"Fibonacci index too large (max: {self.max_n})")
        if n <= 1:
            return n
        if n not in self._memo:
            self._memo[n] = self.compute(n - 1) + self.compute(n - 2)
        return self._memo[n]

    def clear_cache(self):
        self._memo.clear()

    @property
    def cache_size(self) -> int:
        return len(self._memo)

def fibonacci_report(n: int, calculator: Optional[FibonacciCalculator] = None) -> List[str]:
    calculator = calculator or FibonacciCalculator()
    values = [calculator.compute(i) for i in range(n + 1)]

    lines = [f"=== FIBONACCI SEQUENCE (F(0) to F({n})) ==="]
    lines += [f"F({i}) = {value}" for i, value in enumerate(values)]
    lines += [
        "",
        "=== STATISTICS ===",
        f"Total terms: {n + 1}",
        f"Sum of sequence: {sum(values)}",
        f"Last term F({n}): {calculator.compute(n)}",
    ]
    return lines

def run_fibonacci(output_path=settings.FIBONACCI_OUTPUT):
    n = read_int(f"Enter n (0-{settings.FIBONACCI_MAX_N}): ", "n")
    lines = fibonacci_report(n)
    write_report(output_path, lines)
