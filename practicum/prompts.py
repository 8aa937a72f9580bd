# practicum/prompts.py
"""Чтение значений с клавиатуры с разбором типа."""
from .errors import MalformedInputError

def read_text(prompt: str) -> str:
    return input(prompt).strip()

def read_int(prompt: str, field: str) -> int:
    raw = read_text(prompt)
    try:
        return int(raw)
    except ValueError:
        raise MalformedInputError(f"Invalid input: {field} must be a number.")

def read_float(prompt: str, field: str) -> float:
    raw = read_text(prompt)
    try:
        return float(raw)
    except ValueError:
        raise MalformedInputError(f"Invalid input: {field} must be a number.")
