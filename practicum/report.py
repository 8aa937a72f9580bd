# practicum/report.py
"""Форматирование таблицы студентов и её вывод в консоль и накопительный файл отчёта."""
import logging
from typing import List, Sequence

from .models import Student
from .errors import WriteIOError
from .io_utils import DualWriter
from . import settings

TABLE_WIDTH = 60

def format_table(records: Sequence[Student], title: str) -> List[str]:
    """Строки таблицы: баннер с заголовком, шапка, записи и итоговое количество."""
    lines = [
        "",
        "=" * TABLE_WIDTH,
        f"=== {title} ===",
        "=" * TABLE_WIDTH,
        f"{'ID':>6} | {'Surname':>15} | {'Birth Year':>11} | {'Year':>5} | {'GPA':>6}",
        "-" * TABLE_WIDTH,
    ]
    for s in records:
        lines.append(f"{s.id:>6} | {s.surname:>15} | {s.birth_year:>11} | {s.study_year:>5} | {s.gpa:>6.2f}")
    lines.append("=" * TABLE_WIDTH)
    lines.append(f"Total records: {len(records)}")
    return lines

def render_table(records: Sequence[Student], title: str, report_path=settings.OUTPUT_FILE) -> int:
    """Печатает таблицу и дописывает её в файл отчёта. Возвращает число выведенных записей.

    Пустой набор ничего не выводит и файл не трогает.
    """
    if not records:
        return 0

    try:
        with DualWriter(report_path, append=True) as output:
            output.lines(format_table(records, title))
    except WriteIOError as e:
        logging.error(f"Error writing to output file: {e}")
    return len(records)
