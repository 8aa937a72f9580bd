# practicum/settings.py
"""Фиксированные пути к файлам и константы заданий."""
import logging

# --- КОНФИГУРАЦИЯ ---
LOG_LEVEL = logging.WARNING

# Задание 6: база студентов
DB_FILE = "students_database.txt"
OUTPUT_FILE = "output_students.txt"

# Задание 1
ARITHMETIC_OUTPUT = "output_task1.txt"

# Задание 2
SEQUENCE_INPUT = "input_task2.txt"
SEQUENCE_OUTPUT = "output_task2.txt"
SUM_LIMIT = 120.0

# Задание 3
MATRIX_INPUT = "input_task3.txt"
MATRIX_OUTPUT = "output_task3.txt"
MATRIX_SHAPE = (4, 3)

# Задание 4
ARRAY_INPUT = "input_task4.txt"
ARRAY_OUTPUT = "output_task4.txt"

# Задание 5
FIBONACCI_OUTPUT = "output_fibonacci.txt"
FIBONACCI_MAX_N = 100
INT_MATRIX_INPUT = "input_arrays.txt"
INT_MATRIX_OUTPUT = "output_matrix_operations.txt"
INT_MATRIX_SHAPE = (2, 5)
MATRIX_OPERATIONS = 3
