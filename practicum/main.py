# practicum/main.py
"""Главный модуль: меню заданий и консольный интерфейс (CLI) базы студентов."""
import argparse
import logging
import sys
from typing import Optional

from . import directory as queries
from . import errors, report, settings
from .arithmetic import run_arithmetic
from .arrays import run_arrays
from .directory import StudentDirectory
from .fibonacci import run_fibonacci
from .matrices import run_matrix_operations, run_matrix_task
from .models import Student
from .prompts import read_float, read_int, read_text
from .sequences import run_sequences

EXIT_CHOICE = 8

def print_menu():
    """Выводит на экран меню базы студентов."""
    print("\n" + "=" * 50)
    print("=== STUDENT DATABASE MENU ===")
    print("=" * 50)
    print("1. Search by ID")
    print("2. Search by Surname")
    print("3. Search by Birth Year")
    print("4. Search by Study Year")
    print("5. Search by GPA (>= threshold)")
    print("6. Add New Student")
    print("7. Display All Students")
    print("8. Exit")
    print("=" * 50)

def read_choice(prompt: str, low: int, high: int) -> int:
    raw = read_text(prompt)
    try:
        choice = int(raw)
    except ValueError:
        raise errors.MalformedInputError(f"Invalid input: Please enter a number {low}-{high}.")
    if not low <= choice <= high:
        raise errors.MalformedInputError(f"Invalid choice: Please select an option {low}-{high}.")
    return choice

def read_query(choice: int) -> queries.Query:
    """Собирает у оператора значение для поиска и строит соответствующий запрос."""
    if choice == 1:
        return queries.by_id(read_int("Enter student ID: ", "ID"))
    if choice == 2:
        surname = read_text("Enter surname to search: ")
        if not surname:
            raise errors.MalformedInputError("Error: Surname cannot be empty.")
        return queries.by_surname(surname)
    if choice == 3:
        return queries.by_birth_year(read_int("Enter birth year: ", "Birth year"))
    if choice == 4:
        return queries.by_study_year(read_int("Enter study year: ", "Study year"))
    return queries.by_gpa_at_least(read_float("Enter minimum GPA: ", "GPA"))

def show_results(db: StudentDirectory, query: queries.Query, report_path=settings.OUTPUT_FILE):
    results = db.search(query)
    if not results:
        print("ℹ️ No records found matching criteria.")
        return
    report.render_table(results, query.title, report_path)

def read_student() -> Student:
    """Запрашивает поля новой записи; ошибка разбора прерывает только эту операцию."""
    print("\n=== ADD NEW STUDENT ===")
    student_id = read_int("Enter ID: ", "ID")
    surname = read_text("Enter Surname: ")
    if not surname:
        raise errors.MalformedInputError("Error: Surname cannot be empty.")
    birth_year = read_int("Enter Birth Year (1950-2015): ", "Birth year")
    study_year = read_int("Enter Study Year (1-4): ", "Study year")
    gpa = read_float("Enter GPA (0.0-5.0): ", "GPA")
    return Student(student_id, surname, birth_year, study_year, gpa)

def student_cli(db: Optional[StudentDirectory] = None, db_path=settings.DB_FILE,
                report_path=settings.OUTPUT_FILE):
    """Основной цикл базы студентов: меню, выбор, действие, снова меню."""
    if db is None:
        db = StudentDirectory.open(db_path)

    print("\n========== STUDENT DATABASE SYSTEM ==========")
    print(f"Total students loaded: {len(db)}")

    while True:
        print_menu()
        try:
            choice = read_choice(f"Enter choice (1-{EXIT_CHOICE}): ", 1, EXIT_CHOICE)

            if choice == EXIT_CHOICE:
                print("👋 Exiting student database system. Goodbye!")
                break

            elif choice == 6:
                student = db.add(read_student())
                print(f"✅ Student record {student.id} added successfully.")

            elif choice == 7:
                if not len(db):
                    print("ℹ️ Database is empty.")
                else:
                    report.render_table(db.records, "ALL STUDENTS", report_path)

            else:
                show_results(db, read_query(choice), report_path)

        except EOFError:
            print("\n👋 Input closed. Goodbye!")
            break
        except errors.FileProcessingError as e:
            print(f"❌ File Error: {e}")
        except errors.PracticumError as e:
            print(f"❌ {e}")
        except Exception as e:
            print(f"❌ Unexpected error: {e}")

def run_fibonacci_and_matrices():
    """Задание 5: ошибка в части про Фибоначчи не отменяет операции над матрицами."""
    for part in (run_fibonacci, run_matrix_operations):
        try:
            part()
        except errors.PracticumError as e:
            print(f"❌ Task 5 Error: {e}")

TASKS = {
    1: ("Arithmetic operations", run_arithmetic),
    2: ("Loops: for / while / do-while", run_sequences),
    3: ("Matrix element-wise operations", run_matrix_task),
    4: ("Array search and sort", run_arrays),
    5: ("Fibonacci and matrix operations", run_fibonacci_and_matrices),
    6: ("Student database", student_cli),
}

def print_task_menu():
    print("\n" + "=" * 30)
    print("      PRACTICUM TASKS")
    print("=" * 30)
    for number, (title, _) in TASKS.items():
        print(f"{number}. {title}")
    print("0. Exit")
    print("=" * 30)

def run_task(number: int) -> bool:
    """Выполняет одно задание. Возвращает False, если задание завершилось ошибкой."""
    title, task = TASKS[number]
    print(f"EXECUTING TASK {number}: {title}")
    try:
        task()
    except errors.PracticumError as e:
        print(f"❌ Task {number} Error: {e}")
        return False
    return True

def task_menu():
    while True:
        print_task_menu()
        try:
            choice = read_choice(f"Select task (0-{len(TASKS)}): ", 0, len(TASKS))
        except errors.MalformedInputError as e:
            print(f"❌ {e}")
            continue
        except EOFError:
            break

        if choice == 0:
            print("👋 До свидания!")
            break
        run_task(choice)

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="practicum", description="Учебные задания 1-6.")
    parser.add_argument("task", nargs="?", type=int, choices=sorted(TASKS),
                        help="номер задания; без аргумента показывается меню")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.LOG_LEVEL, format="%(levelname)s: %(message)s")

    try:
        if args.task is None:
            task_menu()
            return 0
        return 0 if run_task(args.task) else 1
    except KeyboardInterrupt:
        print("\nПрограмма принудительно остановлена.")
        return 130
    except Exception:
        logging.exception("Критическая ошибка")
        return 1

if __name__ == '__main__':
    sys.exit(main())
