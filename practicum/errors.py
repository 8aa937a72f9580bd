# practicum/errors.py
"""Модуль для определения пользовательских исключений приложения."""

class PracticumError(Exception):
    """Базовый класс для всех исключений в этом приложении."""
    pass

class ValidationError(PracticumError):
    """Запись или параметр задания выходит за допустимые границы."""
    pass

class DuplicateKeyError(PracticumError):
    """Исключение при попытке добавить студента с уже существующим ID."""
    pass

class MalformedInputError(PracticumError):
    """Ввод оператора не удалось разобрать в ожидаемый тип."""
    pass

class InputDataError(PracticumError):
    """Входной файл задания найден, но его содержимое некорректно или неполно."""
    pass

class FileProcessingError(PracticumError):
    """Исключение, связанное с ошибками файловых операций."""
    pass

class NotFoundIOError(FileProcessingError):
    """Входной файл не найден или не открывается на чтение."""
    pass

class WriteIOError(FileProcessingError):
    """Файл не удалось открыть на запись."""
    pass
