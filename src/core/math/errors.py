"""
Errors — таксономия ошибок движка бесконечных целых

Три категории ошибок, различаемые вызывающим кодом:
- ArithmeticUndefinedError: результат не определён в целых числах
  (проекция sentinel в native-ширину, дробный результат, простота 1)
- WillNotFitError: превышена ёмкость при рендеринге строки
- IntegerFormatError: текст или байтовая форма не разбираются

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пропагация sentinel (NaN/±∞) предпочтительнее исключения
2. Исключения не используются для управления потоком внутри алгоритмов
3. Сообщения содержат значение, вызвавшее ошибку
"""


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InfiniteIntegerError(Exception):
    """Базовое исключение для всех ошибок бесконечных целых."""

    pass


class ArithmeticUndefinedError(InfiniteIntegerError, ArithmeticError):
    """
    Результат операции не определён в целых числах.

    Примеры:
    - int_value() для NaN или ±∞
    - power() с отрицательной степенью (дробный результат)
    - is_prime() для 1, отрицательных значений и sentinel
    - long_value_exact() для значения шире signed 64-bit
    """

    pass


class WillNotFitError(InfiniteIntegerError):
    """Результат рендеринга превысил бы максимальную длину строки."""

    pass


class IntegerFormatError(InfiniteIntegerError, ValueError):
    """Текстовая или байтовая форма не может быть разобрана."""

    pass


class InvalidRadixError(IntegerFormatError):
    """Основание системы счисления вне допустимого диапазона [1, 62]."""

    pass
