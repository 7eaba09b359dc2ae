"""
Иерархия исключений numkit

Все ошибки поднимаются синхронно в точке обнаружения: без частичных
результатов и без внутренних повторов. Каждый класс дополнительно наследует
подходящее встроенное исключение, поэтому вызывающий код может ловить
ValueError / ZeroDivisionError как обычно.
"""


class NumericError(Exception):
    """Базовый класс всех ошибок numkit."""


class ParseError(NumericError, ValueError):
    """Нечисловой ввод там, где число обязательно."""


class DivisionByZeroError(NumericError, ZeroDivisionError):
    """Деление (или взятие остатка) на ноль."""


class InvalidArgumentError(NumericError, ValueError):
    """
    Недопустимый аргумент.

    Примеры: отрицательное число знаков, корень нулевой степени,
    percentile вне [0, 100], отрицательные или нулевые в сумме ratios.
    """


class EmptyInputError(NumericError, ValueError):
    """Агрегатная функция вызвана без значений."""


class DomainError(NumericError, ValueError):
    """
    Аргумент вне области определения функции.

    Примеры: корень чётной степени из отрицательного числа,
    логарифм неположительного числа.
    """
