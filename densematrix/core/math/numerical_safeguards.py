"""
Numerical Safeguards — Float Primitives для матричных операций

Модуль собирает скалярные примитивы, на которые опирается Matrix:
- Epsilon-параметры сравнений (единственное место настройки толерантностей)
- Проверка валидности float (NaN/Inf)
- Проверка "является ли значение скаляром" для входных данных
- Epsilon-сравнения float

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Точное сравнение (==) — поведение по умолчанию для equals/is_identity
2. Приближённые сравнения используются только там, где их явно запросили
3. DETERMINANT_ZERO_EPS = 0.0: inverse() отвергает только точный ноль
4. Все операции детерминированы и воспроизводимы
"""

import math
from numbers import Real
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для is_close / Matrix.is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для is_close / Matrix.is_close
# Нужна для сравнений около нуля, где относительная толерантность не работает
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Порог вырожденности для inverse(): abs(det) <= DETERMINANT_ZERO_EPS → ошибка
# 0.0 означает точное сравнение с нулём; почти вырожденные матрицы обращаются
DETERMINANT_ZERO_EPS: Final[float] = 0.0


# =============================================================================
# ВАЛИДАЦИЯ СКАЛЯРОВ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_scalar(value: object) -> bool:
    """
    Проверка, можно ли использовать значение как элемент матрицы.

    bool формально является int, но как элемент матрицы не принимается.

    Examples:
        >>> is_scalar(1)
        True
        >>> is_scalar(2.5)
        True
        >>> is_scalar(True)
        False
        >>> is_scalar("1")
        False
    """
    return isinstance(value, Real) and not isinstance(value, bool)


def is_dimension(value: object) -> bool:
    """Проверка размерности: положительный int (bool не допускается)."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Реализация Python's math.isclose с настраиваемыми толерантностями.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """
    Проверка, близко ли значение к нулю с учётом толерантности.

    При tol=0.0 проверка вырождается в точное value == 0.

    Args:
        value: Проверяемое значение
        tol: Абсолютная толерантность (default: EPS_FLOAT_COMPARE_ABS)

    Returns:
        True если abs(value) <= tol

    Raises:
        ValueError: Если tol отрицательный
    """
    if tol < 0:
        raise ValueError(f"tol must be non-negative, got {tol}")

    return abs(value) <= tol
