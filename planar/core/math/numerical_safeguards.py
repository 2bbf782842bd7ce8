"""
Numerical Safeguards — Float Primitives for Vector Math

Модуль содержит float-примитивы, на которых построены операции Vector:
- Проверка валидности float (finite / NaN / Inf)
- Сравнения float с учётом машинной точности
- Деление по правилам IEEE-754 (без ZeroDivisionError)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf НЕ санитизируются: они распространяются по стандарту IEEE-754
2. Деление на ноль не бросает исключение (возвращается ±Inf или NaN)
3. Все операции детерминированы и не имеют побочных эффектов
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close для относительных сравнений
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Используется в is_close для абсолютных сравнений
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Допуск для проверки единичной длины вектора (|norm - 1| <= EPS_UNIT_NORM)
EPS_UNIT_NORM: Final[float] = 1e-12


# =============================================================================
# ПРОВЕРКИ FLOAT
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


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности.
        NaN никогда не близок ни к чему (включая NaN).

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def validate_tolerance(value: float, name: str) -> None:
    """
    Валидация толерантности сравнения.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


# =============================================================================
# ПРИВЕДЕНИЕ К FLOAT
# =============================================================================


def to_ieee_float(value: float) -> float:
    """
    Приведение скаляра к float с округлением переполнения до ±Inf.

    float(int) бросает OverflowError для int вне диапазона double;
    IEEE-754 округляет такое значение до ±Inf.

    Examples:
        >>> to_ieee_float(3)
        3.0
        >>> to_ieee_float(10 ** 400)
        inf
        >>> to_ieee_float(-(10 ** 400))
        -inf
    """
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


# =============================================================================
# ДЕЛЕНИЕ ПО IEEE-754
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление float по правилам IEEE-754.

    Python бросает ZeroDivisionError для x / 0.0, тогда как IEEE-754
    определяет результат как ±Inf или NaN. Эта функция возвращает
    IEEE-результат и никогда не бросает исключение.

    Правила для denominator == ±0.0:
        - numerator NaN или ±0.0 → NaN
        - иначе → ±Inf, знак = sign(numerator) * sign(denominator)
          (учитывается знак нуля: 1.0 / -0.0 = -Inf)

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        numerator / denominator по IEEE-754

    Examples:
        >>> ieee_divide(3.0, 2.0)
        1.5
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator != 0.0:
        return numerator / denominator

    if math.isnan(numerator) or numerator == 0.0:
        return math.nan

    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.copysign(math.inf, sign)
