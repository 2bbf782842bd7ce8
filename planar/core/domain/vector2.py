"""
Vector — Immutable 2D Vector Value Object

Immutable Pydantic модель двумерного вектора (точка или смещение на плоскости).
Используется как геометрический примитив внешними потребителями
(например, парсером контуров/путей).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Vector никогда не мутирует: каждая операция возвращает новый экземпляр
2. Компоненты не валидируются по значению: NaN/Inf хранятся как есть
   и распространяются по правилам IEEE-754
3. Равенство структурное и точное (без epsilon)
4. Единственная fallible операция: unit() (нормализация нулевого вектора)
5. divide() НЕ проверяет делитель на ноль: результат ±Inf/NaN

Coordinate system:
    +X = вправо, +Y = вверх, radian() отсчитывается от +X против часовой
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field

from planar.core.math.numerical_safeguards import (
    EPS_UNIT_NORM,
    ieee_divide,
    is_close,
    to_ieee_float,
    validate_tolerance,
)

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ZeroVectorError(Exception):
    """
    Нормализация вектора нулевой длины.

    Направление нулевого вектора не определено, поэтому unit() не может
    вернуть осмысленный результат. Ошибка возвращается внутри UnitResult
    (не бросается), бросается только через UnitResult.unwrap().

    Attributes:
        vector: Sentinel payload — всегда Vector.origin()
    """

    def __init__(self, vector: "Vector"):
        self.vector = vector
        super().__init__(f"Cannot normalize zero vector {vector}: norm is 0.0")


# =============================================================================
# VECTOR MODEL
# =============================================================================


class Vector(BaseModel):
    """
    Immutable 2D вектор.

    Immutable модель (frozen=True) для предотвращения случайных изменений.
    Все операции создают новый экземпляр.

    Examples:
        >>> Vector(1.0, 2.0) + Vector(3.0, 4.0)
        Vector(x=4.0, y=6.0)
        >>> Vector(3.0, 4.0).norm()
        5.0
        >>> str(Vector(1.5, 2.0))
        '(1.5, 2.0)'
    """

    x: float = Field(..., description="Компонента по оси X")
    y: float = Field(..., description="Компонента по оси Y")

    model_config = {"frozen": True, "strict": True}  # Immutable

    def __init__(self, x: float, y: float) -> None:
        super().__init__(x=x, y=y)

    def __eq__(self, other: object) -> bool:
        # IEEE-сравнение покомпонентно: NaN != NaN, -0.0 == 0.0
        if not isinstance(other, Vector):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    @classmethod
    def origin(cls) -> "Vector":
        """Нулевой вектор (0, 0)."""
        return cls(0.0, 0.0)

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def add(self, other: "Vector") -> "Vector":
        """Покомпонентная сумма."""
        return Vector(self.x + other.x, self.y + other.y)

    def subtract(self, other: "Vector") -> "Vector":
        """Покомпонентная разность. v.subtract(v) == origin для finite v."""
        return Vector(self.x - other.x, self.y - other.y)

    def scale(self, c: float) -> "Vector":
        """
        Умножение обеих компонент на скаляр.

        c = 0 даёт origin, отрицательный c отражает вектор,
        NaN/Inf в c распространяются в компоненты.
        """
        c = to_ieee_float(c)
        return Vector(self.x * c, self.y * c)

    def divide(self, c: float) -> "Vector":
        """
        Деление обеих компонент на скаляр.

        ВНИМАНИЕ: делитель не проверяется. c = 0 даёт компоненты ±Inf
        (или NaN для нулевой компоненты), как предписывает IEEE-754.
        Проверка делителя — ответственность вызывающего кода.

        Examples:
            >>> Vector(3.0, 4.0).divide(2.0)
            Vector(x=1.5, y=2.0)
            >>> Vector(1.0, -1.0).divide(0.0)
            Vector(x=inf, y=-inf)
        """
        c = to_ieee_float(c)
        return Vector(ieee_divide(self.x, c), ieee_divide(self.y, c))

    def __add__(self, other: object) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, c: object) -> "Vector":
        if isinstance(c, bool) or not isinstance(c, (int, float)):
            return NotImplemented
        return self.scale(c)

    def __rmul__(self, c: object) -> "Vector":
        return self.__mul__(c)

    def __truediv__(self, c: object) -> "Vector":
        if isinstance(c, bool) or not isinstance(c, (int, float)):
            return NotImplemented
        return self.divide(c)

    # =========================================================================
    # Magnitude & Direction
    # =========================================================================

    def norm(self) -> float:
        """
        Евклидова длина sqrt(x² + y²).

        Переполнение квадратов даёт Inf (не OverflowError), underflow
        даёт ровно 0.0: norm(Vector(1e-300, 1e-300)) == 0.0.

        Returns:
            NaN если любая компонента NaN; Inf если компонента ±Inf
        """
        return math.sqrt(self.x * self.x + self.y * self.y)

    def is_zero(self) -> bool:
        """True если norm() == 0.0 (точное сравнение, без толерантности)."""
        return self.norm() == 0.0

    def is_unit(self, tol: float = EPS_UNIT_NORM) -> bool:
        """
        Проверка единичной длины: |norm() - 1| <= tol.

        Args:
            tol: Абсолютная толерантность (default: EPS_UNIT_NORM)

        Raises:
            ValueError: Если tol < 0 или NaN/Inf
        """
        validate_tolerance(tol, "tol")
        return is_close(self.norm(), 1.0, rel_tol=0.0, abs_tol=tol)

    def radian(self) -> float:
        """
        Угол от положительной оси X: atan2(y, x), диапазон (-π, π].

        Для origin возвращает 0.0 (соглашение atan2), направление
        нулевого вектора при этом не определено.
        """
        return math.atan2(self.y, self.x)

    # =========================================================================
    # Normalization
    # =========================================================================

    def unit(self) -> "UnitResult":
        """
        Нормализация вектора (fallible).

        Returns:
            UnitResult:
                - ok=True, value=self / norm() если norm() != 0.0
                - ok=False, value=origin, error=ZeroVectorError если norm() == 0.0

        Examples:
            >>> Vector(3.0, 4.0).unit().value
            Vector(x=0.6, y=0.8)
            >>> Vector(0.0, 0.0).unit().ok
            False
        """
        n = self.norm()

        if n == 0.0:
            sentinel = Vector.origin()
            logger.debug(f"Normalization rejected: {self} has zero length")
            return UnitResult(ok=False, value=sentinel, error=ZeroVectorError(sentinel))

        return UnitResult(ok=True, value=self.divide(n), error=None)

    # =========================================================================
    # Utility
    # =========================================================================

    def components(self) -> tuple[float, float]:
        """Компоненты как кортеж (x, y)."""
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


# =============================================================================
# NORMALIZATION RESULT
# =============================================================================


@dataclass(frozen=True)
class UnitResult:
    """Результат Vector.unit()."""

    ok: bool
    value: Vector

    # None при успехе
    error: Optional[ZeroVectorError]

    def unwrap(self) -> Vector:
        """
        Нормализованный вектор или исключение.

        Raises:
            ZeroVectorError: если нормализация не удалась
        """
        if not self.ok:
            raise ZeroVectorError(self.value)
        return self.value

    def value_or(self, default: Vector) -> Vector:
        """Нормализованный вектор или default при неудаче."""
        return self.value if self.ok else default
