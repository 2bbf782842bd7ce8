"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Проверку валидности float
2. Epsilon-сравнения float
3. Валидацию толерантностей
4. Деление по правилам IEEE-754 (±Inf/NaN вместо ZeroDivisionError)
"""

import math

import pytest

from planar.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_UNIT_NORM,
    ieee_divide,
    is_close,
    is_valid_float,
    to_ieee_float,
    validate_tolerance,
)

# =============================================================================
# ТЕСТЫ ПРОВЕРОК FLOAT
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values_valid(self) -> None:
        """Конечные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-0.0)
        assert is_valid_float(1e308)
        assert is_valid_float(-1e-308)

    def test_nan_inf_invalid(self) -> None:
        """NaN и Inf невалидны"""
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


class TestIsClose:
    """Тесты для is_close"""

    def test_default_tolerances(self) -> None:
        """Константы толерантности по умолчанию"""
        assert EPS_FLOAT_COMPARE_REL == 1e-9
        assert EPS_FLOAT_COMPARE_ABS == 1e-12
        assert EPS_UNIT_NORM == 1e-12

    def test_close_values(self) -> None:
        """Близкие значения считаются равными"""
        assert is_close(1.0, 1.0 + 1e-10)
        assert is_close(0.0, 1e-13)
        assert is_close(1e10, 1e10 + 1.0)

    def test_distant_values(self) -> None:
        """Далёкие значения не равны"""
        assert not is_close(1.0, 1.1)
        assert not is_close(0.0, 1e-6)

    def test_nan_never_close(self) -> None:
        """NaN не близок ни к чему, включая NaN"""
        assert not is_close(float("nan"), float("nan"))
        assert not is_close(float("nan"), 1.0)

    def test_custom_tolerance(self) -> None:
        """Пользовательская абсолютная толерантность"""
        assert is_close(1.0, 1.05, rel_tol=0.0, abs_tol=0.1)
        assert not is_close(1.0, 1.05, rel_tol=0.0, abs_tol=0.01)


class TestValidateTolerance:
    """Тесты для validate_tolerance"""

    def test_valid_tolerances_pass(self) -> None:
        """Неотрицательные конечные значения проходят"""
        validate_tolerance(0.0, "tol")
        validate_tolerance(1e-12, "tol")
        validate_tolerance(10.0, "tol")

    def test_negative_raises(self) -> None:
        """Отрицательная толерантность вызывает ошибку"""
        with pytest.raises(ValueError, match="tol must be non-negative"):
            validate_tolerance(-1e-9, "tol")

    def test_nan_inf_raises(self) -> None:
        """NaN/Inf толерантность вызывает ошибку"""
        with pytest.raises(ValueError, match="not NaN/Inf"):
            validate_tolerance(float("nan"), "tol")

        with pytest.raises(ValueError, match="not NaN/Inf"):
            validate_tolerance(float("inf"), "tol")


class TestToIeeeFloat:
    """Тесты для to_ieee_float"""

    def test_regular_values(self) -> None:
        """int и float приводятся к float"""
        assert to_ieee_float(3) == 3.0
        assert isinstance(to_ieee_float(3), float)
        assert to_ieee_float(-2.5) == -2.5

    def test_huge_int_rounds_to_inf(self) -> None:
        """int вне диапазона double даёт ±Inf без OverflowError"""
        assert to_ieee_float(10 ** 400) == math.inf
        assert to_ieee_float(-(10 ** 400)) == -math.inf

    def test_non_finite_unchanged(self) -> None:
        """NaN/Inf проходят как есть"""
        assert to_ieee_float(math.inf) == math.inf
        assert math.isnan(to_ieee_float(float("nan")))


# =============================================================================
# ТЕСТЫ ДЕЛЕНИЯ ПО IEEE-754
# =============================================================================


class TestIeeeDivide:
    """Тесты для ieee_divide"""

    def test_regular_division(self) -> None:
        """Ненулевой делитель: обычное деление"""
        assert ieee_divide(3.0, 2.0) == 1.5
        assert ieee_divide(-4.0, 2.0) == -2.0
        assert ieee_divide(3.0, 5.0) == 0.6

    def test_positive_over_zero(self) -> None:
        """x > 0 / +0.0 = +Inf"""
        assert ieee_divide(1.0, 0.0) == math.inf

    def test_negative_over_zero(self) -> None:
        """x < 0 / +0.0 = -Inf"""
        assert ieee_divide(-1.0, 0.0) == -math.inf

    def test_signed_zero_denominator(self) -> None:
        """Знак нуля в делителе учитывается"""
        assert ieee_divide(1.0, -0.0) == -math.inf
        assert ieee_divide(-1.0, -0.0) == math.inf

    def test_zero_over_zero_is_nan(self) -> None:
        """0 / 0 = NaN"""
        assert math.isnan(ieee_divide(0.0, 0.0))
        assert math.isnan(ieee_divide(-0.0, 0.0))

    def test_nan_numerator_is_nan(self) -> None:
        """NaN распространяется"""
        assert math.isnan(ieee_divide(float("nan"), 0.0))
        assert math.isnan(ieee_divide(float("nan"), 2.0))

    def test_inf_numerator(self) -> None:
        """Inf / 0 = Inf с учётом знаков, Inf / Inf = NaN"""
        assert ieee_divide(math.inf, 0.0) == math.inf
        assert ieee_divide(-math.inf, 0.0) == -math.inf
        assert math.isnan(ieee_divide(math.inf, math.inf))

    def test_nan_denominator(self) -> None:
        """NaN в делителе даёт NaN"""
        assert math.isnan(ieee_divide(1.0, float("nan")))

    def test_never_raises(self) -> None:
        """Деление на ноль не бросает ZeroDivisionError"""
        for numerator in [0.0, 1.0, -1.0, math.inf, float("nan")]:
            for denominator in [0.0, -0.0]:
                ieee_divide(numerator, denominator)
