"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Epsilon-параметры
2. Проверку скаляров и размерностей
3. Epsilon-сравнения float
4. Точную проверку нуля при tol=0 (порог вырожденности inverse)
"""


import pytest

from densematrix.core.math.numerical_safeguards import (
    DETERMINANT_ZERO_EPS,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_dimension,
    is_scalar,
    is_valid_float,
    is_zero,
)

# =============================================================================
# ТЕСТЫ EPSILON-ПАРАМЕТРОВ
# =============================================================================


class TestEpsilonConstants:
    """Значения epsilon-параметров"""

    def test_values(self) -> None:
        assert EPS_FLOAT_COMPARE_REL == 1e-9
        assert EPS_FLOAT_COMPARE_ABS == 1e-12
        assert DETERMINANT_ZERO_EPS == 0.0


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1e300)

    def test_nan_inf(self) -> None:
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


class TestIsScalar:
    """Тесты для is_scalar"""

    def test_numbers_accepted(self) -> None:
        assert is_scalar(1)
        assert is_scalar(-2.5)
        assert is_scalar(float("nan"))

    def test_non_numbers_rejected(self) -> None:
        """bool, строки, контейнеры и None не являются скалярами"""
        assert not is_scalar(True)
        assert not is_scalar("1")
        assert not is_scalar([1])
        assert not is_scalar(None)
        assert not is_scalar(1 + 2j)


class TestIsDimension:
    """Тесты для is_dimension"""

    def test_positive_ints(self) -> None:
        assert is_dimension(1)
        assert is_dimension(100)

    def test_rejected(self) -> None:
        assert not is_dimension(0)
        assert not is_dimension(-3)
        assert not is_dimension(2.0)
        assert not is_dimension(True)
        assert not is_dimension(None)


# =============================================================================
# ТЕСТЫ EPSILON-СРАВНЕНИЙ
# =============================================================================


class TestIsClose:
    """Тесты для is_close"""

    def test_close_values(self) -> None:
        assert is_close(1.0, 1.0 + 1e-10)
        assert is_close(0.0, 1e-13)

    def test_far_values(self) -> None:
        assert not is_close(1.0, 1.1)

    def test_custom_tolerance(self) -> None:
        assert is_close(1.0, 1.05, rel_tol=0.1)


class TestIsZero:
    """Тесты для is_zero"""

    def test_default_tolerance(self) -> None:
        assert is_zero(0.0)
        assert is_zero(1e-13)
        assert not is_zero(1e-6)

    def test_exact_zero_with_zero_tolerance(self) -> None:
        """tol=0 → только точный ноль"""
        assert is_zero(0.0, tol=DETERMINANT_ZERO_EPS)
        assert is_zero(-0.0, tol=DETERMINANT_ZERO_EPS)
        assert not is_zero(1e-300, tol=DETERMINANT_ZERO_EPS)

    def test_negative_tolerance_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            is_zero(0.0, tol=-1.0)
