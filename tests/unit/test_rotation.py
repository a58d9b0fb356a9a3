"""
Тесты для Rotation — поворот 2-D массивов на k·90°

Проверяет:
1. rotate_90_clockwise для квадратных и прямоугольных массивов
2. Конверсию угла (радианы при |angle| <= π, иначе градусы)
3. Нормализацию в [0, 360) и число четвертей оборота
4. InvalidRotateAngleError для углов, не кратных 90°
"""

import math

import pytest

from densematrix.core.errors import InvalidRotateAngleError
from densematrix.core.math.rotation import quarter_turns, rotate_90_clockwise, to_degrees


# =============================================================================
# ТЕСТЫ rotate_90_clockwise
# =============================================================================


class TestRotate90Clockwise:
    """Тесты rotate_90_clockwise"""

    def test_rotate_2x2(self) -> None:
        assert rotate_90_clockwise([[1, 2], [3, 4]]) == [[3, 1], [4, 2]]

    def test_rotate_3x3(self) -> None:
        assert rotate_90_clockwise([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == [
            [7, 4, 1],
            [8, 5, 2],
            [9, 6, 3],
        ]

    def test_rotate_rectangular_changes_shape(self) -> None:
        """R × C → C × R, result[i][j] = source[R-1-j][i]"""
        source = [[1, 2, 3], [4, 5, 6]]
        assert rotate_90_clockwise(source) == [[4, 1], [5, 2], [6, 3]]

    def test_source_not_modified(self) -> None:
        source = [[1, 2], [3, 4]]
        rotate_90_clockwise(source)
        assert source == [[1, 2], [3, 4]]


# =============================================================================
# ТЕСТЫ КОНВЕРСИИ УГЛА
# =============================================================================


class TestQuarterTurns:
    """Тесты to_degrees / quarter_turns"""

    def test_radians_converted(self) -> None:
        assert to_degrees(math.pi / 2) == 90.0
        assert to_degrees(-math.pi / 2) == -90.0

    def test_degrees_pass_through(self) -> None:
        assert to_degrees(270) == 270
        assert to_degrees(-450) == -450

    @pytest.mark.parametrize(
        "angle, turns",
        [
            (0, 0),
            (math.pi / 2, 1),
            (-math.pi / 2, 3),
            (180, 2),
            (270, 3),
            (360, 0),
            (450, 1),
            (540, 2),
            (-90, 3),
            (-180, 2),
            (-720, 0),
        ],
    )
    def test_turn_count(self, angle: float, turns: int) -> None:
        assert quarter_turns(angle) == turns

    @pytest.mark.parametrize("angle", [45, 100, 1.0, -135, float("nan"), float("inf")])
    def test_invalid_angle(self, angle: float) -> None:
        with pytest.raises(InvalidRotateAngleError, match="multiples of 90 degrees"):
            quarter_turns(angle)

    @pytest.mark.parametrize(
        "angle, turns",
        [(90 * 10**400, 0), (90 * (4 * 10**400 + 1), 1), (-90 * (4 * 10**400 + 1), 3)],
    )
    def test_huge_int_turn_count(self, angle: int, turns: int) -> None:
        assert quarter_turns(angle) == turns

    def test_huge_int_invalid_angle(self) -> None:
        with pytest.raises(InvalidRotateAngleError):
            quarter_turns(10**400 + 1)
