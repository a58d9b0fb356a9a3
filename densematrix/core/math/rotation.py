"""
Rotation — Поворот 2-D массивов на углы, кратные 90°

Модуль содержит:
- rotate_90_clockwise: поворот прямоугольного массива по часовой стрелке
- quarter_turns: конверсия угла в количество четвертей оборота

Конвенция угла:
    |angle| <= π  → угол в радианах
    |angle| > π   → угол уже в градусах

ФОРМУЛЫ:
    result[i][j] = source[R - 1 - j][i]     (R × C → C × R)
    turns = (degrees mod 360) / 90           (degrees кратно 90)
"""

import logging
import math
from typing import Final, Sequence

from densematrix.core.errors import ErrorMessages, InvalidRotateAngleError, handle_error

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

RIGHT_ANGLE_DEG: Final[float] = 90.0

FULL_TURN_DEG: Final[float] = 360.0


# =============================================================================
# ПОВОРОТ
# =============================================================================


def rotate_90_clockwise(array: Sequence[Sequence[float]]) -> list[list[float]]:
    """
    Поворот прямоугольного 2-D массива на 90° по часовой стрелке.

    Исходный массив не изменяется, результат — новые списки.

    Args:
        array: Прямоугольный массив R × C (R >= 1, C >= 1)

    Returns:
        Новый массив C × R

    Examples:
        >>> rotate_90_clockwise([[1, 2], [3, 4]])
        [[3, 1], [4, 2]]
        >>> rotate_90_clockwise([[1, 2, 3]])
        [[1], [2], [3]]
    """
    return [
        [array[j][i] for j in range(len(array) - 1, -1, -1)]
        for i in range(len(array[0]))
    ]


def to_degrees(angle: float) -> float:
    """
    Приведение угла к градусам.

    Значения с |angle| <= π считаются радианами, остальные — градусами.

    Examples:
        >>> to_degrees(math.pi / 2)
        90.0
        >>> to_degrees(270)
        270
    """
    if abs(angle) <= math.pi:
        return math.degrees(angle)
    return angle


def quarter_turns(angle: float) -> int:
    """
    Количество поворотов на 90° по часовой стрелке для угла.

    Args:
        angle: Угол в радианах (|angle| <= π) или градусах

    Returns:
        Число в диапазоне [0, 3]

    Raises:
        InvalidRotateAngleError: если угол не кратен 90° (включая NaN/Inf)

    Examples:
        >>> quarter_turns(math.pi / 2)
        1
        >>> quarter_turns(-90)
        3
        >>> quarter_turns(450)
        1
    """
    degrees = to_degrees(angle)

    # int может не помещаться во float: считаем в целых
    if isinstance(degrees, int):
        right_angle, full_turn = int(RIGHT_ANGLE_DEG), int(FULL_TURN_DEG)
        invalid = degrees % right_angle != 0
    else:
        right_angle, full_turn = RIGHT_ANGLE_DEG, FULL_TURN_DEG
        invalid = not math.isfinite(degrees) or degrees % right_angle != 0

    handle_error(ErrorMessages.INVALID_ROTATE_ANGLE, invalid, InvalidRotateAngleError)

    # Python % уже нормализует в [0, 360) для отрицательных углов
    normalized = degrees % full_turn
    turns = int(normalized // right_angle)

    logger.debug("rotation angle=%s -> %s quarter turn(s)", angle, turns)
    return turns
