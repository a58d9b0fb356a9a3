"""
Core math modules для densematrix

Скалярные примитивы и вспомогательные алгоритмы над 2-D массивами.
"""

# Numerical Safeguards
from densematrix.core.math.numerical_safeguards import (
    # Epsilon constants
    DETERMINANT_ZERO_EPS,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Validation
    is_dimension,
    is_scalar,
    is_valid_float,
    # Epsilon comparisons
    is_close,
    is_zero,
)

# Rotation
from densematrix.core.math.rotation import (
    FULL_TURN_DEG,
    RIGHT_ANGLE_DEG,
    quarter_turns,
    rotate_90_clockwise,
    to_degrees,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "DETERMINANT_ZERO_EPS",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Validation
    "is_dimension",
    "is_scalar",
    "is_valid_float",
    # Numerical Safeguards — Epsilon comparisons
    "is_close",
    "is_zero",
    # Rotation — Constants
    "FULL_TURN_DEG",
    "RIGHT_ANGLE_DEG",
    # Rotation — Functions
    "quarter_turns",
    "rotate_90_clockwise",
    "to_degrees",
]
