"""
densematrix — dense 2-D matrices of double-precision scalars

Construction, element access, arithmetic, structural predicates, and
classical linear algebra (determinant, cofactor expansion, inverse, trace,
transpose, rotation by multiples of 90°).
"""

from densematrix.core.domain import Matrix, MatrixSnapshot
from densematrix.core.errors import (
    DimensionMismatchError,
    ErrorMessages,
    IndexOutOfRangeError,
    InvalidArgumentsError,
    InvalidRotateAngleError,
    MatrixError,
    MatrixOperation,
    NonSquareMatrixError,
    ShapeMismatchError,
    ZeroDeterminantError,
    handle_error,
)
from densematrix.core.math.rotation import rotate_90_clockwise

__version__ = "1.0.0"

__all__ = [
    # Types
    "Matrix",
    "MatrixSnapshot",
    # Errors
    "MatrixError",
    "InvalidArgumentsError",
    "DimensionMismatchError",
    "NonSquareMatrixError",
    "ShapeMismatchError",
    "ZeroDeterminantError",
    "InvalidRotateAngleError",
    "IndexOutOfRangeError",
    "ErrorMessages",
    "MatrixOperation",
    "handle_error",
    # Helpers
    "rotate_90_clockwise",
]
