"""
Matrix Errors — Таксономия ошибок и каталог сообщений

Модуль определяет:
- Иерархию исключений матричных операций (корень: MatrixError)
- Каталог текстов ошибок (ErrorMessages), часть сообщений параметризуется
  операцией (MatrixOperation)
- handle_error: выброс исключения при выполнении условия

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все ошибки выбрасываются синхронно, до изменения состояния матрицы
2. Внутреннего восстановления или частичных результатов нет
3. Каждый класс ошибки наследует и MatrixError, и ближайший built-in
   (ValueError / IndexError / ArithmeticError)
"""

from enum import Enum
from typing import Final


# =============================================================================
# OPERATIONS
# =============================================================================


class MatrixOperation(str, Enum):
    """Операции, которыми параметризуются сообщения об ошибках."""

    MULTIPLICATION = "multiplication"
    ADDITION = "addition"
    SUBTRACTION = "subtraction"
    INVERSE = "inverse"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MatrixError(Exception):
    """
    Базовая ошибка матричных операций.

    handle_error выбрасывает её, если конкретный класс не указан.
    """

    pass


class InvalidArgumentsError(MatrixError, ValueError):
    """Нераспознанная комбинация аргументов конструктора или невалидные данные."""

    pass


class DimensionMismatchError(MatrixError, ValueError):
    """Несовместимые размерности операндов (add/subtract/multiply/set_data)."""

    pass


class NonSquareMatrixError(MatrixError, ValueError):
    """Операция требует квадратную матрицу (trace/determinant/inverse)."""

    pass


class ShapeMismatchError(MatrixError, ValueError):
    """set_shape получил не ровно два измерения."""

    pass


class ZeroDeterminantError(MatrixError, ArithmeticError):
    """
    Вырожденная матрица: determinant == 0.

    Сравнение с нулём точное (см. DETERMINANT_ZERO_EPS в numerical_safeguards).
    """

    pass


class InvalidRotateAngleError(MatrixError, ValueError):
    """Угол поворота не кратен 90 градусам."""

    pass


class IndexOutOfRangeError(MatrixError, IndexError):
    """Индекс строки или столбца вне границ матрицы."""

    pass


# =============================================================================
# MESSAGE CATALOGUE
# =============================================================================


class ErrorMessages:
    """
    Каталог текстов ошибок.

    Константы — для фиксированных сообщений, staticmethod — для сообщений,
    зависящих от операции.

    Examples:
        >>> ErrorMessages.matrix_dimension_mismatch(MatrixOperation.ADDITION)
        'Matrix dimension mismatch: The matrices must have the same dimensions (n x m).'
        >>> ErrorMessages.zero_matrix_determinant("inverse")
        'Zero determinant: The matrix has a determinant of zero, and therefore does not have an inverse.'
    """

    INVALID_ARGUMENTS: Final[str] = "Invalid arguments provided"

    NON_SQUARE_MATRIX: Final[str] = (
        "Non-square matrix: The operation requires a square matrix."
    )

    MATRIX_SHAPE_MISMATCH: Final[str] = (
        "Matrix shape mismatch: The dimensions of the matrices are incompatible."
    )

    INVALID_ROTATE_ANGLE: Final[str] = (
        "Invalid rotate angle: The angle required to be a multiples of 90 degrees."
    )

    INDEX_OUT_OF_RANGE: Final[str] = (
        "Index out of range: The indexes provided are out of range."
    )

    @staticmethod
    def matrix_dimension_mismatch(operation: MatrixOperation | str = "") -> str:
        """
        Сообщение о несовпадении размерностей.

        Args:
            operation: multiplication / addition / subtraction, иначе общий текст

        Returns:
            Текст ошибки для указанной операции
        """
        method = operation.value if isinstance(operation, MatrixOperation) else operation

        if method == MatrixOperation.MULTIPLICATION.value:
            return (
                "Matrix dimension mismatch: The number of columns in the first "
                "matrix must be equal to the number of rows"
            )
        if method in (MatrixOperation.ADDITION.value, MatrixOperation.SUBTRACTION.value):
            return (
                "Matrix dimension mismatch: The matrices must have the same "
                "dimensions (n x m)."
            )
        return (
            "Matrix dimensions mismatch: The matrices must have compatible "
            "dimensions for this operation."
        )

    @staticmethod
    def zero_matrix_determinant(operation: MatrixOperation | str = "") -> str:
        """Сообщение о нулевом детерминанте для операции (обычно inverse)."""
        method = operation.value if isinstance(operation, MatrixOperation) else operation
        return (
            "Zero determinant: The matrix has a determinant of zero, and "
            f"therefore does not have an {method}."
        )


# =============================================================================
# RAISING
# =============================================================================


def handle_error(
    message: str,
    condition: object = True,
    error_cls: type[MatrixError] = MatrixError,
) -> None:
    """
    Выброс исключения, если condition истинно.

    Args:
        message: Текст ошибки
        condition: Проверяемое условие (default: True — выбросить безусловно)
        error_cls: Класс исключения (default: MatrixError)

    Raises:
        error_cls: если condition истинно

    Examples:
        >>> handle_error("never raised", False)
        >>> handle_error("Invalid arguments provided")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        MatrixError: Invalid arguments provided
    """
    if condition:
        raise error_cls(message)
