"""
Matrix — Плотная 2-D матрица double-precision скаляров

Модуль содержит value type Matrix и его набор операций:
- Конструирование (конструктор + именованные фабрики)
- Доступ к элементам и мутации на месте (set, reset, set_data, set_shape,
  set_as_identity)
- Арифметика (add, subtract, multiply, scale, modulo) и операторы
- Структурные предикаты (is_square, is_symmetric, is_identity, ...)
- Линейная алгебра: transpose, determinant (разложение Лапласа), minor,
  cofactor, adjugate, trace, inverse
- row_space / col_space (копии без редукции базиса), rotate на k·90°
- Сериализация через JSON Schema контракт и MatrixSnapshot

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. rows >= 1, columns >= 1, каждая строка содержит ровно columns элементов
2. Ошибка выбрасывается до изменения состояния
3. Матрица владеет приватной глубокой копией данных: ни входной массив,
   ни возвращаемые массивы не разделяют списки с внутренним хранилищем
4. Все операции, кроме явно названных мутаций, возвращают новую матрицу
   и не изменяют операнды

ФОРМУЛЫ:
    det(A) = Σ_i A[0][i] · C(0, i)              (n >= 3)
    C(i, j) = (-1)^(i+j) · det(M(i, j))
    A^-1 = adj(A) / det(A) = (C / det(A))^T
"""

import json
import logging
import math
from collections.abc import Sequence
from typing import Any, Callable, Iterator

from densematrix.core.contracts.validators import validate_matrix
from densematrix.core.domain.snapshot import MatrixSnapshot
from densematrix.core.errors import (
    DimensionMismatchError,
    ErrorMessages,
    IndexOutOfRangeError,
    InvalidArgumentsError,
    MatrixOperation,
    NonSquareMatrixError,
    ShapeMismatchError,
    ZeroDeterminantError,
    handle_error,
)
from densematrix.core.math.numerical_safeguards import (
    DETERMINANT_ZERO_EPS,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_dimension,
    is_scalar,
    is_zero,
)
from densematrix.core.math.rotation import quarter_turns, rotate_90_clockwise

logger = logging.getLogger(__name__)

Rows = list[list[float]]


# =============================================================================
# ВНУТРЕННИЕ ХЕЛПЕРЫ ДАННЫХ
# =============================================================================


def _zeros(rows: int, columns: int) -> Rows:
    return [[0.0] * columns for _ in range(rows)]


def _is_index(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_array(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _copy_rows(data: object) -> Rows:
    """
    Глубокая копия 2-D массива с приведением элементов к float.

    Форма не проверяется (строки могут быть разной длины), см. _shape_of.

    Raises:
        InvalidArgumentsError: если data не непустая последовательность
            непустых последовательностей скаляров
    """
    handle_error(
        ErrorMessages.INVALID_ARGUMENTS,
        not _is_array(data) or len(data) == 0,
        InvalidArgumentsError,
    )

    copied: Rows = []
    for row in data:
        handle_error(
            ErrorMessages.INVALID_ARGUMENTS,
            not _is_array(row) or len(row) == 0,
            InvalidArgumentsError,
        )
        handle_error(
            ErrorMessages.INVALID_ARGUMENTS,
            not all(is_scalar(value) for value in row),
            InvalidArgumentsError,
        )
        copied.append([float(value) for value in row])
    return copied


def _has_shape(data: object, rows: int, columns: int) -> bool:
    """data — массив rows строк-массивов длины columns (элементы не проверяются)."""
    return (
        _is_array(data)
        and len(data) == rows
        and all(_is_array(row) and len(row) == columns for row in data)
    )


def _shape_of(rows: Rows) -> tuple[int, int] | None:
    """Форма прямоугольного массива или None для рваного."""
    columns = len(rows[0])
    if any(len(row) != columns for row in rows):
        return None
    return (len(rows), columns)


# =============================================================================
# MATRIX
# =============================================================================


class Matrix:
    """
    Плотная матрица rows × columns из float.

    Формы конструирования:
        Matrix()                      → 1×1 нулевая
        Matrix(n)                     → n×n нулевая
        Matrix(r, c)                  → r×c нулевая
        Matrix(r, c, data)            → r×c из data; при несовпадении формы
                                        data — r×c нулевая (без ошибки)
        Matrix(n, data=data)          → n×n из data (та же замена нулями)
        Matrix.from_data(data)        → форма выводится из data

    Именованные фабрики: zeros, square, from_dimensions, from_data, identity,
    from_dict, from_json, from_snapshot.

    Matrix изменяема и определяет __eq__, поэтому не хешируется.
    """

    def __init__(
        self,
        rows: int = 1,
        columns: int | None = None,
        data: Sequence[Sequence[float]] | None = None,
    ):
        """
        Args:
            rows: Количество строк (>= 1)
            columns: Количество столбцов (>= 1, default: rows)
            data: Начальные данные (optional), копируются

        Raises:
            InvalidArgumentsError: невалидные размерности или нечисловые
                элементы в data подходящей формы
        """
        if columns is None:
            columns = rows

        handle_error(
            ErrorMessages.INVALID_ARGUMENTS,
            not (is_dimension(rows) and is_dimension(columns)),
            InvalidArgumentsError,
        )

        self._rows: int = rows
        self._columns: int = columns
        self._data: Rows = self._initial_data(rows, columns, data)

    @staticmethod
    def _initial_data(rows: int, columns: int, data: object) -> Rows:
        if data is None:
            return _zeros(rows, columns)

        if _has_shape(data, rows, columns):
            return _copy_rows(data)

        logger.debug(
            "data shape does not match %dx%d, falling back to zeros", rows, columns
        )
        return _zeros(rows, columns)

    @classmethod
    def _wrap(cls, rows: Rows) -> "Matrix":
        """Матрица, принимающая владение уже скопированными rows."""
        matrix = cls.__new__(cls)
        matrix._rows = len(rows)
        matrix._columns = len(rows[0])
        matrix._data = rows
        return matrix

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def zeros(cls, rows: int, columns: int | None = None) -> "Matrix":
        """Нулевая матрица rows × columns (columns по умолчанию = rows)."""
        return cls(rows, columns)

    @classmethod
    def square(
        cls, rows: int, data: Sequence[Sequence[float]] | None = None
    ) -> "Matrix":
        """Квадратная матрица rows × rows, из data или нулевая."""
        return cls(rows, rows, data)

    @classmethod
    def from_dimensions(
        cls,
        rows: int,
        columns: int,
        data: Sequence[Sequence[float]] | None = None,
    ) -> "Matrix":
        """Матрица явной формы; data несовпадающей формы заменяется нулями."""
        return cls(rows, columns, data)

    @classmethod
    def from_data(cls, data: Sequence[Sequence[float]]) -> "Matrix":
        """
        Матрица с формой, выведенной из data: len(data) × len(data[0]).

        Raises:
            InvalidArgumentsError: data пустой, рваный или нечисловой
        """
        copied = _copy_rows(data)
        handle_error(
            ErrorMessages.INVALID_ARGUMENTS,
            _shape_of(copied) is None,
            InvalidArgumentsError,
        )
        return cls._wrap(copied)

    @classmethod
    def identity(cls, size: int) -> "Matrix":
        """Единичная матрица size × size."""
        matrix = cls(size)
        matrix.set_as_identity()
        return matrix

    # -------------------------------------------------------------------------
    # Доступ и мутации
    # -------------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def data(self) -> Rows:
        """Глубокая копия элементов."""
        return self.to_list()

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._columns)

    @property
    def size(self) -> int:
        return self._rows * self._columns

    def to_list(self) -> Rows:
        return [row[:] for row in self._data]

    def at(self, row: int, column: int) -> float:
        """
        Элемент [row][column].

        Raises:
            IndexOutOfRangeError: индекс отрицательный или >= границы
        """
        self._check_bounds(row, column)
        return self._data[row][column]

    def set(self, row: int, column: int, value: float) -> None:
        """
        Запись элемента [row][column] на месте.

        Raises:
            IndexOutOfRangeError: индекс отрицательный или >= границы
            InvalidArgumentsError: value не является скаляром
        """
        self._check_bounds(row, column)
        handle_error(
            ErrorMessages.INVALID_ARGUMENTS, not is_scalar(value), InvalidArgumentsError
        )
        self._data[row][column] = float(value)

    def reset(self) -> None:
        """Все элементы → 0.0, форма сохраняется."""
        self._data = _zeros(self._rows, self._columns)

    def clone(self) -> "Matrix":
        return self._wrap(self.to_list())

    def set_data(self, data: Sequence[Sequence[float]], override: bool = False) -> None:
        """
        Замена данных матрицы (глубокая копия data).

        Args:
            data: Новые данные
            override: False — форма data обязана совпадать с текущей;
                True — матрица принимает форму data

        Raises:
            InvalidArgumentsError: data не является числовым 2-D массивом,
                либо override=True и data рваный
            DimensionMismatchError: override=False и форма не совпадает
        """
        copied = _copy_rows(data)
        shape = _shape_of(copied)

        if not override:
            handle_error(
                ErrorMessages.matrix_dimension_mismatch(),
                shape != self.shape,
                DimensionMismatchError,
            )
        else:
            handle_error(
                ErrorMessages.INVALID_ARGUMENTS, shape is None, InvalidArgumentsError
            )
            logger.debug("set_data override: %s -> %s", self.shape, shape)

        self._rows, self._columns = shape
        self._data = copied

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "Matrix") -> "Matrix":
        """
        Поэлементная сумма.

        Raises:
            DimensionMismatchError: формы операндов различаются
        """
        return self._elementwise(other, lambda a, b: a + b, MatrixOperation.ADDITION)

    def subtract(self, other: "Matrix") -> "Matrix":
        """
        Поэлементная разность.

        Raises:
            DimensionMismatchError: формы операндов различаются
        """
        return self._elementwise(
            other, lambda a, b: a - b, MatrixOperation.SUBTRACTION
        )

    def multiply(self, other: "Matrix") -> "Matrix":
        """
        Матричное произведение self · other.

        Результат: self.rows × other.columns, каждый элемент — скалярное
        произведение строки self и столбца other.

        Raises:
            InvalidArgumentsError: other не Matrix (для скаляра — scale)
            DimensionMismatchError: self.columns != other.rows

        Examples:
            >>> a = Matrix.from_data([[1, 2, 3], [4, 5, 6]])
            >>> a.multiply(Matrix.from_data([[1, 2], [3, 4], [5, 6]])).data
            [[22.0, 28.0], [49.0, 64.0]]
        """
        self._require_matrix(other)
        handle_error(
            ErrorMessages.matrix_dimension_mismatch(MatrixOperation.MULTIPLICATION),
            self._columns != other._rows,
            DimensionMismatchError,
        )

        other_columns = list(zip(*other._data))
        return self._wrap(
            [
                [sum(a * b for a, b in zip(row, column)) for column in other_columns]
                for row in self._data
            ]
        )

    def scale(self, scalar: float) -> "Matrix":
        """Умножение каждого элемента на скаляр."""
        handle_error(
            ErrorMessages.INVALID_ARGUMENTS, not is_scalar(scalar), InvalidArgumentsError
        )
        return self._map(lambda value: value * scalar)

    def modulo(self, modulus: float) -> "Matrix":
        """
        Поэлементный остаток от деления.

        Усекающий остаток (math.fmod): знак результата следует за делимым,
        в отличие от оператора % для float в Python.

        Raises:
            InvalidArgumentsError: modulus не является скаляром
            ZeroDivisionError: modulus == 0

        Examples:
            >>> Matrix.from_data([[-7, 7]]).modulo(3).data
            [[-1.0, 1.0]]
        """
        handle_error(
            ErrorMessages.INVALID_ARGUMENTS, not is_scalar(modulus), InvalidArgumentsError
        )
        if modulus == 0:
            raise ZeroDivisionError("matrix modulo by zero")
        return self._map(lambda value: math.fmod(value, modulus))

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def is_square(self) -> bool:
        return self._rows == self._columns

    def is_symmetric(self) -> bool:
        return self.is_square() and self.equals(self.transpose())

    def is_identity(self) -> bool:
        """Квадратная, 1 на главной диагонали и 0 вне её (точное сравнение)."""
        if not self.is_square():
            return False
        return all(
            value == (1 if i == j else 0)
            for i, row in enumerate(self._data)
            for j, value in enumerate(row)
        )

    def is_same_order(self, other: "Matrix") -> bool:
        """Совпадение формы без сравнения значений."""
        return self._rows == other._rows and self._columns == other._columns

    def equals(self, other: object) -> bool:
        """Совпадение формы и точное равенство всех элементов."""
        if not isinstance(other, Matrix) or not self.is_same_order(other):
            return False
        return all(
            a == b
            for row, other_row in zip(self._data, other._data)
            for a, b in zip(row, other_row)
        )

    def is_close(
        self,
        other: "Matrix",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """
        Приближённое равенство: та же форма и все пары элементов близки.

        Args:
            other: Матрица для сравнения
            rel_tol: Относительная толерантность (default: EPS_FLOAT_COMPARE_REL)
            abs_tol: Абсолютная толерантность (default: EPS_FLOAT_COMPARE_ABS)
        """
        self._require_matrix(other)
        if not self.is_same_order(other):
            return False
        return all(
            is_close(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
            for row, other_row in zip(self._data, other._data)
            for a, b in zip(row, other_row)
        )

    # -------------------------------------------------------------------------
    # Мутации формы
    # -------------------------------------------------------------------------

    def set_shape(self, shape: Sequence[int]) -> None:
        """
        Переинициализация нулевой матрицей формы shape.

        Данные отбрасываются (не обрезаются и не дополняются).

        Raises:
            ShapeMismatchError: shape содержит не ровно два измерения
            InvalidArgumentsError: измерения не являются положительными int
        """
        handle_error(
            ErrorMessages.MATRIX_SHAPE_MISMATCH,
            not _is_array(shape) or len(shape) != 2,
            ShapeMismatchError,
        )
        rows, columns = shape
        handle_error(
            ErrorMessages.INVALID_ARGUMENTS,
            not (is_dimension(rows) and is_dimension(columns)),
            InvalidArgumentsError,
        )

        self._rows = rows
        self._columns = columns
        self._data = _zeros(rows, columns)

    def set_as_identity(self) -> None:
        """
        Единичная матрица на месте.

        Raises:
            NonSquareMatrixError: матрица не квадратная
        """
        self._require_square()
        self._data = [
            [1.0 if i == j else 0.0 for j in range(self._columns)]
            for i in range(self._rows)
        ]

    # -------------------------------------------------------------------------
    # Линейная алгебра
    # -------------------------------------------------------------------------

    def transpose(self) -> "Matrix":
        """columns × rows, result[i][j] = self[j][i]."""
        return self._wrap([list(column) for column in zip(*self._data)])

    def determinant(self) -> float:
        """
        Определитель разложением Лапласа по первой строке.

        Рекурсия факториальной сложности — рассчитано на матрицы малого порядка.
        Базовые случаи: 1×1 → единственный элемент, 2×2 → ad − bc.

        Raises:
            NonSquareMatrixError: матрица не квадратная

        Examples:
            >>> Matrix.from_data([[1, 2], [3, 4]]).determinant()
            -2.0
        """
        self._require_square()

        if self._rows == 1:
            return self._data[0][0]

        if self._rows == 2:
            (a, b), (c, d) = self._data
            return a * d - b * c

        return sum(
            value * self.get_cofactor(0, i) for i, value in enumerate(self._data[0])
        )

    def get_minor(self, row: int, column: int) -> "Matrix":
        """
        Минор: матрица без строки row и столбца column.

        Raises:
            IndexOutOfRangeError: индекс вне матрицы
            DimensionMismatchError: минор был бы пустым (одна строка/столбец)
        """
        self._check_bounds(row, column)
        handle_error(
            ErrorMessages.matrix_dimension_mismatch(),
            self._rows == 1 or self._columns == 1,
            DimensionMismatchError,
        )
        return self._wrap(
            [
                [value for j, value in enumerate(values) if j != column]
                for i, values in enumerate(self._data)
                if i != row
            ]
        )

    def get_cofactor(self, row: int, column: int) -> float:
        """
        Алгебраическое дополнение C(row, column) = (-1)^(row+column) · det(M).

        Для 1×1 матрицы минор пуст, его определитель равен 1.
        """
        if self._rows == 1 and self._columns == 1:
            self._check_bounds(row, column)
            return 1.0

        sign = -1.0 if (row + column) % 2 else 1.0
        return sign * self.get_minor(row, column).determinant()

    def cofactor_matrix(self) -> "Matrix":
        """Матрица алгебраических дополнений."""
        self._require_square()
        return self._wrap(
            [
                [self.get_cofactor(i, j) for j in range(self._columns)]
                for i in range(self._rows)
            ]
        )

    def adjugate(self) -> "Matrix":
        """Присоединённая матрица: транспонированная матрица дополнений."""
        return self.cofactor_matrix().transpose()

    def trace(self) -> float:
        """
        Сумма элементов главной диагонали.

        Raises:
            NonSquareMatrixError: матрица не квадратная
        """
        self._require_square()
        return sum(self._data[i][i] for i in range(self._rows))

    def inverse(self) -> "Matrix":
        """
        Обратная матрица adj(A) / det(A).

        Каждое дополнение делится на det, результат транспонируется.
        Проверка вырожденности — is_zero(det, DETERMINANT_ZERO_EPS), при
        значении по умолчанию 0.0 это точное сравнение: почти вырожденные
        матрицы обращаются без ошибки.

        Raises:
            NonSquareMatrixError: матрица не квадратная
            ZeroDeterminantError: det == 0

        Examples:
            >>> Matrix.from_data([[1, 2], [3, 4]]).inverse().data
            [[-2.0, 1.0], [1.5, -0.5]]
        """
        self._require_square()

        det = self.determinant()
        logger.debug("inverse of %dx%d matrix, det=%r", self._rows, self._columns, det)
        handle_error(
            ErrorMessages.zero_matrix_determinant(MatrixOperation.INVERSE),
            is_zero(det, tol=DETERMINANT_ZERO_EPS),
            ZeroDeterminantError,
        )

        scaled = [
            [self.get_cofactor(i, j) / det for j in range(self._columns)]
            for i in range(self._rows)
        ]
        return self._wrap(scaled).transpose()

    # -------------------------------------------------------------------------
    # Пространства и повороты
    # -------------------------------------------------------------------------

    def row_space(self) -> "Matrix":
        """Строки как есть (копия той же формы), без редукции базиса."""
        return self.clone()

    def col_space(self) -> "Matrix":
        """Столбцы как строки (транспонированная копия), без редукции базиса."""
        return self.transpose()

    def rotate(self, angle: float) -> "Matrix":
        """
        Поворот на угол, кратный 90°, по часовой стрелке.

        Угол в радианах при |angle| <= π, иначе в градусах. Нечётное число
        четвертей оборота меняет форму на columns × rows.

        Raises:
            InvalidArgumentsError: angle не является скаляром
            InvalidRotateAngleError: угол не кратен 90°

        Examples:
            >>> Matrix.from_data([[1, 2], [3, 4]]).rotate(math.pi / 2).data
            [[3.0, 1.0], [4.0, 2.0]]
        """
        handle_error(
            ErrorMessages.INVALID_ARGUMENTS, not is_scalar(angle), InvalidArgumentsError
        )

        result: Rows = self._data
        for _ in range(quarter_turns(angle)):
            result = rotate_90_clockwise(result)
        return self._wrap([row[:] for row in result])

    # -------------------------------------------------------------------------
    # Сериализация
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Представление по контракту matrix.json."""
        return {"rows": self._rows, "columns": self._columns, "data": self.to_list()}

    def to_json(self, **kwargs: Any) -> str:
        """JSON-текст to_dict(); kwargs передаются в json.dumps."""
        return json.dumps(self.to_dict(), **kwargs)

    def to_snapshot(self) -> MatrixSnapshot:
        """
        Immutable снимок текущего состояния.

        Raises:
            pydantic.ValidationError: матрица содержит NaN/Inf
        """
        return MatrixSnapshot(rows=self._rows, columns=self._columns, data=self.to_list())

    @classmethod
    def from_snapshot(cls, snapshot: MatrixSnapshot) -> "Matrix":
        return cls._wrap([[float(value) for value in row] for row in snapshot.data])

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "Matrix":
        """
        Матрица из словаря по контракту matrix.json.

        Двухуровневая проверка: JSON Schema (структура и типы), затем
        MatrixSnapshot (согласованность rows/columns с data).

        Raises:
            jsonschema.ValidationError: нарушение схемы
            pydantic.ValidationError: форма data не совпадает с rows/columns
        """
        validate_matrix(payload)
        snapshot = MatrixSnapshot.model_validate(payload)
        logger.debug("deserialized %dx%d matrix", snapshot.rows, snapshot.columns)
        return cls.from_snapshot(snapshot)

    @classmethod
    def from_json(cls, text: str | bytes) -> "Matrix":
        return cls.from_dict(json.loads(text))

    # -------------------------------------------------------------------------
    # Операторы и протоколы
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    def __add__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __matmul__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __mul__(self, other: object) -> "Matrix":
        if not is_scalar(other):
            return NotImplemented
        return self.scale(other)

    __rmul__ = __mul__

    def __mod__(self, other: object) -> "Matrix":
        if not is_scalar(other):
            return NotImplemented
        return self.modulo(other)

    def __neg__(self) -> "Matrix":
        return self.scale(-1)

    def __len__(self) -> int:
        return self._rows

    def __iter__(self) -> Iterator[list[float]]:
        for row in self._data:
            yield row[:]

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, columns={self._columns}, data={self._data!r})"

    # -------------------------------------------------------------------------
    # Приватные проверки
    # -------------------------------------------------------------------------

    def _check_bounds(self, row: int, column: int) -> None:
        handle_error(
            ErrorMessages.INVALID_ARGUMENTS,
            not (_is_index(row) and _is_index(column)),
            InvalidArgumentsError,
        )
        handle_error(
            ErrorMessages.INDEX_OUT_OF_RANGE,
            row < 0 or row >= self._rows or column < 0 or column >= self._columns,
            IndexOutOfRangeError,
        )

    def _require_square(self) -> None:
        handle_error(
            ErrorMessages.NON_SQUARE_MATRIX, not self.is_square(), NonSquareMatrixError
        )

    def _require_matrix(self, other: object) -> None:
        handle_error(
            ErrorMessages.INVALID_ARGUMENTS,
            not isinstance(other, Matrix),
            InvalidArgumentsError,
        )

    def _elementwise(
        self,
        other: "Matrix",
        op: Callable[[float, float], float],
        operation: MatrixOperation,
    ) -> "Matrix":
        self._require_matrix(other)
        handle_error(
            ErrorMessages.matrix_dimension_mismatch(operation),
            not self.is_same_order(other),
            DimensionMismatchError,
        )
        return self._wrap(
            [
                [op(a, b) for a, b in zip(row, other_row)]
                for row, other_row in zip(self._data, other._data)
            ]
        )

    def _map(self, fn: Callable[[float], float]) -> "Matrix":
        return self._wrap([[fn(value) for value in row] for row in self._data])
