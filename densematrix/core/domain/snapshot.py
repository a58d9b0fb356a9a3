"""
MatrixSnapshot — Сериализуемое представление матрицы

Immutable Pydantic модель: форма (rows, columns) и данные построчно.
Используется Matrix.to_snapshot/from_snapshot и как второй уровень проверки
после JSON Schema контракта (contracts/schema/matrix.json): схема проверяет
типы и структуру, модель — согласованность формы и данных.
"""

from pydantic import BaseModel, Field, field_validator, model_validator

from densematrix.core.math.numerical_safeguards import is_valid_float


# =============================================================================
# SNAPSHOT MODEL
# =============================================================================


class MatrixSnapshot(BaseModel):
    """
    Снимок матрицы.

    Immutable модель (frozen=True): снимок не связан с исходной матрицей,
    изменения матрицы после to_snapshot() на него не влияют.
    """

    rows: int = Field(..., ge=1, description="Количество строк")
    columns: int = Field(..., ge=1, description="Количество столбцов")
    data: list[list[float]] = Field(
        ..., min_length=1, description="Элементы построчно (rows × columns)"
    )

    model_config = {"frozen": True}

    @field_validator("data")
    @classmethod
    def validate_finite(cls, v: list[list[float]]) -> list[list[float]]:
        """NaN/Inf не представимы в JSON контракте."""
        for row in v:
            for value in row:
                if not is_valid_float(value):
                    raise ValueError(f"data contains NaN/Inf: {value}")
        return v

    @model_validator(mode="after")
    def validate_shape(self) -> "MatrixSnapshot":
        """Проверка rows × columns против фактической формы data."""
        if len(self.data) != self.rows:
            raise ValueError(
                f"data has {len(self.data)} rows, expected {self.rows}"
            )
        for index, row in enumerate(self.data):
            if len(row) != self.columns:
                raise ValueError(
                    f"data row {index} has {len(row)} elements, expected {self.columns}"
                )
        return self

    @property
    def shape(self) -> tuple[int, int]:
        """Форма (rows, columns)."""
        return (self.rows, self.columns)
