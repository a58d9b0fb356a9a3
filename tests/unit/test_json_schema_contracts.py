"""
Tests for JSON Schema Contract Validators

Комплексное тестирование matrix контракта:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и constraints
- Интеграция с MatrixSnapshot и Matrix.from_dict
"""

import pytest
from jsonschema import ValidationError
from pydantic import ValidationError as PydanticValidationError

from densematrix.core.contracts import (
    MatrixValidator,
    SchemaLoader,
    validate_matrix,
)
from densematrix.core.domain import Matrix, MatrixSnapshot


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_matrix_payload():
    """Валидная сериализованная матрица 2×3."""
    return {
        "rows": 2,
        "columns": 3,
        "data": [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]],
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Загрузка и meta-валидация схем"""

    def test_load_matrix_schema(self):
        schema = SchemaLoader().load_schema("matrix")
        assert schema["title"] == "matrix"
        assert set(schema["required"]) == {"rows", "columns", "data"}

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("matrix") is loader.load_schema("matrix")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nowhere")

    def test_invalid_schema_rejected(self, tmp_path):
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# MATRIX CONTRACT
# =============================================================================


class TestMatrixContract:
    """Валидация matrix контракта"""

    def test_valid_payload(self, valid_matrix_payload):
        validate_matrix(valid_matrix_payload)
        assert MatrixValidator().is_valid(valid_matrix_payload)

    @pytest.mark.parametrize("field", ["rows", "columns", "data"])
    def test_missing_required_field(self, valid_matrix_payload, field):
        del valid_matrix_payload[field]
        with pytest.raises(ValidationError):
            validate_matrix(valid_matrix_payload)

    def test_non_positive_dimension(self, valid_matrix_payload):
        valid_matrix_payload["rows"] = 0
        with pytest.raises(ValidationError):
            validate_matrix(valid_matrix_payload)

    def test_non_numeric_element(self, valid_matrix_payload):
        valid_matrix_payload["data"][0][1] = "2"
        with pytest.raises(ValidationError):
            validate_matrix(valid_matrix_payload)

    def test_empty_data(self, valid_matrix_payload):
        valid_matrix_payload["data"] = []
        assert not MatrixValidator().is_valid(valid_matrix_payload)

    def test_additional_property(self, valid_matrix_payload):
        valid_matrix_payload["dtype"] = "float64"
        errors = list(MatrixValidator().iter_errors(valid_matrix_payload))
        assert len(errors) == 1

    def test_schema_does_not_check_shape_consistency(self, valid_matrix_payload):
        """Согласованность rows/columns и data — задача MatrixSnapshot"""
        valid_matrix_payload["rows"] = 3
        validate_matrix(valid_matrix_payload)
        with pytest.raises(PydanticValidationError):
            MatrixSnapshot.model_validate(valid_matrix_payload)


# =============================================================================
# ИНТЕГРАЦИЯ С Matrix
# =============================================================================


class TestMatrixFromDict:
    """Matrix.from_dict: схема, затем pydantic модель"""

    def test_from_dict(self, valid_matrix_payload):
        matrix = Matrix.from_dict(valid_matrix_payload)
        assert matrix.shape == (2, 3)
        assert matrix.data == [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]

    def test_schema_violation_surfaces(self, valid_matrix_payload):
        valid_matrix_payload["data"] = "not a matrix"
        with pytest.raises(ValidationError):
            Matrix.from_dict(valid_matrix_payload)

    def test_ragged_data_rejected_by_model(self, valid_matrix_payload):
        valid_matrix_payload["data"] = [[1.0, 2.0, 3.0], [4.0, 5.0]]
        with pytest.raises(PydanticValidationError):
            Matrix.from_dict(valid_matrix_payload)

    def test_round_trip_through_json(self):
        original = Matrix.from_data([[1.5, -2.0], [0.0, 4.25]])
        restored = Matrix.from_json(original.to_json())
        assert restored.equals(original)
        assert restored is not original
