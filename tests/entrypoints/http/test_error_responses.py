"""Tests for REST error response models."""

from vehicle_search.entrypoints.http.error_responses import ErrorDetail, ErrorResponse


class TestErrorDetail:
    def test_creates_error_detail_with_all_fields(self) -> None:
        detail = ErrorDetail(field="limit", message="Must be <= 200", code="less_than_equal")

        assert detail.model_dump() == {
            "field": "limit",
            "message": "Must be <= 200",
            "code": "less_than_equal",
        }

    def test_code_is_optional(self) -> None:
        detail = ErrorDetail(field="offset", message="Must be positive")

        assert detail.code is None


class TestErrorResponse:
    def test_creates_upstream_error_response(self) -> None:
        response = ErrorResponse(detail="Listing store is unavailable", code="UPSTREAM_ERROR")

        assert response.model_dump() == {
            "detail": "Listing store is unavailable",
            "code": "UPSTREAM_ERROR",
            "errors": None,
        }

    def test_parses_validation_error_from_dict(self) -> None:
        data = {
            "detail": "Invalid request parameters",
            "code": "VALIDATION_ERROR",
            "errors": [{"field": "limit", "message": "Too large", "code": "less_than_equal"}],
        }

        response = ErrorResponse.model_validate(data)

        assert response.errors is not None
        assert response.errors[0].field == "limit"
        assert response.errors[0].code == "less_than_equal"

    def test_serializes_to_json(self) -> None:
        response = ErrorResponse(
            detail="Invalid request parameters",
            code="VALIDATION_ERROR",
            errors=[ErrorDetail(field="offset", message="Must be >= 0")],
        )

        json_str = response.model_dump_json()

        assert '"code":"VALIDATION_ERROR"' in json_str
        assert '"field":"offset"' in json_str


class TestSchemaExamples:
    def test_error_response_examples_are_valid(self) -> None:
        schema = ErrorResponse.model_json_schema()

        assert len(schema["examples"]) >= 2
        for example in schema["examples"]:
            response = ErrorResponse.model_validate(example)
            assert response.code is not None

        assert ErrorResponse.model_validate(schema["examples"][1]).errors

    def test_error_detail_example_is_valid(self) -> None:
        example = ErrorDetail.model_json_schema()["example"]

        detail = ErrorDetail.model_validate(example)

        assert detail.field == "limit"
