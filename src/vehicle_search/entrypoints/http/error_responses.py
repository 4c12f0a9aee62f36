"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Field-level error, used when paging parameters fail validation."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "limit",
                "message": "Input should be less than or equal to 200",
                "code": "less_than_equal",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Upstream failure:
            {
                "detail": "Listing store is unavailable",
                "code": "UPSTREAM_ERROR"
            }

        Validation error with field details:
            {
                "detail": "Invalid request parameters",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "offset", "message": "...", "code": "greater_than_equal"}
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Listing store is unavailable", "code": "UPSTREAM_ERROR"},
                {
                    "detail": "Invalid request parameters",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "offset",
                            "message": "Input should be greater than or equal to 0",
                            "code": "greater_than_equal",
                        },
                    ],
                },
            ]
        }
    )
