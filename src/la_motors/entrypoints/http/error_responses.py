"""REST API error response models.

Every non-2xx response carries this shape; routes reference it in their
OpenAPI `responses` so clients see it documented.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Single field-level failure inside a validation error."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "price",
                "message": "Must be greater than 0",
                "code": "OUT_OF_RANGE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {"detail": "Vehicle with identifier '...' not found", "code": "NOT_FOUND"}

        Store rejection:
            {"detail": "Failed to create vehicle: duplicate key ...", "code": "PERSISTENCE_ERROR"}

        Validation error with multiple fields:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "make", "message": "Must not be empty", "code": "REQUIRED"},
                    {"field": "year", "message": "Must be between 1900 and 2027", "code": "OUT_OF_RANGE"}
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Vehicle not found", "code": "NOT_FOUND"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "make",
                            "message": "Must not be empty",
                            "code": "REQUIRED",
                        },
                        {
                            "field": "price",
                            "message": "Must be greater than 0",
                            "code": "OUT_OF_RANGE",
                        },
                    ],
                },
            ]
        }
    )
