"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors.

    Used in validation errors to indicate which field failed and why.
    """

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "loan_term_months",
                "message": "Input should be less than or equal to 84",
                "code": "less_than_equal",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Supports:
    - Simple errors (just detail and code)
    - Multi-field validation errors (detail + errors array)

    Examples:
        Unexpected failure:
            {
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR"
            }

        Validation error with multiple fields:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "vehicle_price",
                        "message": "Must be greater than or equal to 0",
                        "code": "TOO_SMALL"
                    }
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "An unexpected error occurred", "code": "INTERNAL_ERROR"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "vehicle_price",
                            "message": "Must be greater than or equal to 0",
                            "code": "TOO_SMALL",
                        },
                        {
                            "field": "sales_tax_rate",
                            "message": "Must be less than or equal to 15",
                            "code": "TOO_BIG",
                        },
                    ],
                },
            ]
        }
    )
