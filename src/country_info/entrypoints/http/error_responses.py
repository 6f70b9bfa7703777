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
                "field": "page_size",
                "message": "Input should be less than or equal to 200",
                "code": "less_than_equal",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Supports:
    - Simple errors (just detail and code)
    - Multi-field validation errors (detail + errors array)
    - Upstream failures (detail + code + kind of fetch failure)

    Examples:
        Dataset still loading:
            {
                "detail": "Countries are still loading",
                "code": "NOT_READY"
            }

        Upstream failure:
            {
                "detail": "HTTP error! status: 500",
                "code": "UPSTREAM_UNAVAILABLE",
                "kind": "http_status"
            }
    """

    detail: str
    code: str | None = None
    kind: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Countries are still loading", "code": "NOT_READY"},
                {
                    "detail": "HTTP error! status: 500",
                    "code": "UPSTREAM_UNAVAILABLE",
                    "kind": "http_status",
                },
                {
                    "detail": "Invalid request parameters",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "page",
                            "message": "Input should be greater than or equal to 1",
                            "code": "greater_than_equal",
                        },
                    ],
                },
            ]
        }
    )
