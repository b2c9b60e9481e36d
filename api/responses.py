"""
JSON response helpers for the Customer API.

Every response carries a JSON body: the payload on success, or an
``{"error": message}`` object on failure.
"""

from typing import Any

from fastapi.responses import JSONResponse
from models.customer import ErrorResponse


class ApiResponse:
    """Builds success and error responses."""

    @staticmethod
    def success(data: Any = None, status_code: int = 200) -> JSONResponse:
        """Serialize data (or null) with the given status code."""
        return JSONResponse(content=data, status_code=status_code)

    @staticmethod
    def error(message: str, status_code: int = 400) -> JSONResponse:
        """Wrap an error message in an error body with the given status code."""
        body = ErrorResponse(error=message)
        return JSONResponse(content=body.model_dump(), status_code=status_code)
