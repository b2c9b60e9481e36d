"""
Customer data models for the Customer API.

Customer records are deliberately open: any field may be supplied, and only
the presence of a name and an address is enforced.
"""

from collections.abc import Mapping
from typing import Any, Dict

from pydantic import BaseModel, Field

# A customer is a free-form mapping of field name to value
CustomerRecord = Dict[str, Any]

REQUIRED_FIELDS = ("name", "address")


def validate_customer_data(data: Any) -> bool:
    """
    Check that customer data carries every required field.

    A field set to None counts as missing. Types, emptiness and format
    are not checked.

    Args:
        data: Decoded request payload (may be None or a non-mapping)

    Returns:
        True if every required field is present
    """
    if not isinstance(data, Mapping):
        return False
    return all(data.get(field) is not None for field in REQUIRED_FIELDS)


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""

    error: str = Field(description="Human readable error message")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
    customers_count: int
    timestamp: str
