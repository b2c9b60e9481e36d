"""
Models module for the Customer API.

This package contains the customer record definition, its validation
rule and the response bodies used by the HTTP layer.
"""

from .customer import (
    REQUIRED_FIELDS,
    CustomerRecord,
    ErrorResponse,
    HealthResponse,
    validate_customer_data,
)

__all__ = [
    "REQUIRED_FIELDS",
    "CustomerRecord",
    "ErrorResponse",
    "HealthResponse",
    "validate_customer_data",
]
