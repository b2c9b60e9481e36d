"""
API module for the Customer API.

This package contains the HTTP request dispatcher and the JSON response
helpers for the customer endpoint.
"""

from .customers import CustomerAPI
from .responses import ApiResponse

__all__ = [
    "ApiResponse",
    "CustomerAPI",
]
