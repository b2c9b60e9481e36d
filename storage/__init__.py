"""
Storage module for the Customer API.

This package provides the customer database interface and its in-memory
implementation.
"""

from .base import CustomerDatabase
from .memory import InMemoryCustomerDatabase

__all__ = [
    "CustomerDatabase",
    "InMemoryCustomerDatabase",
]
