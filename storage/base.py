"""
Customer database interface for the Customer API.

The HTTP layer talks to storage only through this interface, so any
backend that implements it can be injected into the API.
"""

from abc import ABC, abstractmethod
from typing import Any, List

from models.customer import CustomerRecord, validate_customer_data


class CustomerDatabase(ABC):
    """Abstract customer storage backend."""

    @abstractmethod
    async def list_customers(self) -> List[CustomerRecord]:
        """Return every stored customer in insertion order."""
        pass

    @abstractmethod
    async def save_customer(self, customer_data: Any) -> bool:
        """
        Store a new customer.

        Args:
            customer_data: Decoded customer payload

        Returns:
            True if the customer was stored, False if the data was invalid
        """
        pass

    @abstractmethod
    async def update_customer(self, customer_id: Any, customer_data: Any) -> bool:
        """
        Replace the customer stored at the given position.

        Args:
            customer_id: Position of the customer to replace
            customer_data: Decoded customer payload

        Returns:
            True if the customer was replaced, False if the position is
            empty or the data was invalid
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored customers."""
        pass

    @staticmethod
    def validate_customer_data(customer_data: Any) -> bool:
        """Check that the customer data has a name and an address."""
        return validate_customer_data(customer_data)
