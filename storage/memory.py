"""
In-memory customer database for the Customer API.

Customers live in a list for the lifetime of the database instance and
are identified by their position in it. Data is lost on restart.
"""

import asyncio
import logging
from typing import Any, List

from models.customer import CustomerRecord

from storage.base import CustomerDatabase


class InMemoryCustomerDatabase(CustomerDatabase):
    """List-backed customer database."""

    def __init__(self):
        """Initialize an empty database."""
        self.logger = logging.getLogger("storage.memory")

        self.customers: List[CustomerRecord] = []

        # Serializes writers sharing this instance
        self._lock = asyncio.Lock()

    async def list_customers(self) -> List[CustomerRecord]:
        """Return copies of all customers in insertion order."""
        return [dict(customer) for customer in self.customers]

    async def save_customer(self, customer_data: Any) -> bool:
        """Append a customer if it passes validation."""
        if not self.validate_customer_data(customer_data):
            self.logger.warning("Rejected invalid customer data")
            return False

        async with self._lock:
            self.customers.append(dict(customer_data))
            position = len(self.customers) - 1

        self.logger.info(f"Saved customer at position {position}")
        return True

    async def update_customer(self, customer_id: Any, customer_data: Any) -> bool:
        """Overwrite an existing customer if the new data passes validation."""
        async with self._lock:
            if not self._has_customer(customer_id) or not self.validate_customer_data(customer_data):
                self.logger.warning(f"Rejected update for customer {customer_id!r}")
                return False

            self.customers[customer_id] = dict(customer_data)

        self.logger.info(f"Updated customer at position {customer_id}")
        return True

    async def count(self) -> int:
        """Return the number of stored customers."""
        return len(self.customers)

    def _has_customer(self, customer_id: Any) -> bool:
        """Check whether a customer is stored at the given position."""
        # bool is an int subclass but never a valid position
        if not isinstance(customer_id, int) or isinstance(customer_id, bool):
            return False
        return 0 <= customer_id < len(self.customers)
