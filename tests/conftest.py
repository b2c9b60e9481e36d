"""
Pytest configuration and shared fixtures for Customer API tests.
"""

import pytest
from api.customers import CustomerAPI
from fastapi.testclient import TestClient
from storage.memory import InMemoryCustomerDatabase


@pytest.fixture
def database():
    """Create an empty in-memory customer database."""
    return InMemoryCustomerDatabase()


@pytest.fixture
def customer_api(database):
    """Create a Customer API bound to the test database."""
    return CustomerAPI(database=database)


@pytest.fixture
def client(customer_api):
    """Create a test client for the Customer API app."""
    return TestClient(customer_api.app)


@pytest.fixture
def sample_customers():
    """Valid customer records."""
    return [
        {"name": "Ann", "address": "1 Main St"},
        {"name": "Bob", "address": "2 Oak Ave", "phone": "+1-555-0123"},
        {"name": "Cleo", "address": "3 Pine Rd", "email": "cleo@example.com"},
    ]


@pytest.fixture
def invalid_customers():
    """Customer payloads that fail the presence check."""
    return [
        {"name": "Ann"},
        {"address": "1 Main St"},
        {},
        {"name": None, "address": "1 Main St"},
        None,
        ["Ann", "1 Main St"],
        "Ann",
    ]
