"""
Unit tests for customer models.

Tests the presence-only validation rule and the response bodies.
"""

import pytest
from models.customer import REQUIRED_FIELDS, ErrorResponse, HealthResponse, validate_customer_data


class TestValidateCustomerData:
    """Test cases for validate_customer_data."""

    def test_required_fields(self):
        """Test that name and address are the required fields."""
        assert REQUIRED_FIELDS == ("name", "address")

    def test_valid_minimal_customer(self):
        """Test a customer with only the required fields."""
        assert validate_customer_data({"name": "Ann", "address": "1 Main St"}) is True

    def test_extra_fields_allowed(self):
        """Test that additional fields do not affect validation."""
        customer = {"name": "Ann", "address": "1 Main St", "phone": "+1-555-0123", "vip": True}
        assert validate_customer_data(customer) is True

    def test_empty_values_are_present(self):
        """Test that empty strings still count as present."""
        assert validate_customer_data({"name": "", "address": ""}) is True

    def test_types_not_checked(self):
        """Test that field types are not checked."""
        assert validate_customer_data({"name": 42, "address": ["somewhere"]}) is True

    @pytest.mark.parametrize(
        "data",
        [
            {"name": "Ann"},
            {"address": "1 Main St"},
            {},
            {"name": None, "address": "1 Main St"},
            {"name": "Ann", "address": None},
        ],
    )
    def test_missing_field(self, data):
        """Test that a missing or null required field fails validation."""
        assert validate_customer_data(data) is False

    @pytest.mark.parametrize("data", [None, [], ["name", "address"], "name", 0])
    def test_non_mapping(self, data):
        """Test that non-mapping payloads fail validation."""
        assert validate_customer_data(data) is False


class TestResponseModels:
    """Test cases for response body models."""

    def test_error_response(self):
        """Test error response serialization."""
        body = ErrorResponse(error="Invalid customer data")
        assert body.model_dump() == {"error": "Invalid customer data"}

    def test_health_response(self):
        """Test health response creation."""
        health = HealthResponse(
            status="healthy",
            service="Customer API",
            customers_count=3,
            timestamp="2024-01-15T10:30:00+00:00",
        )

        assert health.status == "healthy"
        assert health.customers_count == 3
