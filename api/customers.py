"""
FastAPI application for the Customer API.

This module exposes a single customer endpoint whose behaviour depends on
the HTTP method: GET lists customers, POST creates one from a JSON body and
PUT replaces one from a form-encoded body carrying its position as ``id``.
"""

import json
import logging
import re
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from urllib.parse import parse_qsl

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from models.customer import HealthResponse
from storage.base import CustomerDatabase
from storage.memory import InMemoryCustomerDatabase

from api.responses import ApiResponse

SERVICE_NAME = "Customer API"
SERVICE_VERSION = "1.0.0"

# Every method is routed to the dispatcher so unsupported ones get a JSON 405
ROUTED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]

INVALID_CUSTOMER = "Invalid customer data"
INVALID_UPDATE = "Invalid customer data or customer ID not found"
METHOD_NOT_ALLOWED = "Method not allowed"

_CUSTOMER_ID_RE = re.compile(r"0|[1-9][0-9]*")


class CustomerAPI:
    """
    HTTP front end for a customer database.

    Dispatches requests on the customer endpoint by method and turns
    database results into JSON responses.
    """

    def __init__(self, database: Optional[CustomerDatabase] = None, path: str = "/api/customers"):
        """
        Initialize the Customer API.

        Args:
            database: Customer storage backend (a fresh in-memory one if omitted)
            path: URL path of the customer endpoint
        """
        self.database = database if database is not None else InMemoryCustomerDatabase()
        self.path = path

        # Setup logging
        self.logger = logging.getLogger("api.customers")

        self.handlers = {
            "GET": self.handle_get_request,
            "POST": self.handle_post_request,
            "PUT": self.handle_put_request,
        }

        # Create FastAPI app
        self.app = self._create_app()

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=SERVICE_NAME,
            description="In-memory customer list, create and update service",
            version=SERVICE_VERSION,
        )

        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        # Route handlers
        app.api_route(self.path, methods=ROUTED_METHODS)(self.handle_request)
        app.get("/health", response_model=HealthResponse)(self.health_endpoint)
        app.get("/")(self.root_endpoint)

        return app

    async def handle_request(self, request: Request) -> JSONResponse:
        """Route a customer request to the handler for its method."""
        handler = self.handlers.get(request.method)
        if handler is None:
            self.logger.warning(f"Method not allowed: {request.method}")
            return ApiResponse.error(METHOD_NOT_ALLOWED, 405)

        try:
            return await handler(request)
        except Exception as e:
            self.logger.error(f"Error handling {request.method} request: {str(e)}")
            return ApiResponse.error("Internal server error", 500)

    async def handle_get_request(self, request: Request) -> JSONResponse:
        """List all customers."""
        customers = await self.database.list_customers()
        self.logger.info(f"Listed {len(customers)} customers")
        return ApiResponse.success(customers)

    async def handle_post_request(self, request: Request) -> JSONResponse:
        """Create a customer from a JSON body."""
        post_data = decode_json_body(await request.body())

        if await self.database.save_customer(post_data):
            return ApiResponse.success(None, 201)
        return ApiResponse.error(INVALID_CUSTOMER, 400)

    async def handle_put_request(self, request: Request) -> JSONResponse:
        """Replace a customer from a form-encoded body carrying its ``id``."""
        put_data = decode_form_body(await request.body())
        customer_id = parse_customer_id(put_data.pop("id", None))

        if await self.database.update_customer(customer_id, put_data):
            return ApiResponse.success()
        return ApiResponse.error(INVALID_UPDATE, 400)

    async def health_endpoint(self) -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(
            status="healthy",
            service=SERVICE_NAME,
            customers_count=await self.database.count(),
            timestamp=datetime.now(timezone.utc).isoformat(),
        )

    async def root_endpoint(self):
        """Root endpoint with API information."""
        return {
            "service": SERVICE_NAME,
            "version": SERVICE_VERSION,
            "endpoints": {
                "customers": self.path,
                "health": "/health",
                "docs": "/docs",
            },
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }


def decode_json_body(body: bytes) -> Any:
    """Decode a JSON request body, returning None if it is not valid JSON."""
    try:
        return json.loads(body)
    except ValueError:
        return None


def decode_form_body(body: bytes) -> Dict[str, str]:
    """Decode a form-encoded request body; repeated keys keep the last value."""
    return dict(parse_qsl(body.decode("utf-8", errors="replace"), keep_blank_values=True))


def parse_customer_id(raw_id: Optional[str]) -> Optional[int]:
    """
    Turn a submitted ``id`` into a list position.

    Only canonical non-negative integers ("0", "12") are positions;
    anything else ("01", "-1", "abc", missing) yields None.
    """
    if raw_id is None or not _CUSTOMER_ID_RE.fullmatch(raw_id):
        return None
    return int(raw_id)


# FastAPI app instance for external use
customer_api = CustomerAPI()
app = customer_api.app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.customers:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )
