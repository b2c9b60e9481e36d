#!/usr/bin/env python3
"""
Start the Customer API.

This script builds the customer service around a fresh in-memory database
and serves it with uvicorn.
"""

import argparse
import logging
import sys

import uvicorn

from api.customers import CustomerAPI
from storage.memory import InMemoryCustomerDatabase

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Customer API - in-memory customer service")
    parser.add_argument("--host", default="0.0.0.0", help="Interface to bind")
    parser.add_argument("--port", type=int, default=8000, help="Port to listen on")
    parser.add_argument("--path", default="/api/customers", help="URL path of the customer endpoint")
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default="info",
        help="Logging level",
    )
    return parser.parse_args(argv)


def main(argv=None) -> None:
    """Configure logging and serve the Customer API."""
    args = parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format=LOG_FORMAT)

    api = CustomerAPI(database=InMemoryCustomerDatabase(), path=args.path)
    logger.info(f"Serving customers at http://{args.host}:{args.port}{args.path}")

    uvicorn.run(api.app, host=args.host, port=args.port, log_level=args.log_level)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        logger.info("Shutting down")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(1)
