"""
Test suite for the Customer API.

This package contains unit tests for the models, storage and response
helpers, and integration tests for the HTTP endpoint.
"""

import sys
from pathlib import Path

# Add the project root to Python path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
