"""
Shared test fixtures and configuration.

Environment strategy:
- Unit tests use .env.test (isolated defaults, DEBUG logging)
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

ENV_FILE = Path(__file__).parent.parent / ".env.test"

load_dotenv(ENV_FILE, override=True)

from katas.domain.catalog import KataCatalog


@pytest.fixture
def kata_catalog() -> KataCatalog:
    """Load the catalog shipped with the package."""
    return KataCatalog.default()
