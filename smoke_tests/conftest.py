"""Pytest configuration and fixtures for smoke tests.

Smoke tests verify basic package health:
- Package imports
- Type checking
"""

from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).parent.parent
SRC_DIR = PROJECT_ROOT / "src"
PACKAGE_DIR = SRC_DIR / "rabbitmq_topology"


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory path."""
    return PROJECT_ROOT


@pytest.fixture
def package_dir() -> Path:
    """Return the rabbitmq_topology package directory path."""
    return PACKAGE_DIR
