"""Pytest configuration.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/
and the project root on sys.path so ``tests.*`` helpers import cleanly.
"""

import pytest

from forbid_imports.infrastructure.di.container import ForbidImportsContainer


@pytest.fixture(autouse=True)
def _fresh_container():
    """The plugin container caches pyproject config per process; drop it around each test."""
    ForbidImportsContainer.reset()
    yield
    ForbidImportsContainer.reset()
