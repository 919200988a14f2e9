"""Pytest configuration and shared fixtures.

This configuration ensures:
1. Builders get a mock logger (no structlog output in unit tests)
2. Container caches are rebuilt around tests that patch settings
"""

from unittest.mock import Mock

import pytest

from errx.core.container import get_call_site_resolver, get_logger


@pytest.fixture
def mock_logger():
    """Create a Mock satisfying LoggerProtocol."""
    return Mock()


@pytest.fixture
def fresh_container():
    """Clear cached container singletons before and after the test.

    Tests that patch settings or adapters must not leak the patched
    singletons into later tests.
    """
    get_logger.cache_clear()
    get_call_site_resolver.cache_clear()
    yield
    get_logger.cache_clear()
    get_call_site_resolver.cache_clear()
