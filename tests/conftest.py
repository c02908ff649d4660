"""
Shared fixtures for resource store tests.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from resource_store.builder import ResourceStore
from resource_store.config import StoreSettings


@pytest.fixture
def settings():
    """Settings isolated from the developer's environment."""
    return StoreSettings(
        api_base_url="http://api.test",
        request_timeout=5.0,
        default_group_key="default",
        auth_token=None,
    )


@pytest.fixture
def mock_transport():
    """Transport double with an AsyncMock per operation."""
    transport = MagicMock()
    transport.list = AsyncMock(return_value=[])
    transport.fetch_one = AsyncMock()
    transport.create = AsyncMock()
    transport.update = AsyncMock()
    transport.delete = AsyncMock(return_value=None)
    return transport


@pytest.fixture
def store(mock_transport):
    """Resource store wired to the mock transport."""
    return ResourceStore("templates", mock_transport)
