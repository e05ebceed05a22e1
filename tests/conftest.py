"""Pytest configuration for django-kvcommands tests.

Backend calls are made against MagicMock / AsyncMock clients handed out by a
real ConnectionRegistry, so no server is needed.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from django_kvcommands.dispatch import CommandDispatcher
from django_kvcommands.pool import ConnectionRegistry
from django_kvcommands.server import ServerIdentity


@pytest.fixture
def server():
    return ServerIdentity(host="127.0.0.1", port=6379, db=1, allow_admin=True)


@pytest.fixture
def client():
    """Sync redis client stand-in; ``client.pipeline()`` returns ``client.pipe``."""
    mock = MagicMock(name="redis")
    mock.pipe = MagicMock(name="pipeline")
    mock.pipeline.return_value = mock.pipe
    return mock


@pytest.fixture
def async_client():
    """Async redis client stand-in; queuing on the pipeline is sync, execute is awaited."""
    mock = AsyncMock(name="async_redis")
    mock.pipe = MagicMock(name="async_pipeline")
    mock.pipe.execute = AsyncMock()
    mock.pipeline = MagicMock(return_value=mock.pipe)
    return mock


@pytest.fixture
def registry(client, async_client):
    return ConnectionRegistry(
        options={
            "client_class": MagicMock(return_value=client),
            "async_client_class": MagicMock(return_value=async_client),
        },
    )


@pytest.fixture
def dispatcher(registry):
    return CommandDispatcher(registry)
