from unittest.mock import MagicMock

import pytest
import redis


@pytest.fixture
def app_prefix():
    """Provide a consistent Redis key prefix for testing."""
    return 'testapp:test'


@pytest.fixture
def redis_client():
    """Mock a Redis client whose pipeline() yields itself."""
    _redis_client = MagicMock(
        spec=redis.Redis,
        connection_pool=MagicMock(spec=redis.ConnectionPool, connection_kwargs={'host': 'redis.test', 'port': 6379, 'db': 0}),
    )
    _redis_client.ping.return_value = True

    pipeline = MagicMock(spec=redis.client.Pipeline)
    pipeline.__enter__.return_value = pipeline
    pipeline.__exit__.return_value = None
    _redis_client.pipeline.return_value = pipeline
    return _redis_client


@pytest.fixture
def pipeline(redis_client):
    return redis_client.pipeline.return_value
