"""Pytest fixtures for products API client tests."""

import httpx
import pytest

from dummyjson.integrations.contracts.interfaces import Product


@pytest.fixture
def sample_product():
    return Product(
        title="Test Product",
        description="This is a test product",
        price=1999,
        brand="Test Brand",
        category="Test Category",
    )


@pytest.fixture
def mock_http_client():
    """Build an httpx.Client whose requests are answered by ``handler``."""
    clients = []

    def _make(handler):
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()
