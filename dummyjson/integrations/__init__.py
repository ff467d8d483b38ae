"""
Integrations layer.
This package contains all code used to communicate with the products API:
- contracts: the Product record and the client/encoder interfaces
- clients: the real HTTP client and a mock for tests
- policy: normalization of API responses into contracts

Key rule:
- Callers depend on ProductsClient, never on httpx directly.
"""

from .contracts.interfaces import JSONProductEncoder, Product, ProductEncoder, ProductsClient
from .errors import (
    DecodeError,
    ProductSubmissionError,
    RemoteRejectionError,
    RequestConstructionError,
    SerializationError,
    TransportError,
)

__all__ = [
    # contracts
    "JSONProductEncoder", "Product", "ProductEncoder", "ProductsClient",
    # errors
    "DecodeError", "ProductSubmissionError", "RemoteRejectionError",
    "RequestConstructionError", "SerializationError", "TransportError",
]
