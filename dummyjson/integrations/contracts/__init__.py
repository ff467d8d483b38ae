"""
Contracts (data models).

This folder defines the request/response shapes for the products API:
- the Product record sent to and returned from the create endpoint
- the encoder capability used to build request bodies
- the ProductsClient interface shared by mock and real clients

Both mock and real HTTP clients should use these contracts.
"""

from .interfaces import JSONProductEncoder, Product, ProductEncoder, ProductsClient

__all__ = ["JSONProductEncoder", "Product", "ProductEncoder", "ProductsClient"]
