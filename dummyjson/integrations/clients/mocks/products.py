"""
Mock Products Client.

Purpose:
- Provides a fake products integration used for development/testing
- Does NOT make any network calls
- Delegates add_product(...) to a caller-supplied function

Behavior guidelines:
- Without a function, add_product(...) echoes the submitted product back
- Raise one of the errors in dummyjson.integrations.errors from the function
  to simulate a failed submission

Swap:
Replace this mock client with the real HTTP client in clients/real_http/products.py
when talking to the live API.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from dummyjson.integrations.contracts.interfaces import Product, ProductsClient

logger = logging.getLogger(__name__)

AddProductFunc = Callable[[Product], Product]


class MockProductsClient(ProductsClient):
    def __init__(self, add_product_func: Optional[AddProductFunc] = None) -> None:
        self.add_product_func = add_product_func or (lambda product: product)
        self.submitted: List[Product] = []

    def add_product(self, product: Product) -> Product:
        logger.info(f"[MOCK] Adding product {product.title!r}")
        self.submitted.append(product)
        return self.add_product_func(product)
