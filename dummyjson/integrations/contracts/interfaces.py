from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from typing import Any, Dict


# ---------------------------------------------------------------------------
# Shared data models
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Product:
    title: str = ""
    description: str = ""
    price: int = 0
    brand: str = ""
    category: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation; every key is always present."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Capability interfaces
# ---------------------------------------------------------------------------

class ProductEncoder(ABC):
    """Turns a product into the request body sent to the products API."""

    @abstractmethod
    def encode(self, product: Product) -> bytes:
        """Serialize a product to bytes."""


class JSONProductEncoder(ProductEncoder):
    def encode(self, product: Product) -> bytes:
        return json.dumps(product.to_dict()).encode("utf-8")


class ProductsClient(ABC):
    """Every products API client (real or mock) must implement this interface."""

    @abstractmethod
    def add_product(self, product: Product) -> Product:
        """Create a product remotely and return the record the service stored."""
