"""
Real Products HTTP Client.

Purpose:
- Sends a Product to the products API create endpoint as a JSON POST
- Accepts 200 and 201 responses and decodes the body back into a Product

Implementation notes:
- Use httpx for the request; pass an httpx.Client to control timeouts or to
  swap the transport in tests
- Every failing step raises one of the errors in dummyjson.integrations.errors
- The response is closed on every exit path
"""

from __future__ import annotations

import json
import logging
import threading
from typing import Dict, Optional

import httpx

from dummyjson.integrations.contracts.interfaces import (
    JSONProductEncoder,
    Product,
    ProductEncoder,
    ProductsClient,
)
from dummyjson.integrations.errors import (
    DecodeError,
    RemoteRejectionError,
    RequestConstructionError,
    SerializationError,
    TransportError,
)
from dummyjson.integrations.policy.response_wrappers import normalize_product_response

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://dummyjson.com/products/add"
ACCEPTED_STATUS_CODES = frozenset({httpx.codes.OK, httpx.codes.CREATED})

_JSON_DECODER = json.JSONDecoder()


class RealProductsClient(ProductsClient):
    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        client: Optional[httpx.Client] = None,
        encoder: Optional[ProductEncoder] = None,
    ) -> None:
        self.api_url = api_url
        self.encoder = encoder or JSONProductEncoder()
        self._client = client
        self._owns_client = client is None
        self._client_lock = threading.Lock()

    @property
    def client(self) -> httpx.Client:
        if self._client is None:
            with self._client_lock:
                if self._client is None:
                    self._client = httpx.Client()
        return self._client

    def close(self) -> None:
        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "RealProductsClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def add_product(self, product: Product) -> Product:
        try:
            body = self.encoder.encode(product)
        except Exception as exc:
            logger.error("Failed to serialize product %r: %s", product.title, exc)
            raise SerializationError(f"failed to marshal product: {exc}") from exc

        headers: Dict[str, str] = {"Content-Type": "application/json"}
        try:
            request = httpx.Request("POST", self.api_url, content=body, headers=headers)
        except (httpx.InvalidURL, ValueError, TypeError) as exc:
            logger.error("Invalid products API URL %r: %s", self.api_url, exc)
            raise RequestConstructionError(f"failed to create request: {exc}") from exc

        logger.info(f"Submitting product to {request.url}")
        logger.debug("Request payload: %s", body)
        try:
            response = self.client.send(request, stream=True)
        except (httpx.RequestError, OSError, RuntimeError) as exc:
            # RuntimeError: httpx refuses to send on a closed client.
            logger.error(f"Request error connecting to products API: {exc}")
            raise TransportError(f"failed to send request: {exc}") from exc

        try:
            logger.info(f"Received products API response: status={response.status_code}")
            if response.status_code not in ACCEPTED_STATUS_CODES:
                logger.error(f"Products API rejected the product: {response.status_code}")
                raise RemoteRejectionError(response.status_code)

            try:
                content = response.read()
            except httpx.HTTPError as exc:
                logger.error(f"Failed to read products API response: {exc}")
                raise DecodeError(f"failed to decode response: {exc}") from exc
            return self._decode(content)
        finally:
            response.close()

    def _decode(self, content: bytes) -> Product:
        # Only the first JSON value is read; anything after it is ignored.
        try:
            data, _ = _JSON_DECODER.raw_decode(content.decode("utf-8").lstrip())
        except ValueError as exc:
            logger.error(f"Products API returned malformed JSON: {exc}")
            raise DecodeError(f"failed to decode response: {exc}") from exc

        try:
            return normalize_product_response(data)
        except DecodeError as exc:
            logger.error(f"Products API returned an unexpected body: {exc}")
            raise DecodeError(f"failed to decode response: {exc}", payload=exc.payload) from exc
