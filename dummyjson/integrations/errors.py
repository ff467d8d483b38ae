"""Errors raised by products API clients, one per failing step of a submission."""

from __future__ import annotations

from typing import Any, Dict, Optional


class ProductSubmissionError(Exception):
    def __init__(self, message: str, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.payload = payload or {}


class SerializationError(ProductSubmissionError):
    """The product could not be converted to the wire format."""


class RequestConstructionError(ProductSubmissionError):
    """The endpoint could not form a valid request (e.g. malformed URL)."""


class TransportError(ProductSubmissionError):
    """The request was not delivered or no response came back."""


class RemoteRejectionError(ProductSubmissionError):
    """A response arrived with a status code other than 200 or 201."""

    def __init__(self, status_code: int, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(f"unexpected status code: {status_code}", payload=payload)
        self.status_code = status_code


class DecodeError(ProductSubmissionError):
    """The response body could not be parsed into a product."""
