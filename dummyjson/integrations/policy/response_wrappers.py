from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, Field, StrictInt, StrictStr, ValidationError

from dummyjson.integrations.contracts.interfaces import Product
from dummyjson.integrations.errors import DecodeError

PRODUCT_FIELDS = ("title", "description", "price", "brand", "category")

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class ProductResponseModel(BaseModel):
    title: StrictStr = ""
    description: StrictStr = ""
    price: StrictInt = Field(default=0, ge=INT64_MIN, le=INT64_MAX)
    brand: StrictStr = ""
    category: StrictStr = ""


def normalize_product_response(raw: Any) -> Product:
    """
    Build a Product from a decoded products API response.

    Unknown keys are ignored and missing or null keys fall back to the zero
    value of their field; a null body yields the zero-valued Product. Values
    of the wrong JSON type, and prices outside the signed 64-bit range, are
    rejected.
    """
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise DecodeError(f"Expected a JSON object, got {type(raw).__name__}.")

    payload = {key: raw[key] for key in PRODUCT_FIELDS if raw.get(key) is not None}
    model = _build_model(ProductResponseModel, payload, raw)
    return Product(**model.model_dump())


def _build_model(model_type, payload: Dict[str, Any], raw: Dict[str, Any]):
    try:
        return model_type(**payload)
    except ValidationError as exc:
        raise DecodeError(f"Response validation failed: {exc}", payload=raw) from exc
