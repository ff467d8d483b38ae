"""
Configuration loader for the products API client
"""

import logging
import os
from pathlib import Path
from typing import Optional

import httpx
import yaml
from pydantic import BaseModel, Field, ValidationError

from dummyjson.integrations.clients.real_http.products import DEFAULT_API_URL

logger = logging.getLogger(__name__)

ENV_API_URL = "PRODUCT_API_URL"
ENV_TIMEOUT = "PRODUCT_API_TIMEOUT"


class ClientConfig(BaseModel):
    """Products API client configuration"""

    api_url: str = DEFAULT_API_URL
    timeout_seconds: Optional[float] = Field(default=None, gt=0)


def load_client_config(config_path: Optional[Path] = None) -> ClientConfig:
    """
    Load and validate client configuration

    Values come from the optional YAML file first, then from the
    PRODUCT_API_URL / PRODUCT_API_TIMEOUT environment variables.

    Args:
        config_path: Path to a YAML config file. Defaults to no file.

    Returns:
        Validated ClientConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    config_data = {}
    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f) or {}

    if os.getenv(ENV_API_URL):
        config_data["api_url"] = os.getenv(ENV_API_URL)
    if os.getenv(ENV_TIMEOUT):
        config_data["timeout_seconds"] = os.getenv(ENV_TIMEOUT)

    try:
        config = ClientConfig(**config_data)
        logger.info(f"Loaded client config (api_url={config.api_url})")
        return config
    except ValidationError as e:
        logger.error(f"Config validation failed: {e}")
        raise


def build_http_client(config: ClientConfig) -> httpx.Client:
    """Create the httpx client used by RealProductsClient"""
    if config.timeout_seconds is None:
        return httpx.Client()
    return httpx.Client(timeout=config.timeout_seconds)
