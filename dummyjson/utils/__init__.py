"""
Utility modules for the products API client
"""
from .config_loader import ClientConfig, build_http_client, load_client_config

__all__ = [
    'ClientConfig',
    'build_http_client',
    'load_client_config',
]
