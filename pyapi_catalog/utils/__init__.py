"""
Utility modules for the catalog client
"""
from .config_loader import CatalogConfig, describe_config_error, load_catalog_config

__all__ = [
    'CatalogConfig',
    'describe_config_error',
    'load_catalog_config',
]
