"""Configuration module for catalog-model."""

from .loader import ConfigLoader, load_config
from .models import CatalogModelConfig, PolicySettings

__all__ = [
    "CatalogModelConfig",
    "ConfigLoader",
    "PolicySettings",
    "load_config",
]
