"""Adapter configuration."""

from .settings import (
    SchemaVersion,
    SubgraphDeployment,
    AdapterConfig,
    default_config,
    validate_config,
)

__all__ = [
    "SchemaVersion",
    "SubgraphDeployment",
    "AdapterConfig",
    "default_config",
    "validate_config",
]
