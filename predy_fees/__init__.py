"""
Predy Finance Fee Adapter.

Daily fees, revenue and supply side revenue for Predy Finance, read from its
subgraph deployments and converted to USD with the DefiLlama coins API.

Quick Start:
    from predy_fees import build_adapter

    adapter = build_adapter()
    v320 = adapter["breakdown"]["v320"]["arbitrum"]
    print(v320.fetch(1700006400).to_dict())
"""

__version__ = "1.0.0"

from .config import (
    SchemaVersion,
    SubgraphDeployment,
    AdapterConfig,
    default_config,
    validate_config,
)

from .core import (
    PredyFeesError,
    ConfigError,
    SubgraphError,
    PriceNotFoundError,
    NormalizedDailyMetrics,
)

from .core.adapter import DailyFeeFetcher, build_adapter

__all__ = [
    # Version
    "__version__",
    # Config
    "SchemaVersion",
    "SubgraphDeployment",
    "AdapterConfig",
    "default_config",
    "validate_config",
    # Errors
    "PredyFeesError",
    "ConfigError",
    "SubgraphError",
    "PriceNotFoundError",
    # Adapter
    "NormalizedDailyMetrics",
    "DailyFeeFetcher",
    "build_adapter",
]
