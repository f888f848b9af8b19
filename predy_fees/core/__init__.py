"""Core adapter components."""

from .errors import (
    PredyFeesError,
    ConfigError,
    SubgraphError,
    PriceNotFoundError,
)

from .models import (
    DailyFeeRecord,
    AccumulatedProtocolFeeRecord,
    NormalizedDailyMetrics,
)

from .subgraph import SubgraphClient
from .prices import PriceOracle

__all__ = [
    # Errors
    "PredyFeesError",
    "ConfigError",
    "SubgraphError",
    "PriceNotFoundError",
    # Records
    "DailyFeeRecord",
    "AccumulatedProtocolFeeRecord",
    "NormalizedDailyMetrics",
    # Clients
    "SubgraphClient",
    "PriceOracle",
]
