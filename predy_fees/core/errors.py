"""
Exceptions raised by the fee adapter.

Missing subgraph entities are not errors (they are reported as zero).
Everything here represents a failure that propagates to the caller.
"""


class PredyFeesError(Exception):
    """Base class for adapter errors."""


class ConfigError(PredyFeesError, ValueError):
    """Adapter configuration is invalid."""

    def __init__(self, problems):
        self.problems = list(problems)
        super().__init__("Invalid adapter config: " + "; ".join(self.problems))


class SubgraphError(PredyFeesError):
    """Subgraph answered with GraphQL errors."""

    def __init__(self, endpoint: str, messages):
        self.endpoint = endpoint
        self.messages = list(messages)
        super().__init__(f"Subgraph query failed on {endpoint}: {'; '.join(self.messages)}")


class PriceNotFoundError(PredyFeesError, LookupError):
    """Price oracle returned no record for a coin."""

    def __init__(self, coin: str, timestamp: int):
        self.coin = coin
        self.timestamp = timestamp
        super().__init__(f"No price for {coin} at {timestamp}")
