"""
Adapter entry point - binds a fetch function and start timestamp per
protocol version and chain for the aggregation framework.

    adapter = build_adapter(default_config())
    metrics = adapter["breakdown"]["v320"]["arbitrum"].fetch(1700000000)
"""

from typing import Dict, Optional

from predy_fees.config.settings import (
    SchemaVersion,
    SubgraphDeployment,
    AdapterConfig,
    default_config,
    validate_config,
)
from predy_fees.core.dates import entity_date, previous_day
from predy_fees.core.errors import ConfigError
from predy_fees.core.models import NormalizedDailyMetrics, decimal_string
from predy_fees.core.prices import PriceOracle
from predy_fees.core.subgraph import SubgraphClient
from predy_fees.fetchers.daily_fees import (
    entity_id,
    fetch_v3_daily_fees,
    fetch_v320_daily_fees_and_supply_side_revenue,
)
from predy_fees.fetchers.revenue import fetch_daily_revenue


class DailyFeeFetcher:
    """fetch()/start() pair for one subgraph deployment."""

    def __init__(self, deployment: SubgraphDeployment, config: AdapterConfig):
        self.deployment = deployment
        self.config = config
        self.client = SubgraphClient(deployment.endpoint, timeout=config.request_timeout)
        self.oracle = PriceOracle(config.price_api_url, timeout=config.request_timeout)

    def start(self) -> int:
        """Epoch from which the deployment has data."""
        return self.deployment.start_timestamp

    def fetch(self, timestamp: int) -> NormalizedDailyMetrics:
        """
        Daily fees, revenue and supply side revenue for the day of `timestamp`.

        Issues the price lookup, then the daily and accumulated subgraph
        queries, one after another. Request failures propagate.
        """
        eth_price = self.oracle.get_price(self.config.eth_coin_id, timestamp)

        today_id = entity_id(self.deployment, entity_date(timestamp))
        yesterday_id = entity_id(self.deployment, entity_date(previous_day(timestamp)))
        version = self.deployment.version

        if version == SchemaVersion.V320:
            daily_fees, supply_side_revenue = fetch_v320_daily_fees_and_supply_side_revenue(
                self.client, today_id, eth_price
            )
            revenue = fetch_daily_revenue(self.client, today_id, yesterday_id, eth_price, version)
        else:
            daily_fees = fetch_v3_daily_fees(self.client, today_id, eth_price)
            revenue = fetch_daily_revenue(self.client, today_id, yesterday_id, eth_price, version)
            supply_side_revenue = daily_fees - revenue

        return NormalizedDailyMetrics(
            timestamp=timestamp,
            daily_fees=decimal_string(daily_fees),
            daily_revenue=decimal_string(revenue),
            daily_supply_side_revenue=decimal_string(supply_side_revenue),
        )

    def __repr__(self):
        return f"DailyFeeFetcher({self.deployment.label}, {self.deployment.chain})"


def build_adapter(config: Optional[AdapterConfig] = None) -> Dict[str, Dict[str, Dict[str, DailyFeeFetcher]]]:
    """
    Build the breakdown adapter: {"breakdown": {version: {chain: fetcher}}}.

    Args:
        config: Adapter config (defaults to the known Predy deployments)

    Raises:
        ConfigError: if the config fails validation
    """
    if config is None:
        config = default_config()

    problems = validate_config(config)
    if problems:
        raise ConfigError(problems)

    breakdown = {}
    for deployment in config.deployments:
        breakdown.setdefault(deployment.label, {})[deployment.chain] = DailyFeeFetcher(deployment, config)

    return {"breakdown": breakdown}
