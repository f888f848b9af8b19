"""
Metric fetchers - subgraph entities to USD amounts.

Each fetcher module provides:
- pure normalization functions taking parsed records and the ETH price
- fetch_X(client, ...) wrappers that query the subgraph first

Available fetchers:
- daily_fees: v3 total fees, v3.2 user fees and supply side revenue
- revenue: protocol revenue from accumulated fee counters
"""

from .daily_fees import (
    entity_id,
    fetch_daily_fee_record,
    v3_daily_fees,
    v320_daily_fees_and_supply_side_revenue,
    fetch_v3_daily_fees,
    fetch_v320_daily_fees_and_supply_side_revenue,
)

from .revenue import (
    fetch_accumulated_fees,
    daily_revenue,
    fetch_daily_revenue,
)

__all__ = [
    # Daily fees
    "entity_id",
    "fetch_daily_fee_record",
    "v3_daily_fees",
    "v320_daily_fees_and_supply_side_revenue",
    "fetch_v3_daily_fees",
    "fetch_v320_daily_fees_and_supply_side_revenue",
    # Revenue
    "fetch_accumulated_fees",
    "daily_revenue",
    "fetch_daily_revenue",
]
