"""
Revenue Fetcher - protocol revenue from accumulated fee counters.

Daily revenue is the difference between two consecutive days of
accumulatedProtocolFeeDaily, never read from the daily fee entity.
"""

import sys
from decimal import Decimal
from typing import Optional

from predy_fees.config.settings import SchemaVersion, USDC_DECIMAL, ETH_DECIMAL
from predy_fees.core.models import AccumulatedProtocolFeeRecord, ACCUMULATED_FEE_FIELDS, to_decimal
from predy_fees.core.subgraph import SubgraphClient


ACCUMULATED_FEE_ENTITY = "accumulatedProtocolFeeDaily"


def fetch_accumulated_fees(client: SubgraphClient, daily_id: str) -> Optional[AccumulatedProtocolFeeRecord]:
    """Fetch one accumulatedProtocolFeeDaily entity, None if missing."""
    entity = client.get_entity(ACCUMULATED_FEE_ENTITY, daily_id, ACCUMULATED_FEE_FIELDS)
    if not entity:
        return None
    return AccumulatedProtocolFeeRecord.from_entity(entity)


def daily_revenue(
    today: AccumulatedProtocolFeeRecord,
    yesterday: AccumulatedProtocolFeeRecord,
    eth_price,
    version: SchemaVersion
) -> Decimal:
    """
    Revenue between two accumulated snapshots.

    v3 counts token0 as ETH and token1 as-is; v3.2 swapped the pair, so
    token0 is USDC (6 decimals) and token1 is ETH.
    """
    price = to_decimal(eth_price)
    delta0 = today.accumulated_fee0 - yesterday.accumulated_fee0
    delta1 = today.accumulated_fee1 - yesterday.accumulated_fee1

    if version == SchemaVersion.V320:
        fee0 = delta0 / USDC_DECIMAL
        fee1 = delta1 * price / ETH_DECIMAL
    else:
        fee0 = delta0 * price / ETH_DECIMAL
        fee1 = delta1

    return fee0 + fee1


def fetch_daily_revenue(
    client: SubgraphClient,
    today_id: str,
    yesterday_id: str,
    eth_price,
    version: SchemaVersion
) -> Decimal:
    """Daily protocol revenue; 0 unless both days have an accumulated entity."""
    today = fetch_accumulated_fees(client, today_id)
    yesterday = fetch_accumulated_fees(client, yesterday_id)

    if today is None or yesterday is None:
        missing = today_id if today is None else yesterday_id
        print(f"  ⚠️  No {ACCUMULATED_FEE_ENTITY} entity {missing}, reporting 0 revenue", file=sys.stderr)
        return Decimal(0)

    return daily_revenue(today, yesterday, eth_price, version)
