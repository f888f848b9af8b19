"""
Daily Fees Fetcher - normalizes lprevenueDaily entities into USD.

Two subgraph generations are supported:
- v3: fee/interest fields are close to USDC scale already; only the ETH
  denominated fields need the price and a 1e12 precision adjustment.
  "Fees" is the total paid to LPs and token suppliers.
- v3.2: every field is stored with the asset's own decimals on top of a
  1e18 fixed-point scale. "Fees" is what users paid (borrow side) and the
  supply side revenue is summed independently from the supply side fields.
"""

import sys
from decimal import Decimal
from typing import Optional, Tuple

from predy_fees.config.settings import (
    SchemaVersion,
    SubgraphDeployment,
    USDC_DECIMAL,
    ETH_DECIMAL,
    DIVISOR,
    LEGACY_ETH_SCALE,
)
from predy_fees.core.models import DailyFeeRecord, DAILY_FEE_FIELDS, to_decimal
from predy_fees.core.subgraph import SubgraphClient


DAILY_FEE_ENTITY = "lprevenueDaily"


def entity_id(deployment: SubgraphDeployment, date_string: str) -> str:
    """Id of a daily entity: the date on v3, controller-date on v3.2."""
    if deployment.version == SchemaVersion.V320:
        return f"{deployment.controller_address}-{date_string}"
    return date_string


def fetch_daily_fee_record(client: SubgraphClient, daily_id: str) -> Optional[DailyFeeRecord]:
    """Fetch one lprevenueDaily entity, None if the subgraph has no record."""
    entity = client.get_entity(DAILY_FEE_ENTITY, daily_id, ["id"] + DAILY_FEE_FIELDS + ["updatedAt"])
    if not entity:
        return None
    return DailyFeeRecord.from_entity(entity)


# =============================================================================
# NORMALIZATION
# =============================================================================

def v3_daily_fees(record: DailyFeeRecord, eth_price) -> Decimal:
    """Total daily fees on a v3 deployment (LP revenue + token revenue)."""
    price = to_decimal(eth_price)

    # LPT revenue
    fee0 = record.fee0 * price / LEGACY_ETH_SCALE
    lpt_revenue = fee0 + record.fee1 + record.premium_supply

    # Token revenue
    supply_interest0 = record.supply_interest0 * price / LEGACY_ETH_SCALE
    token_revenue = supply_interest0 + record.supply_interest1

    return lpt_revenue + token_revenue


def v320_daily_fees_and_supply_side_revenue(record: DailyFeeRecord, eth_price) -> Tuple[Decimal, Decimal]:
    """
    User payment fees and LP (supply side) revenue on a v3.2 deployment.

    Returns:
        (users_payment_fees, lpt_revenue)
    """
    price = to_decimal(eth_price)

    def usdc(amount: Decimal) -> Decimal:
        return amount / USDC_DECIMAL / DIVISOR

    def eth(amount: Decimal) -> Decimal:
        return amount * price / ETH_DECIMAL / DIVISOR

    users_payment_fees = (
        usdc(record.premium_borrow)
        + usdc(record.borrow_interest0)
        + eth(record.borrow_interest1)
    )

    lpt_revenue = (
        usdc(record.premium_supply)
        + eth(record.fee0)
        + usdc(record.fee1)
        + usdc(record.supply_interest0)
        + eth(record.supply_interest1)
    )

    return users_payment_fees, lpt_revenue


# =============================================================================
# FETCHERS
# =============================================================================

def fetch_v3_daily_fees(client: SubgraphClient, daily_id: str, eth_price) -> Decimal:
    """Daily fees for a v3 deployment; 0 when the day has no entity."""
    record = fetch_daily_fee_record(client, daily_id)
    if record is None:
        print(f"  ⚠️  No {DAILY_FEE_ENTITY} entity {daily_id}, reporting 0 fees", file=sys.stderr)
        return Decimal(0)
    return v3_daily_fees(record, eth_price)


def fetch_v320_daily_fees_and_supply_side_revenue(
    client: SubgraphClient,
    daily_id: str,
    eth_price
) -> Tuple[Decimal, Decimal]:
    """User payment fees and supply side revenue for v3.2; (0, 0) when missing."""
    record = fetch_daily_fee_record(client, daily_id)
    if record is None:
        print(f"  ⚠️  No {DAILY_FEE_ENTITY} entity {daily_id}, reporting 0 fees", file=sys.stderr)
        return Decimal(0), Decimal(0)
    return v320_daily_fees_and_supply_side_revenue(record, eth_price)
