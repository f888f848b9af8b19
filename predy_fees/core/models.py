"""
Data records for the fee adapter.

Raw subgraph entities are parsed into Decimal-valued records; the adapter
output is NormalizedDailyMetrics with decimal strings.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Optional


DAILY_FEE_FIELDS = [
    "fee0",
    "fee1",
    "premiumSupply",
    "premiumBorrow",
    "supplyInterest0",
    "supplyInterest1",
    "borrowInterest0",
    "borrowInterest1",
]

ACCUMULATED_FEE_FIELDS = [
    "accumulatedProtocolFee0",
    "accumulatedProtocolFee1",
]


def to_decimal(value: Any) -> Decimal:
    """Convert a subgraph number or oracle price to Decimal at face value."""
    if value is None:
        return Decimal(0)
    if isinstance(value, Decimal):
        return value
    # str() keeps floats like 1850.12 exact instead of their binary expansion
    return Decimal(str(value))


def decimal_string(value: Optional[Decimal]) -> Optional[str]:
    """Render a Decimal in plain notation ("2002000", "0.5"), None stays None."""
    if value is None:
        return None
    if value == 0:
        return "0"
    return format(value.normalize(), "f")


@dataclass(frozen=True)
class DailyFeeRecord:
    """lprevenueDaily entity, each field in its asset's smallest unit."""
    fee0: Decimal
    fee1: Decimal
    premium_supply: Decimal
    premium_borrow: Decimal
    supply_interest0: Decimal
    supply_interest1: Decimal
    borrow_interest0: Decimal
    borrow_interest1: Decimal
    entity_id: Optional[str] = None
    updated_at: Optional[int] = None

    @classmethod
    def from_entity(cls, entity: Dict[str, Any]) -> "DailyFeeRecord":
        updated_at = entity.get("updatedAt")
        return cls(
            fee0=to_decimal(entity.get("fee0")),
            fee1=to_decimal(entity.get("fee1")),
            premium_supply=to_decimal(entity.get("premiumSupply")),
            premium_borrow=to_decimal(entity.get("premiumBorrow")),
            supply_interest0=to_decimal(entity.get("supplyInterest0")),
            supply_interest1=to_decimal(entity.get("supplyInterest1")),
            borrow_interest0=to_decimal(entity.get("borrowInterest0")),
            borrow_interest1=to_decimal(entity.get("borrowInterest1")),
            entity_id=entity.get("id"),
            updated_at=int(updated_at) if updated_at is not None else None,
        )


@dataclass(frozen=True)
class AccumulatedProtocolFeeRecord:
    """accumulatedProtocolFeeDaily entity: cumulative protocol fee per asset."""
    accumulated_fee0: Decimal
    accumulated_fee1: Decimal

    @classmethod
    def from_entity(cls, entity: Dict[str, Any]) -> "AccumulatedProtocolFeeRecord":
        return cls(
            accumulated_fee0=to_decimal(entity.get("accumulatedProtocolFee0")),
            accumulated_fee1=to_decimal(entity.get("accumulatedProtocolFee1")),
        )


@dataclass
class NormalizedDailyMetrics:
    """Adapter output for one day, amounts in USD-equivalent decimal strings."""
    timestamp: int
    daily_fees: Optional[str] = None
    daily_revenue: Optional[str] = None
    daily_supply_side_revenue: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Render with the aggregation framework's field names."""
        return {
            "timestamp": self.timestamp,
            "dailyFees": self.daily_fees,
            "dailyRevenue": self.daily_revenue,
            "dailySupplySideRevenue": self.daily_supply_side_revenue,
        }
