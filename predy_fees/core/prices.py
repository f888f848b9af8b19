"""
Price oracle client - historical spot prices from the DefiLlama coins API.
"""

import requests
from typing import Dict, Any, List

from predy_fees.config.settings import COINS_API_URL, REQUEST_TIMEOUT
from predy_fees.core.errors import PriceNotFoundError


class PriceOracle:
    def __init__(self, base_url: str = COINS_API_URL, timeout: int = REQUEST_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def get_prices(self, coins: List[str], timestamp: int) -> Dict[str, Dict[str, Any]]:
        """
        Get historical prices for chain-qualified coin ids.

        Args:
            coins: Coin ids like "ethereum:0x..."
            timestamp: Unix timestamp to price at

        Returns:
            Dict mapping coin id -> record with at least a `price` field
        """
        url = f"{self.base_url}/prices/historical/{int(timestamp)}/{','.join(coins)}"
        response = requests.get(url, timeout=self.timeout)
        response.raise_for_status()
        return response.json().get("coins", {})

    def get_price(self, coin: str, timestamp: int) -> float:
        """Spot price of a single coin; raises PriceNotFoundError if missing."""
        record = self.get_prices([coin], timestamp).get(coin)
        if not record or record.get("price") is None:
            raise PriceNotFoundError(coin, timestamp)
        return record["price"]
