"""
Pytest configuration and fixtures for the Predy fee adapter.

This file contains shared fixtures used across all test modules.
HTTP calls are mocked at requests.post (subgraph) and requests.get (prices).
"""

import pytest
import re
import sys
from pathlib import Path
from typing import Dict, Any
from unittest.mock import MagicMock, patch

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from predy_fees.config.settings import (
    SchemaVersion,
    SubgraphDeployment,
    AdapterConfig,
    CONTROLLER_ADDRESS,
    ETH_COIN_ID,
)


# 2023-11-15 00:00:00 UTC
TIMESTAMP = 1700006400
TODAY = "2023-11-15"
YESTERDAY = "2023-11-14"

ETH_PRICE = 2000

ENTITY_QUERY_RE = re.compile(r'(\w+)\(id: "([^"]+)"\)')


# =============================================================================
# CONFIG FIXTURES
# =============================================================================

@pytest.fixture
def v3_deployment() -> SubgraphDeployment:
    return SubgraphDeployment(
        version=SchemaVersion.V3,
        chain="arbitrum",
        endpoint="https://subgraph.test/predy-v3",
        start_timestamp=1671092333,
    )


@pytest.fixture
def v320_deployment() -> SubgraphDeployment:
    return SubgraphDeployment(
        version=SchemaVersion.V320,
        chain="arbitrum",
        endpoint="https://subgraph.test/predy-v320",
        start_timestamp=1678734774,
        controller_address=CONTROLLER_ADDRESS,
    )


@pytest.fixture
def adapter_config(v3_deployment, v320_deployment) -> AdapterConfig:
    """Config pointing at test endpoints for both versions."""
    return AdapterConfig(
        deployments=[v3_deployment, v320_deployment],
        price_api_url="https://coins.test",
        request_timeout=5,
    )


# =============================================================================
# ENTITY FIXTURES
# =============================================================================

@pytest.fixture
def v3_daily_entity() -> Dict[str, Any]:
    """
    v3 lprevenueDaily at ETH = 2000.

    fee0 1000 + fee1 250 + premiumSupply 50
    + supplyInterest0 2000 + supplyInterest1 75 = 3375
    """
    return {
        "id": TODAY,
        "fee0": "500000000000",
        "fee1": "250",
        "premiumSupply": "50",
        "premiumBorrow": "999",
        "supplyInterest0": "1000000000000",
        "supplyInterest1": "75",
        "borrowInterest0": "888",
        "borrowInterest1": "777",
        "updatedAt": "1700049600",
    }


@pytest.fixture
def v320_daily_entity() -> Dict[str, Any]:
    """
    v3.2 lprevenueDaily at ETH = 2000.

    User fees: premiumBorrow 3 + borrowInterest0 2 + borrowInterest1 1000 = 1005
    Supply side: premiumSupply 1 + fee0 200 + fee1 4
                 + supplyInterest0 5 + supplyInterest1 500 = 710
    """
    return {
        "id": f"{CONTROLLER_ADDRESS}-{TODAY}",
        "fee0": "100000000000000000000000000000000000",
        "fee1": "4000000000000000000000000",
        "premiumSupply": "1000000000000000000000000",
        "premiumBorrow": "3000000000000000000000000",
        "supplyInterest0": "5000000000000000000000000",
        "supplyInterest1": "250000000000000000000000000000000000",
        "borrowInterest0": "2000000000000000000000000",
        "borrowInterest1": "500000000000000000000000000000000000",
        "updatedAt": "1700049600",
    }


# =============================================================================
# MOCK FIXTURES FOR EXTERNAL APIS
# =============================================================================

@pytest.fixture
def mock_subgraph():
    """
    Mock requests.post as a subgraph serving entities by id.

    Usage:
        def test_something(mock_subgraph):
            mock_subgraph.entities["lprevenueDaily"]["2023-11-15"] = {...}
    """
    entities = {"lprevenueDaily": {}, "accumulatedProtocolFeeDaily": {}}

    def _respond(url, **kwargs):
        match = ENTITY_QUERY_RE.search(kwargs["json"]["query"])
        entity, entity_id = match.group(1), match.group(2)
        response = MagicMock()
        response.status_code = 200
        response.json.return_value = {"data": {entity: entities.get(entity, {}).get(entity_id)}}
        return response

    with patch("requests.post", side_effect=_respond) as mock_post:
        mock_post.entities = entities
        yield mock_post


@pytest.fixture
def mock_coins_response() -> Dict[str, Any]:
    """Sample DefiLlama coins API response."""
    return {
        "coins": {
            ETH_COIN_ID: {
                "decimals": 18,
                "symbol": "ETH",
                "price": ETH_PRICE,
                "timestamp": TIMESTAMP,
                "confidence": 0.99,
            }
        }
    }


@pytest.fixture
def mock_prices(mock_coins_response):
    """Mock requests.get for the coins API."""
    with patch("requests.get") as mock_get:
        mock_response = MagicMock()
        mock_response.json.return_value = mock_coins_response
        mock_response.status_code = 200
        mock_get.return_value = mock_response
        yield mock_get
