"""
Fee adapter configuration.

Subgraph deployments, price oracle settings and protocol constants.
Endpoints can be overridden from the environment.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from web3 import Web3


class SchemaVersion(Enum):
    """Subgraph schema generation of a Predy deployment."""
    V3 = "v3"        # legacy: fields near common scale, entity id is the date
    V320 = "v320"    # current: fixed-point fields, entity id is controller-date


# =============================================================================
# CHAINS & ENDPOINTS
# =============================================================================

ARBITRUM = "arbitrum"

SUPPORTED_CHAINS = [ARBITRUM]

V3_ENDPOINTS = {
    ARBITRUM: os.getenv(
        "PREDY_V3_ARBITRUM_SUBGRAPH",
        "https://api.thegraph.com/subgraphs/name/predy-dev/predyv3arbitrum"
    ),
}

V320_ENDPOINTS = {
    ARBITRUM: os.getenv(
        "PREDY_V320_ARBITRUM_SUBGRAPH",
        "https://api.thegraph.com/subgraphs/name/predy-dev/predy-v320-arbitrum"
    ),
}

# First timestamp with data on each deployment
START_TIMESTAMPS = {
    SchemaVersion.V3: 1671092333,
    SchemaVersion.V320: 1678734774,
}

# Controller contract used to key v3.2 daily entities
CONTROLLER_ADDRESS = "0x68a154fb3e8ff6e4da10ecd54def25d9149ddbde"


# =============================================================================
# PRICE ORACLE
# =============================================================================

COINS_API_URL = os.getenv("COINS_API_URL", "https://coins.llama.fi")

# Native ETH on Ethereum, used as the price of the pool's volatile asset
ETH_COIN_ID = "ethereum:0x0000000000000000000000000000000000000000"

REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", 30))


# =============================================================================
# PROTOCOL SCALES
# =============================================================================

USDC_DECIMAL = 10 ** 6
ETH_DECIMAL = 10 ** 18
DIVISOR = 10 ** 18           # fixed-point scale of v3.2 storage
LEGACY_ETH_SCALE = 10 ** 12  # ETH -> USDC precision gap on v3 fields

SECONDS_PER_DAY = 60 * 60 * 24


@dataclass
class SubgraphDeployment:
    """One subgraph deployment of one protocol version on one chain."""
    version: SchemaVersion
    chain: str
    endpoint: str
    start_timestamp: int
    controller_address: Optional[str] = None

    @property
    def label(self) -> str:
        return self.version.value


@dataclass
class AdapterConfig:
    """Everything the adapter needs; passed to build_adapter()."""
    deployments: List[SubgraphDeployment] = field(default_factory=list)
    price_api_url: str = COINS_API_URL
    eth_coin_id: str = ETH_COIN_ID
    request_timeout: int = REQUEST_TIMEOUT


def default_config() -> AdapterConfig:
    """Build the config for the known Predy deployments."""
    deployments = []
    for chain, endpoint in V3_ENDPOINTS.items():
        deployments.append(SubgraphDeployment(
            version=SchemaVersion.V3,
            chain=chain,
            endpoint=endpoint,
            start_timestamp=START_TIMESTAMPS[SchemaVersion.V3],
        ))
    for chain, endpoint in V320_ENDPOINTS.items():
        deployments.append(SubgraphDeployment(
            version=SchemaVersion.V320,
            chain=chain,
            endpoint=endpoint,
            start_timestamp=START_TIMESTAMPS[SchemaVersion.V320],
            controller_address=CONTROLLER_ADDRESS,
        ))
    return AdapterConfig(deployments=deployments)


def validate_config(config: AdapterConfig) -> List[str]:
    """
    Check an adapter config for problems.

    Args:
        config: AdapterConfig to check

    Returns:
        List of problem descriptions (empty when the config is usable)
    """
    problems = []

    if not config.deployments:
        problems.append("No subgraph deployments configured")

    if not config.price_api_url.startswith(("http://", "https://")):
        problems.append(f"Price API URL is not http(s): {config.price_api_url}")

    seen = set()
    for dep in config.deployments:
        where = f"{getattr(dep.version, 'value', dep.version)}/{dep.chain}"

        if not isinstance(dep.version, SchemaVersion):
            problems.append(f"{where}: unknown schema version {dep.version!r}")
            continue

        if dep.chain not in SUPPORTED_CHAINS:
            problems.append(f"{where}: unsupported chain (must be one of {SUPPORTED_CHAINS})")

        if not dep.endpoint or not dep.endpoint.startswith(("http://", "https://")):
            problems.append(f"{where}: endpoint is not http(s): {dep.endpoint!r}")

        if not isinstance(dep.start_timestamp, int) or dep.start_timestamp <= 0:
            problems.append(f"{where}: start timestamp must be a positive integer")

        if dep.version == SchemaVersion.V320:
            if not dep.controller_address:
                problems.append(f"{where}: v3.2 deployments need a controller address")
            elif not Web3.is_address(dep.controller_address):
                problems.append(f"{where}: invalid controller address {dep.controller_address}")

        key = (dep.version, dep.chain)
        if key in seen:
            problems.append(f"{where}: duplicate deployment")
        seen.add(key)

    return problems
