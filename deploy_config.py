#!/usr/bin/env python3
"""
Deployment settings read from the environment (.env is loaded on import).

Mirrors the hardhat network setup: RPC urls and deployer keys come from the
environment, everything else is fixed here.
"""

import os
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from dotenv import load_dotenv
from web3 import Web3

# Load environment variables
load_dotenv()

DEFAULT_NETWORK = "hardhat"
UNREAL_RPC_URL = "https://rpc.unreal.gelato.digital"

DEVELOPMENT_CHAINS = ("hardhat", "localhost", "mumbai", "unreal")
DEVELOPMENT_CHAINS_LOCAL = ("hardhat", "localhost")

NAMED_ACCOUNTS = {
    "deployer": 0,
    "storageFeeAddress": 1,
    "sellFeeAddress": 2,
    "priceManager": 3,
    "randomUser": 4,
    "randomUser2": 5,
    "randomUser3": 6,
    "randomUser4": 7,
}

ETHERSCAN_CUSTOM_CHAINS = (
    {
        "network": "unreal",
        "chainId": 18231,
        "urls": {
            "apiURL": "https://unreal.blockscout.com/api",
            "browserURL": "https://unreal.blockscout.com",
        },
    },
)


@dataclass(frozen=True)
class HardhatNetwork:
    name: str
    chain_id: Optional[int] = None
    url: Optional[str] = None
    accounts: Tuple[str, ...] = ()
    gas_price: Optional[int] = None


@dataclass(frozen=True)
class DeploySettings:
    networks: Dict[str, HardhatNetwork]
    explorer_api_keys: Dict[str, Optional[str]] = field(default_factory=dict)
    coinmarketcap_api_key: Optional[str] = None
    report_gas: bool = False
    block_confirmations: int = 0
    default_network: str = DEFAULT_NETWORK


def _load_block_confirmations() -> int:
    raw = os.getenv("BLOCK_CONFIRMATIONS")
    if raw:
        try:
            return int(raw)
        except ValueError:
            raise ValueError(f"BLOCK_CONFIRMATIONS must be an integer, got {raw!r}") from None
    return 0


def _keys(*names) -> Tuple[str, ...]:
    # Unset keys are dropped rather than passed on as None
    return tuple(key for key in (os.getenv(name) for name in names) if key)


def load_deploy_settings() -> DeploySettings:
    """Snapshot the current environment into a DeploySettings"""
    polygon_explorer_key = os.getenv("POLYGON_EXPLORER_API_KEY")
    networks = {
        "hardhat": HardhatNetwork(name="hardhat", chain_id=31337),
        "localhost": HardhatNetwork(name="localhost", chain_id=31337, url="http://127.0.0.1:8545"),
        "mumbai": HardhatNetwork(
            name="mumbai",
            chain_id=80001,
            url=os.getenv("INFURA_URL_MUMBAI"),
            accounts=_keys("PK1", "PK2", "PK2"),
            gas_price=2000000000,
        ),
        "unreal": HardhatNetwork(
            name="unreal",
            chain_id=18231,
            url=UNREAL_RPC_URL,
            accounts=_keys("PK1", "PK2"),
        ),
        "polygon": HardhatNetwork(
            name="polygon",
            chain_id=137,
            url=os.getenv("INFURA_URL_POLYGON"),
            accounts=_keys("PK1", "PK2"),
        ),
    }
    return DeploySettings(
        networks=networks,
        explorer_api_keys={
            "polygon": polygon_explorer_key,
            "mumbai": polygon_explorer_key,
            "unreal": "api-key",
        },
        coinmarketcap_api_key=os.getenv("COINMARKETCAP_API_KEY"),
        report_gas=os.getenv("REPORT_GAS") == "true",
        block_confirmations=_load_block_confirmations(),
    )


def is_development_chain(network_name: str) -> bool:
    return network_name in DEVELOPMENT_CHAINS


def is_local_chain(network_name: str) -> bool:
    return network_name in DEVELOPMENT_CHAINS_LOCAL


def get_web3(network_name: str, settings: DeploySettings) -> Web3:
    """Connect to a configured network over HTTP"""
    network = settings.networks.get(network_name)
    if network is None:
        raise ValueError(f"Unknown network: {network_name}")
    if not network.url:
        raise ValueError(f"No RPC url configured for {network_name}")
    return Web3(Web3.HTTPProvider(network.url))
