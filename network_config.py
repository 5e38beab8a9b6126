#!/usr/bin/env python3
"""
Per-network deployment configuration for the TNFT contracts.

NETWORK_CONFIG holds the raw address table, keyed by chain id (plus the
"default" entry used for the in-process hardhat network). It is loaded once
into a NetworkRegistry of immutable NetworkRecords; empty address fields mean
the contract is not deployed on that chain.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Optional, Union

from eth_utils import is_address, to_checksum_address

DEFAULT_KEY = "default"
HARDHAT_CHAIN_ID = 31337

# Chain id, or DEFAULT_KEY for the in-process hardhat network
RegistryKey = Union[int, str]

TANGIBLE_API_STAGING = "https://onu50475eh.execute-api.us-east-1.amazonaws.com"
TANGIBLE_API_PRODUCTION = "https://n0iqbl374f.execute-api.us-east-1.amazonaws.com"

NETWORK_CONFIG = {
    DEFAULT_KEY: {
        "name": "hardhat",
        "usdcAddress": "",
        "chainLinkGoldOracle": "",
        "chainLinkGBPOracle": "",
        "wrappedMatic": "0x0000000000000000000000000000000000000001",
        "tokenUrl": f"{TANGIBLE_API_STAGING}/tnfts",
        "fetchExternal": TANGIBLE_API_STAGING,
        "routerAddress": "0x1b02dA8Cb0d097eB8D57A175b88c7D8b47997506",
        "tangibleLabs": "0x1b02dA8Cb0d097eB8D57A175b88c7D8b47997506",
        "tngblAddress": "0xB675259cAF6F5122a9E82493610e6487373D7E98",
        "daiAddress": "0x8f3Cf7ad23Cd3CaDbD9735AFf958023239c6A063",
        "passiveNftAddress": "0x850c158FF905dE7d2B5166DB08620A0f0fF86816",
        "revenueShare": "0xFD5bF91894276E1237c3365DcB7057B2b5732f76",
        "rentShare": "0xFD5bF91894276E1237c3365DcB7057B2b5732f76",
        "revenueShareAbi": "./abis/mumbai/RevenueShare.json",
        "uniswapFactory": "",
        "instantTradeEnabled": False,
        "feeDistributor": "",
        "chainlinkMatrixOracle": "",
    },
    31337: {
        "name": "localhost",
        "usdcAddress": "",
        "chainLinkGoldOracle": "",
        "chainLinkGBPOracle": "",
        "wrappedMatic": "0x0000000000000000000000000000000000000001",
        "tokenUrl": f"{TANGIBLE_API_STAGING}/tnfts",
        "fetchExternal": TANGIBLE_API_STAGING,
        "routerAddress": "0x1b02dA8Cb0d097eB8D57A175b88c7D8b47997506",
        "tangibleLabs": "0x1b02dA8Cb0d097eB8D57A175b88c7D8b47997506",
        "tngblAddress": "0xB675259cAF6F5122a9E82493610e6487373D7E98",
        "passiveNftAddress": "0x19C0d076B7a5860C041316fA9750D559bD7eD496",
        "passiveNftAbi": "../abis/mumbai/PassiveNFT.json",
        "revenueShare": "0x7069Bd636C8Bdb18d78A9dCB9A68593137477772",
        "rentShare": "0x539Ca1307fb13d4dDf1b6Fd0f0F23c2b1EB85a34",
        "revenueShareAbi": "./abis/mumbai/RevenueShare.json",
        "uniswapFactory": "0xC0AEe478e3658e2610c5F7A4A2E1777cE9e4f2Ac",
        "instantTradeEnabled": False,
        "feeDistributor": "",
        "chainlinkMatrixOracle": "",
    },
    18231: {
        "name": "unreal",
        "usdcAddress": "0xabAa4C39cf3dF55480292BBDd471E88de8Cc3C97",
        "usdtAddress": "",
        "usdrAddress": "",
        "ustbAddress": "",
        "pearlFactory": "0x6254c71Eae8476BE8fd0B9F14AEB61d578422991",
        "tangibleDao": "0xb99468CF65F43A2656280A749A3F092dF54AA58d",  # rt deployer
        "tangibleLabs": "0x23bfB039Fe7fE0764b830960a9d31697D154F2E4",  # goerli test
        "tokenUrl": f"{TANGIBLE_API_STAGING}/tnfts",
        "fetchExternal": TANGIBLE_API_STAGING,
        "tngblAddress": "0x86254FfaA70910447578E4aC37d51624409aeae3",
        "daiAddress": "0x665D4921fe931C0eA1390Ca4e0C422ba34d26169",
        "passiveNftAddress": "0x131995372479B06532ae2eba3794345CE6EcC2D1",
        "revenueShare": "0x177753854F244e08E69Ec199b313c3Ad85652E1c",
        "feeDistributor": "0xF8A1aD46057c546D2161198049367E4EDCEA6912",  # revenue distributor
    },
    80001: {
        "name": "mumbai",
        "usdcAddress": "0x667269618f67f543d3121DE3DF169747950Deb13",
        "usdtAddress": "0x98D75A58F5bf3Cac470b6CC886d4F9932dCB5328",
        "usdrAddress": "0x8885a6E2f1F4BC383963eD848438A8bEC243886F",
        "ustbAddress": "0x71395cC9211dc43220EBe3Bb0466d482D6ef5335",
        "pearlRouter": "0xE592427A0AEce92De3Edee1F18E0157C05861564",
        "pearlFactory": "0xB4cF5a388778046aAc5fB33AC0e99107a2403Ed7",
        "chainLinkGoldOracle": "",
        "chainLinkGBPOracle": "",
        "wrappedMatic": "0x9c3c9283d3e44854697cd22d3faa240cfb032889",
        "tangibleDao": "0xb99468CF65F43A2656280A749A3F092dF54AA58d",  # rt deployer
        "tangibleLabs": "0x23bfB039Fe7fE0764b830960a9d31697D154F2E4",  # goerli test
        "tokenUrl": f"{TANGIBLE_API_STAGING}/tnfts",
        "fetchExternal": TANGIBLE_API_STAGING,
        "routerAddress": "0x1b02dA8Cb0d097eB8D57A175b88c7D8b47997506",
        "tngblAddress": "0xC3Cd8cE66D0aa591a75686Ee99BAa7b8667d6EE0",
        "daiAddress": "0xf46c460F5B2D33aC5c4cE2aA015c8B5c430231C5",
        "passiveNftAddress": "0xa0b08D6BBc11e798177D2E6BF838704c5fDe1401",
        "passiveNftAbi": "../abis/mumbai/PassiveNFT.json",
        "revenueShare": "0x74c03a9FBEEd64635468b8067A7Eb032ffD3ac25",
        "rentShare": "0x8A2baC12fA52Cff055FAc75509bf7aB789089e10",
        "revenueShareAbi": "../abis/mumbai/RevenueShare.json",
        "uniswapFactory": "0xc35DADB65012eC5796536bD9864eD8773aBc74C4",
        "instantTradeEnabled": True,
        "chainlinkMatrixOracle": "0xbE2F59A77eb5D38FE4E14c8E5284e72E07f74cee",
        "feeDistributor": "0x186661c459f89f3dc2515fcb4a12fa17aCA686A0",  # revenue distributor
    },
    137: {
        "name": "polygon",
        "usdcAddress": "0x2791Bca1f2de4661ED88A30C99A7a9449Aa84174",
        "usdrAddress": "0xb5DFABd7fF7F83BAB83995E72A52B97ABb7bcf63",
        "aavePool": "0x445FE580eF8d70FF569aB36e80c647af338db351",
        "ourPool": "0xa138341185a9D0429B0021A11FB717B225e13e1F",
        "chainLinkGoldOracle": "0x0c466540b2ee1a31b441671eac0ca886e051e410",
        "chainLinkGBPOracle": "0x099a2540848573e94fb1ca0fa420b00acbbc845a",
        "wrappedMatic": "0x0d500b1d8e8ef31e21c99d1db9a6444d3adf1270",
        "tangibleLabs": "0xAF8A1548Fd69a59Ce6A2a5f308bCC4698E1Db2E5",  # multi sig for tangible labs
        "tangibleDao": "0x100fCC635acf0c22dCdceF49DD93cA94E55F0c71",  # multisig for dao
        "routerAddress": "0x1b02dA8Cb0d097eB8D57A175b88c7D8b47997506",
        # an empty pearlRouter used to precede this entry, only the last value counts
        "pearlRouter": "0xcC25C0FD84737F44a7d38649b69491BBf0c7f083",
        "tokenUrl": f"{TANGIBLE_API_PRODUCTION}/tnfts",  # production branch deployment!
        "fetchExternal": TANGIBLE_API_PRODUCTION,
        "tngblAddress": "0x49e6A20f1BBdfEeC2a8222E052000BbB14EE6007",
        "daiAddress": "0x8f3Cf7ad23Cd3CaDbD9735AFf958023239c6A063",
        "passiveNftAddress": "0xDc7ee66c43f35aC8C1d12Df90e61f05fbc2cD2c1",
        "passiveNftAbi": "../abis/polygon/PassiveNFT.json",
        "revenueShare": "0x0531Dfd07643B549a07F21dd5BA1Da1e1C43142e",
        "rentShare": "0x119775e06Abb7b083ae864C55f8C630d62EC7dF3",
        "revenueShareAbi": "../abis/polygon/RevenueShare.json",
        "uniswapFactory": "0xc35DADB65012eC5796536bD9864eD8773aBc74C4",
        "instantTradeEnabled": False,
        "chainlinkMatrixOracle": "0x731209585143011778C56BDfaAf87d341adE7C07",
        "feeDistributor": "0x6ceD48EfBb581A141667D7487222E42a3FA17cf7",  # revenue distributor
    },
}

# Raw config key -> NetworkRecord attribute
ADDRESS_FIELDS = {
    "usdcAddress": "usdc_address",
    "usdtAddress": "usdt_address",
    "usdrAddress": "usdr_address",
    "ustbAddress": "ustb_address",
    "daiAddress": "dai_address",
    "tngblAddress": "tngbl_address",
    "wrappedMatic": "wrapped_matic",
    "chainLinkGoldOracle": "chain_link_gold_oracle",
    "chainLinkGBPOracle": "chain_link_gbp_oracle",
    "chainlinkMatrixOracle": "chainlink_matrix_oracle",
    "routerAddress": "router_address",
    "pearlRouter": "pearl_router",
    "pearlFactory": "pearl_factory",
    "uniswapFactory": "uniswap_factory",
    "aavePool": "aave_pool",
    "ourPool": "our_pool",
    "tangibleLabs": "tangible_labs",
    "tangibleDao": "tangible_dao",
    "passiveNftAddress": "passive_nft_address",
    "revenueShare": "revenue_share",
    "rentShare": "rent_share",
    "feeDistributor": "fee_distributor",
}

METADATA_FIELDS = {
    "tokenUrl": "token_url",
    "fetchExternal": "fetch_external",
    "revenueShareAbi": "revenue_share_abi",
    "passiveNftAbi": "passive_nft_abi",
    "instantTradeEnabled": "instant_trade_enabled",
}


@dataclass(frozen=True)
class NetworkRecord:
    chain_id: int
    name: str

    usdc_address: str = ""
    usdt_address: str = ""
    usdr_address: str = ""
    ustb_address: str = ""
    dai_address: str = ""
    tngbl_address: str = ""
    wrapped_matic: str = ""
    chain_link_gold_oracle: str = ""
    chain_link_gbp_oracle: str = ""
    chainlink_matrix_oracle: str = ""
    router_address: str = ""
    pearl_router: str = ""
    pearl_factory: str = ""
    uniswap_factory: str = ""
    aave_pool: str = ""
    our_pool: str = ""
    tangible_labs: str = ""
    tangible_dao: str = ""
    passive_nft_address: str = ""
    revenue_share: str = ""
    rent_share: str = ""
    fee_distributor: str = ""

    token_url: str = ""
    fetch_external: str = ""
    revenue_share_abi: str = ""
    passive_nft_abi: str = ""
    instant_trade_enabled: bool = False

    def addresses(self) -> Dict[str, str]:
        """All address fields, deployed or not"""
        return {attr: getattr(self, attr) for attr in ADDRESS_FIELDS.values()}

    def deployed_addresses(self) -> Dict[str, str]:
        return {attr: value for attr, value in self.addresses().items() if value}


def is_deployed(address: str) -> bool:
    """Empty address fields mean "not deployed on this chain" """
    return bool(address)


def normalize_address(value: str) -> str:
    if value == "":
        return ""
    if not is_address(value):
        raise ValueError(f"Invalid address in network config: {value!r}")
    return to_checksum_address(value)


def record_from_config(chain_id: int, entry: dict) -> NetworkRecord:
    """Build a NetworkRecord from one raw NETWORK_CONFIG entry"""
    known = set(ADDRESS_FIELDS) | set(METADATA_FIELDS) | {"name"}
    unknown = set(entry) - known
    if unknown:
        raise ValueError(f"Unknown network config keys for {entry.get('name')}: {sorted(unknown)}")

    values = {"chain_id": chain_id, "name": entry["name"]}
    for key, attr in ADDRESS_FIELDS.items():
        values[attr] = normalize_address(entry.get(key, ""))
    for key, attr in METADATA_FIELDS.items():
        if key in entry:
            values[attr] = entry[key]
    return NetworkRecord(**values)


class NetworkRegistry:
    """
    Read-only set of NetworkRecords indexed by registry key and by name.

    The key is the chain id, except for the default record (the in-process
    hardhat network) which is keyed DEFAULT_KEY since its chain id is shared
    with localhost. Records keep their registration order. When two records
    share a name the first registered one wins in resolve_chain_id; when two
    records share a chain id, constructing the registry fails.
    """

    def __init__(self, records: Iterable[NetworkRecord], default: Optional[NetworkRecord] = None):
        self._records = tuple(records)
        self._default = default

        by_chain_id = {}
        for record in self._records:
            if record.chain_id in by_chain_id:
                raise ValueError(f"Duplicate chain id in network config: {record.chain_id}")
            by_chain_id[record.chain_id] = record

        by_name = {}
        for record in self._records:
            by_name.setdefault(record.name, record.chain_id)
        if default is not None:
            by_name.setdefault(default.name, DEFAULT_KEY)

        self._by_chain_id = MappingProxyType(by_chain_id)
        self._by_name = MappingProxyType(by_name)

    @property
    def default(self) -> Optional[NetworkRecord]:
        return self._default

    def get(self, key: RegistryKey) -> Optional[NetworkRecord]:
        if key == DEFAULT_KEY:
            return self._default
        return self._by_chain_id.get(key)

    def get_or_default(self, key: RegistryKey) -> Optional[NetworkRecord]:
        record = self.get(key)
        return record if record is not None else self._default

    def by_name(self, name: str) -> Optional[NetworkRecord]:
        key = self.resolve_chain_id(name)
        return self.get(key) if key is not None else None

    def resolve_chain_id(self, name: str) -> Optional[RegistryKey]:
        """Registry key of the network called ``name`` (exact match), or None"""
        return self._by_name.get(name)

    def names(self) -> List[str]:
        return list(self._by_name)

    def chain_ids(self) -> List[int]:
        return list(self._by_chain_id)

    def __getitem__(self, key: RegistryKey) -> NetworkRecord:
        record = self.get(key)
        if record is None:
            raise KeyError(key)
        return record

    def __contains__(self, key) -> bool:
        return self.get(key) is not None

    def __iter__(self) -> Iterator[NetworkRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)


def load_registry(config: dict = NETWORK_CONFIG) -> NetworkRegistry:
    """Build a registry from a raw config table shaped like NETWORK_CONFIG"""
    default = None
    records = []
    for key, entry in config.items():
        if key == DEFAULT_KEY:
            default = record_from_config(HARDHAT_CHAIN_ID, entry)
        else:
            records.append(record_from_config(int(key), entry))
    return NetworkRegistry(records, default=default)


NETWORKS = load_registry()


def get_network_id_from_name(name: str, registry: NetworkRegistry = NETWORKS) -> Optional[RegistryKey]:
    return registry.resolve_chain_id(name)
