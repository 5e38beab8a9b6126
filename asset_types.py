# TNFT asset type descriptors
# Static description of each tokenized asset category deployed by the scripts

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class GoldBar:
    g_weight: int
    fingerprint: int


@dataclass(frozen=True)
class AssetType:
    name: str
    symbol: str
    tnft_type: int
    fixed_storage_fee: bool = False
    storage_required: bool = False
    pays_rent: bool = False
    symbol_in_uri: bool = True  # uri looks like example.com/<symbol>/<tokenId>
    storage_percentage: int = 0  # 2 decimals, 10 == 0.1%
    realty_fee: int = 0  # basis points, 100 == 1%
    sell_stock: int = 0
    gold_bars: Tuple[GoldBar, ...] = ()


@dataclass(frozen=True)
class TnftTypeInfo:
    id: int
    description: str
    pays_rent: bool


GOLD_BARS = (
    GoldBar(g_weight=100, fingerprint=1),
    GoldBar(g_weight=250, fingerprint=2),
    GoldBar(g_weight=500, fingerprint=3),
    GoldBar(g_weight=1000, fingerprint=4),
)

GOLD = AssetType(
    name="TangibleGoldBars",
    symbol="TanXAU",
    tnft_type=1,
    fixed_storage_fee=False,
    storage_required=True,
    sell_stock=43,
    gold_bars=GOLD_BARS,
    storage_percentage=10,
)

REAL_ESTATE = AssetType(
    name="TangibleREstate",
    symbol="RLTY",
    tnft_type=2,
    fixed_storage_fee=False,
    storage_required=False,
    pays_rent=True,
    realty_fee=100,
)

ASSET_TYPES = (GOLD, REAL_ESTATE)

TNFT_TYPES = (
    TnftTypeInfo(id=1, description="Gold bars", pays_rent=False),
    TnftTypeInfo(id=2, description="Real Estates", pays_rent=True),
)

GBP_CONVERSION_FEE = 1000000


def get_tnft_type(type_id: int) -> Optional[TnftTypeInfo]:
    for info in TNFT_TYPES:
        if info.id == type_id:
            return info
    return None


def asset_type_for(tnft_type: int) -> Optional[AssetType]:
    for asset in ASSET_TYPES:
        if asset.tnft_type == tnft_type:
            return asset
    return None
