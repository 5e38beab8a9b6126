#!/usr/bin/env python3
"""
Generate signed MintVoucher / BurnVoucher test vectors

Signs a set of sample vouchers with a local key against a fixed contract
address and chain id, and writes them (with r, s, v and the EIP712 digest)
to a JSON file the contract tests can load.

Usage:
    python3 generate_voucher_vectors.py [--output FILE] [--network NAME] [--contract ADDRESS]
"""

import argparse
import asyncio
import json
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from eip712_config import (
    BURN_VOUCHER,
    MINT_VOUCHER,
    TEST_CHAIN_ID,
    TEST_CONTRACT_ADDRESS,
    TEST_SIGNER_PRIVATE_KEY,
)
from eip712_helpers import get_voucher_digest, recover_voucher_signer
from network_config import NETWORKS
from vouchers import (
    LocalAccountAgent,
    VoucherError,
    build_typed_data,
    create_burn_voucher,
    create_mint_voucher,
    signing_domain,
    split_signature,
)

# Load environment variables
load_dotenv()

DEFAULT_OUTPUT = Path("test/test_vectors/voucher_vectors.json")

MINT_CASES = [
    {
        "description": "Single gold bar",
        "token": "0x0000000000000000000000000000000000000001",
        "token_id": 1,
        "price": 1000,
        "storage_years": 2,
        "minting_fee": 50,
        "amount": 1,
        "mint_count": 1,
        "vendor": "0x0000000000000000000000000000000000000002",
        "brand": "Acme",
    },
    {
        "description": "Real estate, price above 2**63",
        "token": "0x0000000000000000000000000000000000000001",
        "token_id": 2**200 + 7,
        "price": 2**64 + 1,
        "storage_years": 0,
        "minting_fee": 0,
        "amount": 1,
        "mint_count": 3,
        "vendor": "0x0000000000000000000000000000000000000002",
        "brand": "",
    },
]

BURN_CASES = [
    {
        "description": "Burn single token",
        "token": "0x0000000000000000000000000000000000000001",
        "token_id": 1,
        "amount": 1,
        "from_": "0x0000000000000000000000000000000000000003",
    },
]


class OfflineContract:
    """Stands in for a deployed TNFT contract when only address and chain id are known"""

    class _Call:
        def __init__(self, value):
            self._value = value

        def call(self):
            return self._value

    class _Functions:
        def __init__(self, chain_id):
            self._chain_id = chain_id

        def _chainId(self):
            return OfflineContract._Call(self._chain_id)

    def __init__(self, address, chain_id):
        self.address = address
        self.functions = OfflineContract._Functions(chain_id)


async def _vector(contract, signer, primary_type, voucher, description):
    domain = await signing_domain(contract)
    message = {key: value for key, value in voucher.items() if key != "signature"}
    typed_data = build_typed_data(domain, primary_type, message)
    r, s, v = split_signature(voucher["signature"])

    recovered = recover_voucher_signer(typed_data, voucher["signature"])
    if recovered.lower() != signer.lower():
        raise ValueError(f"Recovered {recovered}, expected {signer}")

    return {
        "description": description,
        "primary_type": primary_type,
        "signer": signer,
        "domain": domain,
        # uint256 values are written as strings so JSON readers keep full precision
        "voucher": {key: str(value) if isinstance(value, int) else value for key, value in voucher.items()},
        "digest": "0x" + get_voucher_digest(typed_data).hex(),
        "r": r,
        "s": s,
        "v": v,
    }


async def generate_vectors(contract, agent, signer):
    vectors = {"mint_voucher": [], "burn_voucher": []}

    for case in MINT_CASES:
        params = {key: value for key, value in case.items() if key != "description"}
        voucher = await create_mint_voucher(contract, signer, agent=agent, **params)
        vectors["mint_voucher"].append(await _vector(contract, signer, MINT_VOUCHER, voucher, case["description"]))
        print(f"✅ {case['description']}")

    for case in BURN_CASES:
        params = {key: value for key, value in case.items() if key != "description"}
        voucher = await create_burn_voucher(contract, signer, agent=agent, **params)
        vectors["burn_voucher"].append(await _vector(contract, signer, BURN_VOUCHER, voucher, case["description"]))
        print(f"✅ {case['description']}")

    return vectors


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate signed TNFT voucher test vectors")
    parser.add_argument("--output", type=Path, default=DEFAULT_OUTPUT, help="Where to write the vectors")
    parser.add_argument("--contract", default=TEST_CONTRACT_ADDRESS, help="Verifying contract address")
    parser.add_argument("--network", help="Network name used to pick the chain id (default: hardhat)")
    args = parser.parse_args(argv)

    chain_id = TEST_CHAIN_ID
    if args.network:
        network = NETWORKS.by_name(args.network)
        if network is None:
            print(f"❌ Unknown network: {args.network}")
            return 1
        chain_id = network.chain_id

    private_key = os.getenv("VOUCHER_SIGNER_KEY", TEST_SIGNER_PRIVATE_KEY)
    agent = LocalAccountAgent.from_keys(private_key)
    signer = agent.addresses[0]
    contract = OfflineContract(args.contract, chain_id)

    print(f"Generating voucher vectors for {args.contract} on chain {chain_id}")
    print(f"Signer: {signer}")

    try:
        vectors = asyncio.run(generate_vectors(contract, agent, signer))
    except (VoucherError, ValueError) as e:
        print(f"❌ Error generating vectors: {e}")
        return 1

    args.output.parent.mkdir(parents=True, exist_ok=True)
    with open(args.output, "w") as f:
        json.dump(vectors, f, indent=2)

    total = len(vectors["mint_voucher"]) + len(vectors["burn_voucher"])
    print(f"\n🎉 Wrote {total} vectors to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
