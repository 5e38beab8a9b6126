#!/usr/bin/env python3
"""
Compute the TNFT-Voucher domain separator for a deployed TNFT contract
"""

import argparse
import sys

from eip712_config import (
    BURN_VOUCHER_TYPE_HASH,
    BURN_VOUCHER_TYPE_STRING,
    DOMAIN_SEPARATOR_TYPE_HASH,
    MINT_VOUCHER_TYPE_HASH,
    MINT_VOUCHER_TYPE_STRING,
    SIGNATURE_VERSION,
    SIGNING_DOMAIN,
    TEST_CHAIN_ID,
    TEST_CONTRACT_ADDRESS,
)
from eip712_helpers import compute_domain_separator
from network_config import NETWORKS


def main(argv=None):
    parser = argparse.ArgumentParser(description="Compute the EIP712 domain separator for TNFT vouchers")
    parser.add_argument("--contract", default=TEST_CONTRACT_ADDRESS, help="Verifying contract address")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--chain-id", type=int, help="Chain id (default: hardhat 31337)")
    group.add_argument("--network", help="Network name from network_config, e.g. polygon")
    args = parser.parse_args(argv)

    chain_id = args.chain_id if args.chain_id is not None else TEST_CHAIN_ID
    if args.network:
        network = NETWORKS.by_name(args.network)
        if network is None:
            print(f"❌ Unknown network: {args.network} (known: {', '.join(NETWORKS.names())})")
            return 1
        chain_id = network.chain_id

    print(f"Computing domain separator for {SIGNING_DOMAIN} v{SIGNATURE_VERSION}...")
    print(f"Contract address: {args.contract}")
    print(f"Chain ID: {chain_id}")

    try:
        domain_separator = compute_domain_separator(args.contract, chain_id)
    except ValueError as e:
        print(f"❌ Error computing domain separator: {e}")
        return 1

    print(f"\nDomain Separator: 0x{domain_separator.hex()}")
    print(f"\nDOMAIN_SEPARATOR_TYPE_HASH = \"{DOMAIN_SEPARATOR_TYPE_HASH}\"")
    print(f"# {MINT_VOUCHER_TYPE_STRING}")
    print(f"MINT_VOUCHER_TYPE_HASH = \"{MINT_VOUCHER_TYPE_HASH}\"")
    print(f"# {BURN_VOUCHER_TYPE_STRING}")
    print(f"BURN_VOUCHER_TYPE_HASH = \"{BURN_VOUCHER_TYPE_HASH}\"")
    return 0


if __name__ == "__main__":
    sys.exit(main())
