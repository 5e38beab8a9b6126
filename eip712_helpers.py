#!/usr/bin/env python3
"""
EIP712 Helper Functions for TNFT Vouchers
This module computes the same hashes the TNFT contracts compute on-chain
(domain separator, voucher struct hashes, final digest) and recovers the
signer of a voucher signature.
"""

from typing import Any, Dict

from eth_abi import encode
from eth_account import Account
from eth_account.messages import encode_typed_data
from eth_utils import keccak, to_checksum_address

from eip712_config import (
    BURN_VOUCHER_TYPE_HASH,
    DOMAIN_SEPARATOR_TYPE_HASH,
    MINT_VOUCHER_TYPE_HASH,
    SIGNATURE_VERSION,
    SIGNING_DOMAIN,
)


def _hash_bytes(hex_value: str) -> bytes:
    return bytes.fromhex(hex_value[2:])  # Remove '0x' prefix


def compute_domain_separator(contract_address: str, chain_id: int) -> bytes:
    """Compute the EIP712 domain separator for a TNFT contract"""
    # keccak256(abi.encode(
    #     keccak256("EIP712Domain(string name,string version,uint256 chainId,address verifyingContract)"),
    #     keccak256(bytes(SIGNING_DOMAIN)),
    #     keccak256(bytes(SIGNATURE_VERSION)),
    #     chainId,
    #     address(this)
    # ))
    encoded = encode(
        ["bytes32", "bytes32", "bytes32", "uint256", "address"],
        [
            _hash_bytes(DOMAIN_SEPARATOR_TYPE_HASH),
            keccak(text=SIGNING_DOMAIN),
            keccak(text=SIGNATURE_VERSION),
            int(chain_id),
            to_checksum_address(contract_address),
        ],
    )
    return keccak(encoded)


def get_mint_voucher_struct_hash(
    token: str,
    token_id: int,
    price: int,
    storage_years: int,
    minting_fee: int,
    amount: int,
    mint_count: int,
    vendor: str,
    brand: str,
) -> bytes:
    """
    Compute the struct hash for MintVoucher(address token,uint256 tokenId,uint256 price,
    uint256 storageYears,uint256 mintingFee,uint256 amount,uint256 mintCount,
    address vendor,string brand)
    """
    encoded = encode(
        [
            "bytes32",
            "address",
            "uint256",
            "uint256",
            "uint256",
            "uint256",
            "uint256",
            "uint256",
            "address",
            "bytes32",
        ],
        [
            _hash_bytes(MINT_VOUCHER_TYPE_HASH),
            to_checksum_address(token),
            token_id,
            price,
            storage_years,
            minting_fee,
            amount,
            mint_count,
            to_checksum_address(vendor),
            # Dynamic types are hashed before encoding
            keccak(text=brand),
        ],
    )
    return keccak(encoded)


def get_burn_voucher_struct_hash(token: str, token_id: int, amount: int, from_address: str) -> bytes:
    """Compute the struct hash for BurnVoucher(address token,uint256 tokenId,uint256 amount,address from)"""
    encoded = encode(
        ["bytes32", "address", "uint256", "uint256", "address"],
        [
            _hash_bytes(BURN_VOUCHER_TYPE_HASH),
            to_checksum_address(token),
            token_id,
            amount,
            to_checksum_address(from_address),
        ],
    )
    return keccak(encoded)


def get_eip712_digest(domain_separator: bytes, struct_hash: bytes) -> bytes:
    """Compute the EIP712 digest: keccak256("\\x19\\x01" ‖ domainSeparator ‖ structHash)"""
    return keccak(b"\x19\x01" + domain_separator + struct_hash)


def get_voucher_digest(typed_data: Dict[str, Any]) -> bytes:
    """Compute the digest of a full typed data document built by vouchers.build_typed_data"""
    domain = typed_data["domain"]
    message = typed_data["message"]
    domain_separator = compute_domain_separator(domain["verifyingContract"], domain["chainId"])

    primary_type = typed_data["primaryType"]
    if primary_type == "MintVoucher":
        struct_hash = get_mint_voucher_struct_hash(
            message["token"],
            message["tokenId"],
            message["price"],
            message["storageYears"],
            message["mintingFee"],
            message["amount"],
            message["mintCount"],
            message["vendor"],
            message["brand"],
        )
    elif primary_type == "BurnVoucher":
        struct_hash = get_burn_voucher_struct_hash(
            message["token"],
            message["tokenId"],
            message["amount"],
            message["from"],
        )
    else:
        raise ValueError(f"Unsupported primary type: {primary_type}")

    return get_eip712_digest(domain_separator, struct_hash)


def recover_voucher_signer(typed_data: Dict[str, Any], signature) -> str:
    """Recover the address that signed a voucher typed data document"""
    signable = encode_typed_data(full_message=typed_data)
    return Account.recover_message(signable, signature=signature)
