from eth_account.messages import encode_typed_data
from eth_utils import keccak

from eip712_config import (
    BURN_VOUCHER_TYPE_HASH,
    BURN_VOUCHER_TYPE_STRING,
    DOMAIN_SEPARATOR_TYPE_HASH,
    MINT_VOUCHER_TYPE_STRING,
)
from eip712_helpers import (
    compute_domain_separator,
    get_burn_voucher_struct_hash,
    get_eip712_digest,
    get_mint_voucher_struct_hash,
)
from vouchers import build_typed_data

CONTRACT = "0x5FbDB2315678afecb367f032d93F642f64180aa3"


def _domain(chain_id=31337):
    return {"name": "TNFT-Voucher", "version": "1", "chainId": chain_id, "verifyingContract": CONTRACT}


def test_type_strings_match_solidity_structs():
    assert MINT_VOUCHER_TYPE_STRING == (
        "MintVoucher(address token,uint256 tokenId,uint256 price,uint256 storageYears,"
        "uint256 mintingFee,uint256 amount,uint256 mintCount,address vendor,string brand)"
    )
    assert BURN_VOUCHER_TYPE_STRING == "BurnVoucher(address token,uint256 tokenId,uint256 amount,address from)"
    assert BURN_VOUCHER_TYPE_HASH == "0x" + keccak(text=BURN_VOUCHER_TYPE_STRING).hex()


def test_domain_type_hash_is_the_standard_one():
    assert DOMAIN_SEPARATOR_TYPE_HASH == "0x8b73c3c69bb8fe3d512ecc4cf759cc79239f7b179b0ffacaa9a75d522b39400f"


def test_domain_separator_matches_eth_account():
    message = {
        "token": "0x0000000000000000000000000000000000000001",
        "tokenId": 1,
        "amount": 1,
        "from": "0x0000000000000000000000000000000000000003",
    }
    signable = encode_typed_data(full_message=build_typed_data(_domain(137), "BurnVoucher", message))

    assert signable.header == compute_domain_separator(CONTRACT, 137)
    assert signable.body == get_burn_voucher_struct_hash(message["token"], 1, 1, message["from"])


def test_mint_struct_hash_matches_eth_account():
    message = {
        "token": "0x0000000000000000000000000000000000000001",
        "tokenId": 1,
        "price": 1000,
        "storageYears": 2,
        "mintingFee": 50,
        "amount": 1,
        "mintCount": 1,
        "vendor": "0x0000000000000000000000000000000000000002",
        "brand": "Acme",
    }
    signable = encode_typed_data(full_message=build_typed_data(_domain(), "MintVoucher", message))

    struct_hash = get_mint_voucher_struct_hash(
        message["token"], 1, 1000, 2, 50, 1, 1, message["vendor"], "Acme"
    )
    assert signable.body == struct_hash
    assert get_eip712_digest(signable.header, struct_hash) == keccak(b"\x19\x01" + signable.header + struct_hash)


def test_domain_separator_depends_on_chain_and_contract():
    base = compute_domain_separator(CONTRACT, 31337)

    assert base != compute_domain_separator(CONTRACT, 80001)
    assert base != compute_domain_separator("0x0000000000000000000000000000000000000001", 31337)
    assert base == compute_domain_separator(CONTRACT.lower(), 31337)
