# EIP712 Domain and Voucher Type Configuration
# This file contains the domain parameters and type schemas used for TNFT voucher signing

from eth_utils import keccak

# Domain parameters (must match the values hardcoded in the TNFT contracts)
SIGNING_DOMAIN = "TNFT-Voucher"
SIGNATURE_VERSION = "1"

DOMAIN_TYPE = [
    {"type": "string", "name": "name"},
    {"type": "string", "name": "version"},
    {"type": "uint256", "name": "chainId"},
    {"type": "address", "name": "verifyingContract"},
]

MINT_VOUCHER_TYPE = [
    {"name": "token", "type": "address"},
    {"name": "tokenId", "type": "uint256"},
    {"name": "price", "type": "uint256"},
    {"name": "storageYears", "type": "uint256"},
    {"name": "mintingFee", "type": "uint256"},
    {"name": "amount", "type": "uint256"},
    {"name": "mintCount", "type": "uint256"},
    {"name": "vendor", "type": "address"},
    {"name": "brand", "type": "string"},
]

BURN_VOUCHER_TYPE = [
    {"name": "token", "type": "address"},
    {"name": "tokenId", "type": "uint256"},
    {"name": "amount", "type": "uint256"},
    {"name": "from", "type": "address"},
]

MINT_VOUCHER = "MintVoucher"
BURN_VOUCHER = "BurnVoucher"

VOUCHER_TYPES = {
    MINT_VOUCHER: MINT_VOUCHER_TYPE,
    BURN_VOUCHER: BURN_VOUCHER_TYPE,
}


def encode_type(primary_type, fields):
    """Build the canonical EIP712 type string, e.g. BurnVoucher(address token,...)"""
    members = ",".join(f"{field['type']} {field['name']}" for field in fields)
    return f"{primary_type}({members})"


DOMAIN_TYPE_STRING = encode_type("EIP712Domain", DOMAIN_TYPE)
MINT_VOUCHER_TYPE_STRING = encode_type(MINT_VOUCHER, MINT_VOUCHER_TYPE)
BURN_VOUCHER_TYPE_STRING = encode_type(BURN_VOUCHER, BURN_VOUCHER_TYPE)

# EIP712 Domain Separator Type Hash
# keccak256("EIP712Domain(string name,string version,uint256 chainId,address verifyingContract)")
DOMAIN_SEPARATOR_TYPE_HASH = "0x" + keccak(text=DOMAIN_TYPE_STRING).hex()

# EIP712 Type Hashes (matching the contracts)
MINT_VOUCHER_TYPE_HASH = "0x" + keccak(text=MINT_VOUCHER_TYPE_STRING).hex()
BURN_VOUCHER_TYPE_HASH = "0x" + keccak(text=BURN_VOUCHER_TYPE_STRING).hex()

# Hardhat's first dev account, used when no signing key is configured
TEST_SIGNER_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
TEST_SIGNER_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"

# Address hardhat assigns to the first contract deployed by the dev account
TEST_CONTRACT_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
TEST_CHAIN_ID = 31337
