#!/usr/bin/env python3
"""
TNFT voucher helpers

Builds EIP712 MintVoucher / BurnVoucher documents for a TNFT contract, asks a
signing agent to sign them and returns the voucher fields together with the
signature, ready to be passed to the contract in tests.

Signing agents expose a single coroutine::

    async def sign_typed_data(signer: str, typed_data: dict) -> str

which returns the 0x-prefixed 65 byte signature or raises a SigningFailure.
"""

import inspect
import logging
from typing import Any, Dict, Optional, Tuple

from eth_account import Account
from eth_utils import decode_hex, is_address, to_checksum_address, to_hex

from eip712_config import (
    BURN_VOUCHER,
    DOMAIN_TYPE,
    MINT_VOUCHER,
    SIGNATURE_VERSION,
    SIGNING_DOMAIN,
    VOUCHER_TYPES,
)

logger = logging.getLogger(__name__)

SIGNATURE_LENGTH = 65
UINT256_MAX = 2**256 - 1


class VoucherError(Exception):
    """Base class for voucher construction errors"""


class SigningFailure(VoucherError):
    """The voucher could not be signed"""


class SigningTransportError(SigningFailure):
    """The contract provider or the signing agent could not be reached"""


class SigningAgentError(SigningFailure):
    """The signing agent answered, but with an error instead of a signature"""


class MalformedSignatureError(VoucherError, ValueError):
    """The returned signature does not decode to 65 bytes"""


def split_signature(signature) -> Tuple[str, str, int]:
    """
    Split a 65 byte signature into (r, s, v).

    r and s are returned as 0x-prefixed 32 byte hex strings, v as an int
    (27/28 for keys signing locally, some agents return 0/1).
    """
    if isinstance(signature, (bytes, bytearray)):
        raw = bytes(signature)
    else:
        try:
            raw = decode_hex(signature)
        except (TypeError, ValueError) as exc:
            raise MalformedSignatureError(f"Signature is not a hex string: {signature!r}") from exc

    if len(raw) != SIGNATURE_LENGTH:
        raise MalformedSignatureError(
            f"Signature must be {SIGNATURE_LENGTH} bytes, got {len(raw)}"
        )

    r = to_hex(raw[:32])
    s = to_hex(raw[32:64])
    v = raw[64]
    return r, s, v


def _address(name: str, value: str) -> str:
    if not isinstance(value, str) or not is_address(value):
        raise ValueError(f"{name} must be an account address, got {value!r}")
    return to_checksum_address(value)


def _uint256(name: str, value: int) -> int:
    # bool is an int subclass but never a valid voucher amount
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0 or value > UINT256_MAX:
        raise ValueError(f"{name} out of uint256 range: {value}")
    return value


class LocalAccountAgent:
    """Signs with eth_account keys held in process (test keys, hardhat dev accounts)"""

    def __init__(self, *accounts):
        self._accounts = {account.address.lower(): account for account in accounts}

    @classmethod
    def from_keys(cls, *private_keys):
        return cls(*[Account.from_key(key) for key in private_keys])

    @property
    def addresses(self):
        return [account.address for account in self._accounts.values()]

    async def sign_typed_data(self, signer: str, typed_data: Dict[str, Any]) -> str:
        account = self._accounts.get(signer.lower())
        if account is None:
            raise SigningAgentError(f"No key held for signer {signer}")
        try:
            signed = account.sign_typed_data(full_message=typed_data)
        except (TypeError, ValueError) as exc:
            raise SigningAgentError(f"Signer {signer} rejected typed data: {exc}") from exc
        return to_hex(signed.signature)


class ProviderAgent:
    """
    Sends an eth_signTypedData JSON-RPC request through a web3 provider.

    Works with both sync providers (HTTPProvider, EthereumTesterProvider) and
    async ones (AsyncHTTPProvider). Hardhat and most nodes accept the typed
    data object directly; use method="eth_signTypedData_v4" for wallets that
    only expose the v4 name.
    """

    def __init__(self, provider, method: str = "eth_signTypedData"):
        self.provider = provider
        self.method = method

    async def sign_typed_data(self, signer: str, typed_data: Dict[str, Any]) -> str:
        try:
            response = self.provider.make_request(self.method, [signer, typed_data])
            if inspect.isawaitable(response):
                response = await response
        except Exception as exc:
            raise SigningTransportError(f"{self.method} request for {signer} failed: {exc}") from exc

        if not isinstance(response, dict):
            raise SigningAgentError(f"{self.method} returned a malformed response for {signer}: {response!r}")

        error = response.get("error")
        if error:
            message = error.get("message", error) if isinstance(error, dict) else error
            raise SigningAgentError(f"{self.method} rejected by signing agent: {message}")

        signature = response.get("result")
        if not signature:
            raise SigningAgentError(f"{self.method} returned no signature for {signer}")
        return signature


async def signing_domain(contract) -> Dict[str, Any]:
    """Build the EIP712 domain for a deployed TNFT contract"""
    try:
        chain_id = contract.functions._chainId().call()
        if inspect.isawaitable(chain_id):
            chain_id = await chain_id
    except Exception as exc:
        raise SigningTransportError(f"Could not read _chainId() from {contract.address}: {exc}") from exc

    return {
        "name": SIGNING_DOMAIN,
        "version": SIGNATURE_VERSION,
        "chainId": int(chain_id),
        "verifyingContract": to_checksum_address(contract.address),
    }


def build_typed_data(domain: Dict[str, Any], primary_type: str, message: Dict[str, Any]) -> Dict[str, Any]:
    """Assemble the full EIP712 document for one of the voucher kinds"""
    if primary_type not in VOUCHER_TYPES:
        raise ValueError(f"Unsupported primary type: {primary_type}")
    return {
        "types": {
            "EIP712Domain": DOMAIN_TYPE,
            primary_type: VOUCHER_TYPES[primary_type],
        },
        "domain": domain,
        "primaryType": primary_type,
        "message": message,
    }


def _default_agent(contract):
    # Same provider the contract talks through, as hardhat tests do
    return ProviderAgent(contract.w3.provider)


async def _sign_voucher(contract, signer: str, primary_type: str, voucher: Dict[str, Any], agent) -> Dict[str, Any]:
    domain = await signing_domain(contract)
    logger.debug("Signing %s for %s on chain %s", primary_type, domain["verifyingContract"], domain["chainId"])

    typed_data = build_typed_data(domain, primary_type, voucher)
    if agent is None:
        agent = _default_agent(contract)
    signature = await agent.sign_typed_data(signer, typed_data)

    # Reject anything that would not split into r, s, v on-chain
    split_signature(signature)
    logger.debug("Signed %s by %s", primary_type, signer)

    return {
        **voucher,
        "signature": signature,
    }


async def create_mint_voucher(
    contract,
    signer: str,
    token: str,
    token_id: int,
    price: int,
    storage_years: int,
    minting_fee: int,
    amount: int,
    mint_count: int,
    vendor: str,
    brand: str,
    agent: Optional[Any] = None,
) -> Dict[str, Any]:
    """
    Create a signed MintVoucher for ``contract``.

    All arguments are required. Returns the voucher fields (named as in the
    Solidity struct) plus ``signature``. ``token`` and ``vendor`` come back
    in checksum form; numbers and ``brand`` are returned as given.
    """
    if not isinstance(brand, str):
        raise ValueError(f"brand must be a string, got {type(brand).__name__}")
    voucher = {
        "token": _address("token", token),
        "tokenId": _uint256("tokenId", token_id),
        "price": _uint256("price", price),
        "storageYears": _uint256("storageYears", storage_years),
        "mintingFee": _uint256("mintingFee", minting_fee),
        "amount": _uint256("amount", amount),
        "mintCount": _uint256("mintCount", mint_count),
        "vendor": _address("vendor", vendor),
        "brand": brand,
    }
    return await _sign_voucher(contract, signer, MINT_VOUCHER, voucher, agent)


async def create_burn_voucher(
    contract,
    signer: str,
    token: str,
    token_id: int,
    amount: int,
    from_: str,
    agent: Optional[Any] = None,
) -> Dict[str, Any]:
    """
    Create a signed BurnVoucher for ``contract``.

    ``from_`` maps to the struct's ``from`` field. ``token`` and ``from`` come
    back in checksum form.
    """
    voucher = {
        "token": _address("token", token),
        "tokenId": _uint256("tokenId", token_id),
        "amount": _uint256("amount", amount),
        "from": _address("from", from_),
    }
    return await _sign_voucher(contract, signer, BURN_VOUCHER, voucher, agent)
