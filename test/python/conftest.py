import os
import sys

import pytest

# Ensure repository root is on sys.path before importing project modules.
repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

from eip712_config import TEST_SIGNER_PRIVATE_KEY  # noqa: E402

# Hardhat dev account #1
SECOND_SIGNER_PRIVATE_KEY = "0x59c6995e998f97a5a0044966f0945389dc9e86dae88c7a8412f4603b6b78690d"
CONTRACT_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"


class _Call:
    def __init__(self, value=None, error=None, is_async=True):
        self._value = value
        self._error = error
        self._is_async = is_async

    def call(self):
        if self._is_async:
            return self._async_call()
        if self._error is not None:
            raise self._error
        return self._value

    async def _async_call(self):
        if self._error is not None:
            raise self._error
        return self._value


class _Functions:
    def __init__(self, chain_id, error, is_async):
        self._chain_id = chain_id
        self._error = error
        self._is_async = is_async
        self.chain_id_calls = 0

    def _chainId(self):
        self.chain_id_calls += 1
        return _Call(self._chain_id, self._error, self._is_async)


class StubContract:
    """Looks enough like a web3 contract for signing_domain: address + functions._chainId().call()"""

    def __init__(self, address=CONTRACT_ADDRESS, chain_id=31337, error=None, is_async=True, w3=None):
        self.address = address
        self.functions = _Functions(chain_id, error, is_async)
        self.w3 = w3


@pytest.fixture
def contract():
    return StubContract()


@pytest.fixture
def signer_keys():
    return TEST_SIGNER_PRIVATE_KEY, SECOND_SIGNER_PRIVATE_KEY
