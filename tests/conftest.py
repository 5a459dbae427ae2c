"""
Pytest configuration and shared fixtures
"""

import pytest

from addrconv.address import AddressConverter

# BIP-173 valid test vector: every bech32 character once, 20 bytes of data
VECTOR_PREFIX = "abcdef"
VECTOR_BECH32 = "abcdef1qpzry9x8gf2tvdw0s3jn54khce6mua7lmqqqxw"
VECTOR_HEX = "0x00443214c74254b635cf84653a56d7c675be77df"


@pytest.fixture
def vector_converter():
    """Converter using the BIP-173 vector prefix"""
    return AddressConverter(VECTOR_PREFIX)


@pytest.fixture
def addr_converter():
    """Converter using the example prefix ``addr``"""
    return AddressConverter("addr")


@pytest.fixture
def sample_hex_address():
    return "0x1234567890123456789012345678901234567890"


@pytest.fixture
def sample_payload():
    return bytes.fromhex("1234567890123456789012345678901234567890")


@pytest.fixture
def vector_prefix():
    return VECTOR_PREFIX


@pytest.fixture
def vector_bech32():
    return VECTOR_BECH32


@pytest.fixture
def vector_hex():
    return VECTOR_HEX
