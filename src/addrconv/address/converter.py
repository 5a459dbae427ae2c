"""
Address converter between hex and bech32 account encodings
"""

import logging
from typing import Optional

from addrconv.codecs import ADDRESS_LENGTH, Bech32Codec, EthHexCodec, HexCodec, StandardBech32Codec
from addrconv.config import NetworkConfig
from addrconv.exceptions import ConfigurationError, DecodeError, InvalidFormatError

logger = logging.getLogger(__name__)

# BIP-173 bounds on the human-readable part
MAX_PREFIX_LENGTH = 83


def validate_bech32_prefix(prefix: str) -> str:
    """Check that a bech32 human-readable prefix can be encoded

    Raises:
        ConfigurationError: If the prefix is empty, too long, uppercase or
            contains characters outside printable ASCII
    """
    if not prefix:
        raise ConfigurationError("bech32 prefix must not be empty")
    if len(prefix) > MAX_PREFIX_LENGTH:
        raise ConfigurationError(
            f"bech32 prefix must be at most {MAX_PREFIX_LENGTH} characters: {prefix!r}"
        )
    if any(ord(c) < 33 or ord(c) > 126 for c in prefix):
        raise ConfigurationError(f"bech32 prefix contains invalid characters: {prefix!r}")
    if prefix != prefix.lower():
        raise ConfigurationError(f"bech32 prefix must be lowercase: {prefix!r}")
    return prefix


class AddressConverter:
    """
    Converts an account address to the other of its two encodings.

    A hex address (``0x`` + 40 hex digits) becomes a bech32 address under the
    configured prefix; a string starting with that prefix is decoded as bech32
    and returned as hex. Anything else is rejected with InvalidFormatError.

    Usage:
        converter = AddressConverter("secret")
        converter.convert("0x1234567890123456789012345678901234567890")
    """

    def __init__(
        self,
        bech32_prefix: str,
        hex_codec: Optional[HexCodec] = None,
        bech32_codec: Optional[Bech32Codec] = None,
    ) -> None:
        self._prefix = validate_bech32_prefix(bech32_prefix)
        self._hex_codec = hex_codec or EthHexCodec()
        self._bech32_codec = bech32_codec or StandardBech32Codec()

    @classmethod
    def for_network(cls, network: str, **kwargs) -> "AddressConverter":
        """Build a converter using the account prefix configured for ``network``

        Raises:
            UnsupportedNetworkError: If network is not supported
        """
        return cls(NetworkConfig.get_bech32_prefix(network), **kwargs)

    @property
    def bech32_prefix(self) -> str:
        return self._prefix

    def convert(self, address: str) -> str:
        """Convert a hex address to bech32, or a bech32 address to hex

        Hex detection is a strict format check and runs first. Bech32
        detection only looks at the prefix, so a malformed prefixed string
        surfaces as DecodeError rather than InvalidFormatError.

        Raises:
            InvalidFormatError: Input matches neither form
            DecodeError: Input has the bech32 prefix but does not decode
        """
        if self._hex_codec.is_hex_address(address):
            return self.to_bech32(address)
        if address.startswith(self._prefix):
            return self.to_hex(address)
        raise InvalidFormatError(address)

    def to_bech32(self, hex_address: str) -> str:
        """Encode a hex address under the configured prefix"""
        payload = self._hex_codec.hex_to_bytes(hex_address)
        converted = self._bech32_codec.encode(self._prefix, payload)
        logger.debug(f"Converted hex address {hex_address} to {converted}")
        return converted

    def to_hex(self, bech32_address: str) -> str:
        """Decode a bech32 address carrying the configured prefix into hex

        Raises:
            DecodeError: On decode failure, prefix mismatch or wrong length
        """
        prefix, payload = self._bech32_codec.decode(bech32_address)
        if prefix != self._prefix:
            raise DecodeError(
                bech32_address,
                f"invalid Bech32 prefix; expected {self._prefix}, got {prefix}",
            )
        if len(payload) != ADDRESS_LENGTH:
            raise DecodeError(
                bech32_address,
                f"incorrect address length; expected {ADDRESS_LENGTH} bytes, got {len(payload)}",
            )
        converted = self._hex_codec.bytes_to_hex(payload)
        logger.debug(f"Converted bech32 address {bech32_address} to {converted}")
        return converted
