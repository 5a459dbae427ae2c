"""
Hex and bech32 codecs used by the address converter
"""

from abc import ABC, abstractmethod

from bech32 import bech32_decode, bech32_encode, convertbits
from eth_utils import decode_hex, encode_hex, is_0x_prefixed, is_hex_address, to_checksum_address

from addrconv.exceptions import DecodeError, InvalidFormatError

ADDRESS_LENGTH = 20


class HexCodec(ABC):
    """Abstract base class for hex address codecs"""

    @abstractmethod
    def is_hex_address(self, address: str) -> bool:
        """Check for the strict ``0x`` + 40 hex digit form"""
        pass

    @abstractmethod
    def hex_to_bytes(self, address: str) -> bytes:
        """Decode a hex address into its 20-byte payload"""
        pass

    @abstractmethod
    def bytes_to_hex(self, payload: bytes) -> str:
        """Encode a 20-byte payload as a hex address"""
        pass


class Bech32Codec(ABC):
    """Abstract base class for bech32 codecs"""

    @abstractmethod
    def encode(self, prefix: str, payload: bytes) -> str:
        """Encode payload bytes under the given human-readable prefix"""
        pass

    @abstractmethod
    def decode(self, address: str) -> tuple[str, bytes]:
        """Decode a bech32 string into (prefix, payload bytes)

        Raises:
            DecodeError: On bad checksum, character set or layout
        """
        pass


class EthHexCodec(HexCodec):
    """Hex codec for Ethereum-style account addresses

    Output is lowercase unless ``checksum`` is set, in which case the
    EIP-55 mixed-case form is produced.
    """

    def __init__(self, checksum: bool = False) -> None:
        self.checksum = checksum

    def is_hex_address(self, address: str) -> bool:
        # eth_utils also accepts the bare 40-digit form; require the 0x prefix
        return is_hex_address(address) and is_0x_prefixed(address)

    def hex_to_bytes(self, address: str) -> bytes:
        if not self.is_hex_address(address):
            raise InvalidFormatError(address, f"invalid hex address: {address}")
        return decode_hex(address)

    def bytes_to_hex(self, payload: bytes) -> str:
        if len(payload) != ADDRESS_LENGTH:
            raise ValueError(
                f"hex address payload must be {ADDRESS_LENGTH} bytes, got {len(payload)}"
            )
        if self.checksum:
            return to_checksum_address(encode_hex(payload))
        return encode_hex(payload)


class StandardBech32Codec(Bech32Codec):
    """BIP-173 bech32 codec"""

    def encode(self, prefix: str, payload: bytes) -> str:
        return bech32_encode(prefix, convertbits(payload, 8, 5))

    def decode(self, address: str) -> tuple[str, bytes]:
        prefix, data = bech32_decode(address)
        if prefix is None or data is None:
            raise DecodeError(address, "decoding bech32 failed: invalid checksum or format")
        decoded = convertbits(data, 5, 8, False)
        if decoded is None:
            raise DecodeError(address, "decoding bech32 failed: invalid padding")
        return prefix, bytes(decoded)
