"""
addrconv - hex <-> bech32 account address conversion

Provides the converter core, its codecs, and a JSON-RPC ``utils`` namespace
served over FastAPI with a matching httpx client.
"""

__version__ = "0.1.0"

from addrconv.address import AddressConverter
from addrconv.codecs import Bech32Codec, EthHexCodec, HexCodec, StandardBech32Codec
from addrconv.config import NetworkConfig
from addrconv.exceptions import (
    AddrConvError,
    ConfigurationError,
    ConversionError,
    DecodeError,
    InvalidFormatError,
    RpcError,
    UnsupportedNetworkError,
)
from addrconv.rpc import RpcDispatcher, UtilsAPI

__all__ = [
    "__version__",
    # Converter
    "AddressConverter",
    # Codecs
    "HexCodec",
    "Bech32Codec",
    "EthHexCodec",
    "StandardBech32Codec",
    # Configuration
    "NetworkConfig",
    # Exceptions
    "AddrConvError",
    "ConversionError",
    "InvalidFormatError",
    "DecodeError",
    "ConfigurationError",
    "UnsupportedNetworkError",
    "RpcError",
    # RPC
    "RpcDispatcher",
    "UtilsAPI",
]
