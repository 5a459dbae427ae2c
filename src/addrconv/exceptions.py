"""
addrconv custom exception hierarchy
"""

from typing import Any


class AddrConvError(Exception):
    """addrconv base exception"""

    pass


class ConversionError(AddrConvError):
    """Address conversion failed"""

    pass


class InvalidFormatError(ConversionError):
    """Input is neither a hex address nor a bech32 address"""

    def __init__(self, address: str, message: str = "expected a valid hex or bech32 address"):
        self.address = address
        super().__init__(message)


class DecodeError(ConversionError):
    """Bech32-prefixed input could not be decoded"""

    def __init__(self, address: str, reason: str):
        self.address = address
        self.reason = reason
        super().__init__(reason)


class ConfigurationError(AddrConvError):
    """Configuration-related error"""

    pass


class UnsupportedNetworkError(ConfigurationError):
    """Unsupported network"""

    pass


class RpcError(AddrConvError):
    """Error object returned by a JSON-RPC server"""

    def __init__(self, code: int, message: str, data: Any = None):
        self.code = code
        self.message = message
        self.data = data
        super().__init__(f"[{code}] {message}")
