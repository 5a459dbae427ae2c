"""
Address converter module
"""

from addrconv.address.converter import AddressConverter, validate_bech32_prefix

__all__ = [
    "AddressConverter",
    "validate_bech32_prefix",
]
