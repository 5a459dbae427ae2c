"""
UtilsAPI - the ``utils`` RPC namespace
"""

from pydantic import validate_call

from addrconv.address import AddressConverter


class UtilsAPI:
    """
    Stateless RPC object exposing address conversion.

    Registered under the ``utils`` namespace, ``convert_address`` is served
    as ``utils_convertAddress``.
    """

    def __init__(self, converter: AddressConverter) -> None:
        self._converter = converter

    @validate_call
    def convert_address(self, address: str) -> str:
        """Convert a hex address to bech32 and vice versa"""
        return self._converter.convert(address)
