"""
addrconv RPC client
"""

from addrconv.clients.rpc_client import AddressRpcClient

__all__ = ["AddressRpcClient"]
