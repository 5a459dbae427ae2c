"""
JSON-RPC API objects and dispatch
"""

from addrconv.rpc.api import UtilsAPI
from addrconv.rpc.dispatcher import RpcDispatcher, rpc_method_name

__all__ = [
    "RpcDispatcher",
    "UtilsAPI",
    "rpc_method_name",
]
