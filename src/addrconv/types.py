"""
Type definitions for the JSON-RPC 2.0 envelope
"""

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field

JSONRPC_VERSION = "2.0"

# JSON-RPC 2.0 error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603
# Server-defined: conversion failed
CONVERSION_ERROR = -32000

RequestId = Union[int, str, None]


class RpcRequest(BaseModel):
    """JSON-RPC request object"""

    jsonrpc: Literal["2.0"]
    method: str
    params: Optional[Union[list[Any], dict[str, Any]]] = None
    id: RequestId = None

    @property
    def is_notification(self) -> bool:
        """A request without an ``id`` member expects no response"""
        return "id" not in self.model_fields_set


class RpcErrorObject(BaseModel):
    """JSON-RPC error object"""

    code: int
    message: str
    data: Optional[Any] = None


class RpcResponse(BaseModel):
    """JSON-RPC response object; exactly one of result/error is serialized"""

    jsonrpc: Literal["2.0"] = JSONRPC_VERSION
    id: RequestId = None
    result: Optional[Any] = None
    error: Optional[RpcErrorObject] = None

    @classmethod
    def success(cls, request_id: RequestId, result: Any) -> "RpcResponse":
        return cls(id=request_id, result=result)

    @classmethod
    def failure(
        cls, request_id: RequestId, code: int, message: str, data: Any = None
    ) -> "RpcResponse":
        return cls(id=request_id, error=RpcErrorObject(code=code, message=message, data=data))

    def to_wire(self) -> dict[str, Any]:
        """Serialize for the wire, keeping ``id`` even when null"""
        if self.error is not None:
            return {
                "jsonrpc": self.jsonrpc,
                "id": self.id,
                "error": self.error.model_dump(exclude_none=True),
            }
        return self.model_dump(exclude={"error"})


class HealthResponse(BaseModel):
    """Health check response"""

    ok: bool = True
    network: Optional[str] = None
    bech32_prefix: str = Field(alias="bech32Prefix")

    class Config:
        populate_by_name = True
