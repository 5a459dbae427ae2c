"""
Tests for the JSON-RPC envelope types
"""

import pytest
from pydantic import ValidationError

from addrconv.types import (
    CONVERSION_ERROR,
    HealthResponse,
    RpcRequest,
    RpcResponse,
)


def test_request_with_positional_params():
    request = RpcRequest.model_validate(
        {"jsonrpc": "2.0", "method": "utils_convertAddress", "params": ["0x1"], "id": 7}
    )
    assert request.method == "utils_convertAddress"
    assert request.params == ["0x1"]
    assert request.id == 7
    assert request.is_notification is False


def test_request_with_null_id_is_not_notification():
    request = RpcRequest.model_validate({"jsonrpc": "2.0", "method": "m", "id": None})
    assert request.is_notification is False


def test_request_without_id_is_notification():
    request = RpcRequest.model_validate({"jsonrpc": "2.0", "method": "m", "params": {"a": 1}})
    assert request.is_notification is True
    assert request.params == {"a": 1}


@pytest.mark.parametrize(
    "raw",
    [
        {"method": "m", "id": 1},
        {"jsonrpc": "1.0", "method": "m", "id": 1},
        {"jsonrpc": "2.0", "id": 1},
        {"jsonrpc": "2.0", "method": "m", "params": "0x1", "id": 1},
    ],
)
def test_invalid_requests(raw):
    with pytest.raises(ValidationError):
        RpcRequest.model_validate(raw)


def test_success_wire_format():
    wire = RpcResponse.success(1, "secret1abc").to_wire()
    assert wire == {"jsonrpc": "2.0", "id": 1, "result": "secret1abc"}


def test_failure_wire_format_keeps_null_id():
    wire = RpcResponse.failure(None, CONVERSION_ERROR, "boom").to_wire()
    assert wire == {"jsonrpc": "2.0", "id": None, "error": {"code": -32000, "message": "boom"}}


def test_failure_wire_format_with_data():
    wire = RpcResponse.failure("a", -32602, "invalid params", data=["address: missing"]).to_wire()
    assert wire["error"]["data"] == ["address: missing"]
    assert "result" not in wire


def test_health_response_alias():
    health = HealthResponse(network="secret:mainnet", bech32Prefix="secret")
    assert health.model_dump(by_alias=True) == {
        "ok": True,
        "network": "secret:mainnet",
        "bech32Prefix": "secret",
    }
