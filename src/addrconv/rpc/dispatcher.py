"""
RpcDispatcher - routes JSON-RPC 2.0 requests to registered API objects
"""

import inspect
import logging
from typing import Any, Callable, Optional

from pydantic import ValidationError

from addrconv.exceptions import ConversionError
from addrconv.types import (
    CONVERSION_ERROR,
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    RequestId,
    RpcRequest,
    RpcResponse,
)

logger = logging.getLogger(__name__)


def rpc_method_name(namespace: str, attr: str) -> str:
    """Map a Python method name to its wire name, e.g. utils + convert_address"""
    head, *rest = attr.split("_")
    return f"{namespace}_{head}" + "".join(part.capitalize() for part in rest)


class RpcDispatcher:
    """
    Dispatches JSON-RPC 2.0 requests (single or batch) to API methods.

    Usage:
        dispatcher = RpcDispatcher().register("utils", UtilsAPI(converter))
        dispatcher.handle({"jsonrpc": "2.0", "method": "utils_convertAddress",
                           "params": ["0x..."], "id": 1})
    """

    def __init__(self) -> None:
        self._methods: dict[str, Callable[..., Any]] = {}

    def register(self, namespace: str, service: Any) -> "RpcDispatcher":
        """
        Expose every public method of ``service`` under ``namespace``.

        Args:
            namespace: RPC namespace (e.g., "utils")
            service: API object

        Returns:
            self for method chaining
        """
        for attr, member in inspect.getmembers(service, callable):
            if attr.startswith("_"):
                continue
            name = rpc_method_name(namespace, attr)
            self._methods[name] = member
            logger.debug(f"Registered RPC method {name}")
        return self

    def methods(self) -> list[str]:
        """List registered wire method names"""
        return sorted(self._methods)

    def handle(self, payload: Any) -> Optional[dict[str, Any] | list[dict[str, Any]]]:
        """
        Handle a decoded JSON-RPC payload.

        Args:
            payload: A request object or a list of request objects

        Returns:
            Response object, list of response objects, or None when nothing
            needs to be sent back (notifications only)
        """
        if isinstance(payload, list):
            if not payload:
                return RpcResponse.failure(None, INVALID_REQUEST, "empty batch").to_wire()
            responses = [self._handle_one(item) for item in payload]
            results = [r.to_wire() for r in responses if r is not None]
            return results or None

        response = self._handle_one(payload)
        return response.to_wire() if response is not None else None

    def _handle_one(self, raw: Any) -> Optional[RpcResponse]:
        try:
            request = RpcRequest.model_validate(raw)
        except ValidationError:
            return RpcResponse.failure(_raw_id(raw), INVALID_REQUEST, "invalid request")

        response = self._call(request)
        if request.is_notification:
            return None
        return response

    def _call(self, request: RpcRequest) -> RpcResponse:
        method = self._methods.get(request.method)
        if method is None:
            return RpcResponse.failure(
                request.id,
                METHOD_NOT_FOUND,
                f"the method {request.method} does not exist/is not available",
            )

        args: list[Any] = []
        kwargs: dict[str, Any] = {}
        if isinstance(request.params, list):
            args = request.params
        elif isinstance(request.params, dict):
            kwargs = request.params

        # Arity and types are checked by the method's validate_call wrapper
        try:
            result = method(*args, **kwargs)
        except ValidationError as e:
            return RpcResponse.failure(
                request.id, INVALID_PARAMS, "invalid params", data=_validation_details(e)
            )
        except ConversionError as e:
            return RpcResponse.failure(request.id, CONVERSION_ERROR, str(e))
        except Exception:
            logger.exception(f"RPC method {request.method} failed")
            return RpcResponse.failure(request.id, INTERNAL_ERROR, "internal error")

        return RpcResponse.success(request.id, result)


def _raw_id(raw: Any) -> RequestId:
    if isinstance(raw, dict):
        request_id = raw.get("id")
        if isinstance(request_id, (int, str)) and not isinstance(request_id, bool):
            return request_id
    return None


def _validation_details(error: ValidationError) -> list[str]:
    return [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in error.errors()]
