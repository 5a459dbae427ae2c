"""
FastAPI application serving the utils namespace over JSON-RPC 2.0
"""

import json
import logging
from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from addrconv import __version__
from addrconv.address import AddressConverter
from addrconv.config import NetworkConfig
from addrconv.rpc import RpcDispatcher, UtilsAPI
from addrconv.types import PARSE_ERROR, HealthResponse, RpcResponse

logger = logging.getLogger(__name__)


def create_app(
    converter: Optional[AddressConverter] = None,
    network: Optional[str] = None,
    cors_origins: Optional[list[str]] = None,
) -> FastAPI:
    """
    Build the JSON-RPC application.

    Usage:
        app = create_app(network=NetworkConfig.SECRET_MAINNET)
        # POST / {"jsonrpc": "2.0", "method": "utils_convertAddress",
        #         "params": ["0x..."], "id": 1}

    Args:
        converter: Converter to serve; built from ``network`` when omitted
        network: Network identifier used to look up the bech32 prefix
        cors_origins: Origins allowed by the CORS middleware, none if omitted

    Returns:
        FastAPI application
    """
    if converter is None:
        network = network or NetworkConfig.DEFAULT_NETWORK
        converter = AddressConverter.for_network(network)

    dispatcher = RpcDispatcher().register("utils", UtilsAPI(converter))
    logger.info(
        f"Serving {', '.join(dispatcher.methods())} with bech32 prefix {converter.bech32_prefix}"
    )

    app = FastAPI(title="addrconv", description="Address conversion RPC", version=__version__)
    app.state.dispatcher = dispatcher

    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

    @app.get("/health")
    async def health() -> dict:
        return HealthResponse(network=network, bech32Prefix=converter.bech32_prefix).model_dump(
            by_alias=True
        )

    @app.post("/")
    async def rpc(request: Request) -> Response:
        body = await request.body()
        try:
            payload = json.loads(body)
        except ValueError:
            error = RpcResponse.failure(None, PARSE_ERROR, "parse error")
            return JSONResponse(content=error.to_wire())

        result = dispatcher.handle(payload)
        if result is None:
            return Response(status_code=204)
        return JSONResponse(content=result)

    return app
