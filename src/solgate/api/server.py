# File: src/solgate/api/server.py
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from ..config import GatewayConfig
from ..exceptions import RPCClientError, ValidationError
from ..rpc.client import RPCClient, SolanaRPCClient
from ..utils.logger import get_logger
from .routes import blocks_router

logger = get_logger(__name__)

def create_app(client: Optional[SolanaRPCClient] = None, config: Optional[GatewayConfig] = None) -> FastAPI:
    """Build the gateway application around an RPC client.

    When no client is given, one is created from ``config`` (or the
    defaults).
    """
    if client is None:
        client = RPCClient.from_config(config or GatewayConfig())

    app = FastAPI(title="solgate API")
    app.state.rpc_client = client

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        return PlainTextResponse(f"{exc}\n", status_code=400)

    # Remote error text is forwarded to the caller as-is
    @app.exception_handler(RPCClientError)
    async def handle_rpc_error(request: Request, exc: RPCClientError):
        logger.error(f"{request.url.path} failed: {exc}")
        return PlainTextResponse(f"{exc}\n", status_code=500)

    # Any other failure out of a client implementation gets the same treatment
    @app.middleware("http")
    async def handle_unexpected_error(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception(f"{request.url.path} failed: {exc}")
            return PlainTextResponse(f"{exc}\n", status_code=500)

    # Include routers
    app.include_router(blocks_router)

    return app
