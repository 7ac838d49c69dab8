# File: src/solgate/rpc/client.py

import asyncio
import json
from typing import Any, List, Optional, Protocol

import aiohttp
from pydantic import ValidationError as PydanticValidationError

from ..config import DEFAULT_RPC_TIMEOUT, GatewayConfig
from ..exceptions import ParseError, RemoteError, TransportError
from ..utils.logger import get_logger
from .models import RPCRequest, RPCResponse

logger = get_logger(__name__)

DEFAULT_TIMEOUT = DEFAULT_RPC_TIMEOUT
MAX_SLOT = 2 ** 64 - 1


class SolanaRPCClient(Protocol):
    """Operations the HTTP gateway needs from a Solana node.

    The gateway only ever talks to this protocol, so tests can hand it any
    object with these two coroutines instead of a networked client.
    """

    async def get_latest_slot(self) -> int:
        """Return the latest slot known to the node."""
        ...

    async def get_block_details(self, slot: int) -> bytes:
        """Return the block at ``slot`` as an undecoded JSON document."""
        ...


class RPCClient:
    """JSON-RPC 2.0 client for a Solana node over HTTP POST."""

    def __init__(self, endpoint: str, timeout: float = DEFAULT_TIMEOUT):
        self._endpoint = endpoint
        self._timeout = timeout

    @classmethod
    def from_config(cls, config: GatewayConfig) -> "RPCClient":
        return cls(config.rpc_endpoint, timeout=config.rpc_timeout)

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def timeout(self) -> float:
        return self._timeout

    async def send_request(self, method: str, params: Optional[List[Any]] = None) -> RPCResponse:
        """Perform one JSON-RPC round trip and return the decoded envelope.

        Raises:
            TransportError: the node could not be reached or timed out.
            ParseError: the reply is not a JSON-RPC envelope.
            RemoteError: the node answered with an error object.
        """
        request = RPCRequest(method=method, params=params)
        payload = request.to_wire()
        logger.debug(f"POST {self._endpoint} method={method}")

        try:
            async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self._timeout)) as session:
                async with session.post(
                    self._endpoint,
                    data=payload,
                    headers={"Content-Type": "application/json"},
                ) as resp:
                    status = resp.status
                    body = await resp.read()
        except asyncio.TimeoutError as e:
            logger.warning(f"RPC call {method} timed out after {self._timeout}s")
            raise TransportError(f"RPC request failed: timed out after {self._timeout}s") from e
        except aiohttp.ClientError as e:
            logger.warning(f"RPC call {method} failed: {e}")
            raise TransportError(f"RPC request failed: {e}") from e

        try:
            response = RPCResponse.from_wire(body)
        except ValueError as e:
            if status >= 400:
                logger.warning(f"RPC call {method} returned HTTP {status}")
                raise TransportError(f"RPC request failed: HTTP {status}") from e
            logger.warning(f"RPC call {method} returned an undecodable body")
            reason = e.errors()[0]['msg'] if isinstance(e, PydanticValidationError) else str(e)
            raise ParseError(f"failed to unmarshal response: {reason}") from e

        if response.error is not None:
            logger.warning(f"RPC call {method} returned error {response.error.code}: {response.error.message}")
            raise RemoteError(response.error.code, response.error.message)

        return response

    async def get_latest_slot(self) -> int:
        """Get the latest slot number"""
        response = await self.send_request("getSlot")

        raw = response.result
        slot = json.loads(raw) if raw is not None else None
        if isinstance(slot, bool) or not isinstance(slot, int) or not 0 <= slot <= MAX_SLOT:
            text = raw.decode("utf-8") if raw is not None else "missing result"
            raise ParseError(f"failed to parse slot number: {text} is not an unsigned 64-bit integer")

        return slot

    async def get_block_details(self, slot: int) -> bytes:
        """Get details of a specific block, exactly as the node encoded them"""
        response = await self.send_request("getBlock", [slot])
        return response.result if response.result is not None else b"null"
