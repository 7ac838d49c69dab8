# File: src/solgate/api/routes/blocks.py
import json
import re
from typing import Optional
from fastapi import APIRouter, Depends, Request, Response
from ...exceptions import ValidationError
from ...rpc.client import MAX_SLOT, SolanaRPCClient

router = APIRouter()

_DIGITS = re.compile(r"[0-9]+")

def get_rpc_client(request: Request) -> SolanaRPCClient:
    return request.app.state.rpc_client

def parse_slot(value: Optional[str]) -> int:
    """Parse a base-10 unsigned 64-bit slot number."""
    if not value:
        raise ValidationError("block parameter is required")
    if not _DIGITS.fullmatch(value):
        raise ValidationError("invalid block number")
    slot = int(value)
    if slot > MAX_SLOT:
        raise ValidationError("invalid block number")
    return slot

@router.get("/latest-block")
async def get_latest_block(client: SolanaRPCClient = Depends(get_rpc_client)):
    slot = await client.get_latest_slot()
    body = json.dumps({"latest_block": slot}, separators=(",", ":"))
    return Response(content=body, media_type="application/json")

@router.get("/block-details")
async def get_block_details(block: Optional[str] = None, client: SolanaRPCClient = Depends(get_rpc_client)):
    slot = parse_slot(block)
    payload = await client.get_block_details(slot)
    return Response(content=payload, media_type="application/json")
