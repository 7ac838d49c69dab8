# File: src/solgate/rpc/models.py
import json
import re
from pydantic import BaseModel
from typing import Any, Dict, List, Optional

JSONRPC_VERSION = "2.0"
REQUEST_ID = 1

_WHITESPACE = re.compile(r'[ \t\n\r]*')

def _reject_constant(name: str):
    raise ValueError(f"invalid JSON value {name}")

_decoder = json.JSONDecoder(parse_constant=_reject_constant)

def split_members(body: bytes) -> Dict[str, str]:
    """Split a top-level JSON object into its members' raw value text.

    Values are checked to be well-formed JSON but kept exactly as sent.
    When a key repeats, the last occurrence wins.
    """
    text = body.decode("utf-8")
    idx = _WHITESPACE.match(text, 0).end()
    if not text.startswith("{", idx):
        raise ValueError("response is not a JSON object")
    idx = _WHITESPACE.match(text, idx + 1).end()

    members: Dict[str, str] = {}
    if text.startswith("}", idx):
        idx += 1
    else:
        while True:
            key, idx = _decoder.raw_decode(text, idx)
            if not isinstance(key, str):
                raise ValueError(f"object key must be a string at char {idx}")
            idx = _WHITESPACE.match(text, idx).end()
            if not text.startswith(":", idx):
                raise ValueError(f"expected ':' at char {idx}")
            start = _WHITESPACE.match(text, idx + 1).end()
            _, idx = _decoder.raw_decode(text, start)
            members[key] = text[start:idx]

            idx = _WHITESPACE.match(text, idx).end()
            if text.startswith(",", idx):
                idx = _WHITESPACE.match(text, idx + 1).end()
                continue
            if text.startswith("}", idx):
                idx += 1
                break
            raise ValueError(f"expected ',' or '}}' at char {idx}")

    if _WHITESPACE.match(text, idx).end() != len(text):
        raise ValueError("trailing data after response object")
    return members

class RPCRequest(BaseModel):
    jsonrpc: str = JSONRPC_VERSION
    method: str
    params: Optional[List[Any]] = None
    id: int = REQUEST_ID

    def to_wire(self) -> bytes:
        """Serialize the envelope, leaving out empty params."""
        exclude = None if self.params else {"params"}
        return self.model_dump_json(exclude=exclude).encode()

class RPCErrorObject(BaseModel):
    code: int
    message: str

class RPCResponse(BaseModel):
    jsonrpc: Optional[str] = None
    result: Optional[bytes] = None  # raw JSON text, never decoded here
    error: Optional[RPCErrorObject] = None
    id: Optional[int] = None

    @classmethod
    def from_wire(cls, body: bytes) -> "RPCResponse":
        members = split_members(body)
        envelope = {key: _decoder.decode(value) for key, value in members.items() if key != "result"}
        if "result" in members:
            envelope["result"] = members["result"].encode("utf-8")
        return cls.model_validate(envelope)
