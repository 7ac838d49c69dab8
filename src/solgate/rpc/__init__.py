# File: src/solgate/rpc/__init__.py
from .client import DEFAULT_TIMEOUT, RPCClient, SolanaRPCClient
from .models import RPCErrorObject, RPCRequest, RPCResponse

__all__ = ['DEFAULT_TIMEOUT', 'RPCClient', 'SolanaRPCClient', 'RPCErrorObject', 'RPCRequest', 'RPCResponse']
