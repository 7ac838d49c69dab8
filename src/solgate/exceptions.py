# src/solgate/exceptions.py

class GatewayError(Exception):
    """Base exception class for gateway-related errors"""
    pass

class ConfigError(GatewayError):
    """Raised when configuration values cannot be loaded"""
    pass

class ValidationError(GatewayError):
    """Raised when client-supplied input is missing or malformed"""
    pass

class RPCClientError(GatewayError):
    """Base exception class for errors talking to the RPC node"""
    pass

class TransportError(RPCClientError):
    """Raised when the RPC node cannot be reached"""
    pass

class ParseError(RPCClientError):
    """Raised when a JSON payload cannot be decoded"""
    pass

class RemoteError(RPCClientError):
    """Raised when the RPC node answers with an error object"""

    def __init__(self, code: int, message: str):
        self.code = code
        self.message = message
        super().__init__(f"RPC error: {code} - {message}")
