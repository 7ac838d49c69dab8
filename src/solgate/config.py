# File: src/solgate/config.py

import os
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

import yaml

from .exceptions import ConfigError

DEFAULT_RPC_ENDPOINT = "https://api.mainnet-beta.solana.com"
DEFAULT_RPC_TIMEOUT = 10.0  # seconds
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080

ENV_PREFIX = "SOLGATE_"


@dataclass(frozen=True)
class GatewayConfig:
    rpc_endpoint: str = DEFAULT_RPC_ENDPOINT
    rpc_timeout: float = DEFAULT_RPC_TIMEOUT
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    def with_overrides(self, **overrides: Any) -> "GatewayConfig":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self


# yaml key -> (GatewayConfig field, converter)
_YAML_KEYS = {
    "rpc.endpoint": ("rpc_endpoint", str),
    "rpc.timeout": ("rpc_timeout", float),
    "server.host": ("host", str),
    "server.port": ("port", int),
    "logging.level": ("log_level", str),
}

_ENV_KEYS = {
    "RPC_ENDPOINT": ("rpc_endpoint", str),
    "RPC_TIMEOUT": ("rpc_timeout", float),
    "HOST": ("host", str),
    "PORT": ("port", int),
    "LOG_LEVEL": ("log_level", str),
}


def _lookup(data: Dict[str, Any], key: str) -> Any:
    """Get a dotted key out of nested dicts, None when absent."""
    try:
        value = data
        for k in key.split('.'):
            value = value[k]
        return value
    except (KeyError, TypeError):
        return None


def _convert(source: str, value: Any, converter) -> Any:
    if isinstance(value, bool):
        raise ConfigError(f"invalid value for {source}: {value!r}")
    if converter is int and isinstance(value, float) and not value.is_integer():
        raise ConfigError(f"invalid value for {source}: {value!r}")
    try:
        return converter(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"invalid value for {source}: {value!r}") from e


def _load_yaml(path: str) -> Dict[str, Any]:
    with open(path, 'r') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"failed to parse {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping")
    return data


def load_config(path: Optional[str] = None, environ: Optional[Dict[str, str]] = None) -> GatewayConfig:
    """Build the gateway configuration.

    Defaults are overlaid by the YAML file at ``path`` (which must exist when
    given) and then by ``SOLGATE_*`` environment variables.
    """
    if environ is None:
        environ = dict(os.environ)

    values: Dict[str, Any] = {}

    if path:
        if not os.path.exists(path):
            raise ConfigError(f"config file not found: {path}")
        data = _load_yaml(path)
        for key, (field, converter) in _YAML_KEYS.items():
            raw = _lookup(data, key)
            if raw is not None:
                values[field] = _convert(key, raw, converter)

    for key, (field, converter) in _ENV_KEYS.items():
        raw = environ.get(ENV_PREFIX + key)
        if raw:
            values[field] = _convert(ENV_PREFIX + key, raw, converter)

    if "rpc_timeout" in values and values["rpc_timeout"] <= 0:
        raise ConfigError("rpc timeout must be positive")

    return GatewayConfig(**values)
