"""ipfs_pinapi - async client for the pin endpoints of the Kubo HTTP RPC API."""

from ipfs_pinapi.errors import (
    ConfigError,
    ParseError,
    PinAPIError,
    RemoteError,
    StreamDecodeError,
    TransportError,
)
from ipfs_pinapi.ipfs.http import KuboHttpApi
from ipfs_pinapi.ipfs.pin import KuboPinAPI
from ipfs_pinapi.ipfs.verify import PinVerifyStream
from ipfs_pinapi.models import (
    BadPinNode,
    ClientConfig,
    Pin,
    PinAddOptions,
    PinLsOptions,
    PinStatus,
    PinType,
    PinUpdateOptions,
    ResolvedPath,
)

__all__ = [
    "PinAPIError", "ConfigError", "TransportError", "RemoteError",
    "ParseError", "StreamDecodeError",
    "KuboHttpApi", "KuboPinAPI", "PinVerifyStream",
    "Pin", "PinStatus", "BadPinNode", "ResolvedPath", "PinType",
    "PinAddOptions", "PinLsOptions", "PinUpdateOptions", "ClientConfig",
]
