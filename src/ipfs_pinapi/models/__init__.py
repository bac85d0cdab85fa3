"""Data models for the ipfs_pinapi client."""

from ipfs_pinapi.models.config import ClientConfig
from ipfs_pinapi.models.options import (
    PinAddOptions,
    PinLsOptions,
    PinType,
    PinUpdateOptions,
    resolve_options,
)
from ipfs_pinapi.models.pin import BadPinNode, Pin, PinStatus
from ipfs_pinapi.ipfs.path import ResolvedPath

__all__ = [
    "ClientConfig",
    "PinAddOptions", "PinLsOptions", "PinType", "PinUpdateOptions", "resolve_options",
    "BadPinNode", "Pin", "PinStatus", "ResolvedPath",
]
