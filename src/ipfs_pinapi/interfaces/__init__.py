"""Protocol interfaces for ipfs_pinapi components."""

from ipfs_pinapi.interfaces.pin import PinAPI, PinStatusStream

__all__ = ["PinAPI", "PinStatusStream"]
