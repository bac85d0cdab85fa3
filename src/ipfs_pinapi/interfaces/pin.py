"""PinAPI protocol - pin operations on an IPFS daemon."""

from __future__ import annotations

import asyncio
from typing import Any, AsyncIterator, Protocol

from ipfs_pinapi.models.options import PinAddOptions, PinLsOptions, PinUpdateOptions
from ipfs_pinapi.models.pin import Pin, PinStatus


class PinStatusStream(Protocol):
    """Single-use async sequence of verification records."""

    error: Exception | None

    def __aiter__(self) -> AsyncIterator[PinStatus]:
        ...

    async def aclose(self) -> None:
        ...

    async def __aenter__(self) -> PinStatusStream:
        ...

    async def __aexit__(self, *exc_info: Any) -> None:
        ...


class PinAPI(Protocol):
    """Client-side pin operations. The daemon is the source of truth."""

    async def add(self, path: Any, options: PinAddOptions | None = None, **kwargs: Any) -> None:
        """Pin content at path."""
        ...

    async def ls(self, options: PinLsOptions | None = None, **kwargs: Any) -> list[Pin]:
        """List pins, filtered by type."""
        ...

    async def rm(self, path: Any) -> None:
        """Remove a pin."""
        ...

    async def update(
        self, from_path: Any, to_path: Any,
        options: PinUpdateOptions | None = None, **kwargs: Any,
    ) -> None:
        """Replace one pin with another."""
        ...

    async def verify(self, cancel: asyncio.Event | None = None) -> PinStatusStream:
        """Stream verification results for all pins."""
        ...
