"""Kubo pin API client - add, list, remove, update and verify pins."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from ipfs_pinapi.errors import TransportError
from ipfs_pinapi.ipfs.http import KuboHttpApi
from ipfs_pinapi.ipfs.path import ResolvedPath
from ipfs_pinapi.ipfs.verify import PinVerifyStream
from ipfs_pinapi.models.options import (
    PinAddOptions,
    PinLsOptions,
    PinUpdateOptions,
    resolve_options,
)
from ipfs_pinapi.models.pin import Pin

log = logging.getLogger(__name__)


class KuboPinAPI:
    """Pin operations against a Kubo node's /api/v0/pin/* endpoints.

    Each call is one HTTP exchange. Options are resolved and validated
    before anything is sent, so a ConfigError never reaches the daemon.
    Daemon failures surface as RemoteError, network failures as
    TransportError; nothing is retried here.
    """

    def __init__(self, api: KuboHttpApi) -> None:
        self._api = api

    async def add(self, path: Any, options: PinAddOptions | None = None, **kwargs: Any) -> None:
        """Pin ``path`` (resolved by the daemon). Recursive unless told otherwise."""
        opts = resolve_options(PinAddOptions, options, kwargs)
        await (
            self._api.request("pin/add", path)
            .option("recursive", opts.recursive)
            .exec()
        )
        log.info("Pinned %s (recursive=%s)", path, opts.recursive)

    async def ls(self, options: PinLsOptions | None = None, **kwargs: Any) -> list[Pin]:
        """List pins of the requested type.

        Fails on the first CID the daemon returns that does not parse; no
        partial list is returned. Order is unspecified.
        """
        opts = resolve_options(PinLsOptions, options, kwargs)
        out = await self._api.request("pin/ls").option("type", opts.type.value).exec()
        if out is None:
            return []
        if not isinstance(out, dict):
            raise TransportError(f"pin/ls: unexpected response {type(out).__name__}")

        keys = out.get("Keys") or {}
        if not isinstance(keys, dict):
            raise TransportError("pin/ls: Keys must be an object")

        pins: list[Pin] = []
        for cid, entry in keys.items():
            path = ResolvedPath.from_cid_string(cid)
            pin_type = entry.get("Type", "") if isinstance(entry, dict) else ""
            pins.append(Pin(path=path, type=pin_type))
        log.debug("pin/ls type=%s returned %d pins", opts.type.value, len(pins))
        return pins

    async def rm(self, path: Any) -> None:
        """Remove the pin on ``path``."""
        await self._api.request("pin/rm", path).exec()
        log.info("Unpinned %s", path)

    async def update(
        self,
        from_path: Any,
        to_path: Any,
        options: PinUpdateOptions | None = None,
        **kwargs: Any,
    ) -> None:
        """Move a recursive pin from ``from_path`` to ``to_path``."""
        opts = resolve_options(PinUpdateOptions, options, kwargs)
        await (
            self._api.request("pin/update", from_path, to_path)
            .option("unpin", opts.unpin)
            .exec()
        )
        log.info("Updated pin %s -> %s (unpin=%s)", from_path, to_path, opts.unpin)

    async def verify(self, cancel: asyncio.Event | None = None) -> PinVerifyStream:
        """Start verifying every recursive pin.

        Raises straight away if the request itself fails. Otherwise returns
        a PinVerifyStream yielding one PinStatus per pin; setting ``cancel``
        (or closing the stream) stops it. The body has no read timeout;
        ``cancel`` is the only way to bound it.
        """
        resp = await (
            self._api.request("pin/verify")
            .option("verbose", True)
            .send(timeout=self._api.stream_timeout())
        )
        return PinVerifyStream(resp, cancel=cancel)
