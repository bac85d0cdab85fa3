"""Streaming decode of pin/verify results."""

from __future__ import annotations

import asyncio
import json
import logging
from contextlib import aclosing
from typing import Any, AsyncIterator

import httpx

from ipfs_pinapi.errors import PinAPIError, StreamDecodeError, TransportError
from ipfs_pinapi.models.pin import PinStatus

log = logging.getLogger(__name__)


class PinVerifyStream:
    """Async iterator over the PinStatus records of one pin/verify call.

    A single background task owns the HTTP response. It decodes one JSON
    record at a time and hands each to the consumer through a one-slot
    handoff, waiting until the consumer has taken it before reading on.
    Values are read one after another regardless of how the body splits them
    across lines; Kubo itself sends one value per line.

    The stream closes when the body is exhausted, when a record fails to
    decode, or when it is cancelled (the caller's ``cancel`` event is set
    or ``aclose()`` is called). Cancellation is honoured while reading and
    while waiting on the consumer; a record not yet taken is dropped. On
    every exit path the response is closed exactly once.

    Failures never raise into the consumer. Iteration just ends, and the
    reason, if any, is left in ``error``: StreamDecodeError for a malformed
    record, TransportError for a broken connection. A clean end of stream
    or a cancellation leaves ``error`` as None.

    The stream is single-use; a new verify call is needed to re-verify.
    """

    def __init__(self, response: httpx.Response, cancel: asyncio.Event | None = None) -> None:
        self._response = response
        self._cancel = cancel
        self._stop = asyncio.Event()
        self._slot: asyncio.Queue[PinStatus] = asyncio.Queue(maxsize=1)
        self._closed = asyncio.Event()
        self.error: PinAPIError | None = None
        self._task = asyncio.create_task(self._run(), name="pin-verify")

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    # ── Producer ───────────────────────────────────────────

    async def _run(self) -> None:
        watcher = asyncio.create_task(self._cancel_on_signal(asyncio.current_task()))
        try:
            try:
                await self._pump()
            finally:
                watcher.cancel()
        finally:
            await self._response.aclose()
            self._drop_undelivered()
            self._closed.set()
            log.debug("pin/verify stream closed (error=%s)", self.error)

    async def _values(self) -> AsyncIterator[Any]:
        """Decode consecutive JSON values from the body, however they are split.

        A value that fails to parse is treated as incomplete only while no line
        break follows the failure point; otherwise it is malformed.
        """
        decoder = json.JSONDecoder()
        buf = ""
        async for chunk in self._response.aiter_text():
            buf += chunk
            while True:
                start = len(buf) - len(buf.lstrip())
                if start == len(buf):
                    buf = ""
                    break
                try:
                    value, end = decoder.raw_decode(buf, start)
                except json.JSONDecodeError as exc:
                    if "\n" in buf[exc.pos:]:
                        raise
                    buf = buf[start:]
                    break
                buf = buf[end:]
                yield value

        if rest := buf.strip():
            yield decoder.decode(rest)

    async def _pump(self) -> None:
        try:
            async with aclosing(self._values()) as values:
                async for value in values:
                    status = PinStatus.from_json(value)
                    await self._slot.put(status)
                    await self._slot.join()
        except (ValueError, RecursionError) as exc:
            self.error = StreamDecodeError(f"pin/verify: undecodable record: {exc}")
            log.warning("Stopping pin/verify stream: %s", self.error)
        except httpx.HTTPError as exc:
            self.error = TransportError(f"pin/verify: {type(exc).__name__}: {exc}".rstrip(": "))
            log.warning("Stopping pin/verify stream: %s", self.error)

    async def _cancel_on_signal(self, producer: asyncio.Task) -> None:
        waiters = [asyncio.ensure_future(self._stop.wait())]
        if self._cancel is not None:
            waiters.append(asyncio.ensure_future(self._cancel.wait()))
        try:
            await asyncio.wait(waiters, return_when=asyncio.FIRST_COMPLETED)
        finally:
            for w in waiters:
                w.cancel()
        log.debug("pin/verify stream cancelled")
        producer.cancel()

    def _drop_undelivered(self) -> None:
        while not self._slot.empty():
            self._slot.get_nowait()
            self._slot.task_done()

    # ── Consumer ───────────────────────────────────────────

    def __aiter__(self) -> PinVerifyStream:
        return self

    def _cancel_requested(self) -> bool:
        return self._stop.is_set() or (self._cancel is not None and self._cancel.is_set())

    async def __anext__(self) -> PinStatus:
        if self._cancel_requested():
            await self.wait_closed()
            raise StopAsyncIteration
        if self._closed.is_set() and self._slot.empty():
            raise StopAsyncIteration

        getter = asyncio.ensure_future(self._slot.get())
        closer = asyncio.ensure_future(self._closed.wait())
        try:
            await asyncio.wait({getter, closer}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            closer.cancel()
            if not getter.done():
                getter.cancel()

        if getter.done() and not getter.cancelled():
            self._slot.task_done()
            return getter.result()
        raise StopAsyncIteration

    async def aclose(self) -> None:
        """Cancel the stream and wait until the response is released."""
        self._stop.set()
        await asyncio.wait({self._task})

    async def wait_closed(self) -> None:
        await self._closed.wait()

    async def __aenter__(self) -> PinVerifyStream:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
