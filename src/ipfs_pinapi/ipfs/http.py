"""Kubo HTTP RPC transport - builds and sends /api/v0/ requests."""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any

import httpx

from ipfs_pinapi.errors import RemoteError, TransportError
from ipfs_pinapi.models.config import ClientConfig

log = logging.getLogger(__name__)


def _encode(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _describe(endpoint: str, exc: Exception) -> str:
    # httpx timeouts stringify to ""
    return f"{endpoint}: {type(exc).__name__}: {exc}".rstrip(": ")


def _remote_error(resp: httpx.Response) -> RemoteError:
    """Turn a non-2xx Kubo response into a RemoteError.

    Kubo reports failures as {"Message": ..., "Code": ..., "Type": "error"}.
    """
    text = resp.text
    try:
        data = json.loads(text)
    except ValueError:
        data = None
    if isinstance(data, dict) and isinstance(data.get("Message"), str):
        return RemoteError(data["Message"], code=data.get("Code"), status_code=resp.status_code)
    message = text.strip() or f"daemon returned HTTP {resp.status_code}"
    return RemoteError(message, status_code=resp.status_code)


class RequestBuilder:
    """A single pending RPC call.

    Arguments are sent as repeated ``arg`` query parameters in the order they
    were given; options are sent as named query parameters.
    """

    def __init__(self, api: KuboHttpApi, endpoint: str, args: tuple[str, ...]) -> None:
        self._api = api
        self._endpoint = endpoint
        self._params: list[tuple[str, str]] = [("arg", str(a)) for a in args]

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def params(self) -> list[tuple[str, str]]:
        return list(self._params)

    def arguments(self, *args: Any) -> RequestBuilder:
        self._params.extend(("arg", str(a)) for a in args)
        return self

    def option(self, name: str, value: Any) -> RequestBuilder:
        self._params.append((name, _encode(value)))
        return self

    def _build(self, timeout: httpx.Timeout | None = None) -> httpx.Request:
        kwargs = {} if timeout is None else {"timeout": timeout}
        return self._api.client.build_request(
            "POST", self._api.url(self._endpoint), params=self._params, **kwargs,
        )

    async def send(self, timeout: httpx.Timeout | None = None) -> httpx.Response:
        """Send the request and return the open streaming response.

        The caller owns the returned response and must ``aclose()`` it.
        A daemon-side failure is raised as RemoteError with the response
        already closed. ``timeout`` overrides the client timeout for this
        request only.
        """
        log.debug("POST %s %s", self._endpoint, self._params)
        try:
            request = self._build(timeout)
            resp = await self._api.client.send(request, stream=True)
        except httpx.HTTPError as exc:
            raise TransportError(_describe(self._endpoint, exc)) from exc

        if resp.is_success:
            return resp
        try:
            await resp.aread()
        except httpx.HTTPError as exc:
            raise TransportError(_describe(self._endpoint, exc)) from exc
        finally:
            await resp.aclose()
        raise _remote_error(resp)

    async def exec(self) -> Any:
        """Send the request and decode the whole body as one JSON value.

        Returns None for an empty body.
        """
        log.debug("POST %s %s", self._endpoint, self._params)
        try:
            resp = await self._api.client.post(self._api.url(self._endpoint), params=self._params)
        except httpx.HTTPError as exc:
            raise TransportError(_describe(self._endpoint, exc)) from exc

        if not resp.is_success:
            raise _remote_error(resp)
        if not resp.content.strip():
            return None
        try:
            return resp.json()
        except ValueError as exc:
            raise TransportError(f"{self._endpoint}: invalid JSON response: {exc}") from exc


class KuboHttpApi:
    """Shared request builder for a Kubo node's RPC API at /api/v0/.

    Pass ``client`` to reuse an existing httpx.AsyncClient; otherwise one is
    created from the configuration and closed by ``aclose()``.
    """

    def __init__(
        self,
        api_url: str = "http://127.0.0.1:5001",
        timeout: float = 60.0,
        auth: str = "",
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = api_url.rstrip("/")
        self._owns_client = client is None
        if client is None:
            headers = {"Authorization": auth} if auth else None
            client = httpx.AsyncClient(timeout=timeout, headers=headers)
        self.client = client

    @classmethod
    def from_config(cls, cfg: ClientConfig, client: httpx.AsyncClient | None = None) -> KuboHttpApi:
        return cls(api_url=cfg.api_url, timeout=cfg.timeout, auth=cfg.auth, client=client)

    def stream_timeout(self) -> httpx.Timeout:
        """Client timeout with no read limit, for long-lived streamed responses."""
        t = self.client.timeout
        return httpx.Timeout(connect=t.connect, read=None, write=t.write, pool=t.pool)

    def url(self, endpoint: str) -> str:
        return f"{self._base_url}/api/v0/{endpoint}"

    def request(self, endpoint: str, *args: Any) -> RequestBuilder:
        return RequestBuilder(self, endpoint, tuple(str(a) for a in args))

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> KuboHttpApi:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
