"""Pin records decoded from daemon responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ipfs_pinapi.errors import ParseError, RemoteError
from ipfs_pinapi.ipfs.path import ResolvedPath, parse_cid


@dataclass(frozen=True)
class Pin:
    """A pin as reported by pin/ls."""

    path: ResolvedPath
    type: str  # "recursive" | "direct" | "indirect"


@dataclass(frozen=True)
class BadPinNode:
    """A node that failed verification under a pinned root."""

    cid: str
    message: str = ""  # daemon-reported error, "" when absent

    @classmethod
    def from_json(cls, data: Any) -> BadPinNode:
        if not isinstance(data, dict):
            raise ValueError(f"bad node must be an object, got {type(data).__name__}")
        cid = data.get("Cid") or ""
        message = data.get("Err") or ""
        if not isinstance(cid, str) or not isinstance(message, str):
            raise ValueError("bad node Cid and Err must be strings")
        return cls(cid=cid, message=message)

    @property
    def path(self) -> ResolvedPath | None:
        """Resolved path of the node, or None if its CID does not parse."""
        try:
            return ResolvedPath.from_cid_string(self.cid)
        except ParseError:
            return None

    @property
    def err(self) -> Exception | None:
        """The node's error.

        The daemon's message wins. Without one, a CID that fails to parse is
        the error. A node with neither has no error even though the daemon
        listed it as bad.
        """
        if self.message:
            return RemoteError(self.message)
        try:
            parse_cid(self.cid)
        except ParseError as exc:
            return exc
        return None


@dataclass(frozen=True)
class PinStatus:
    """One record of a pin/verify stream."""

    cid: str
    ok: bool
    bad_nodes: tuple[BadPinNode, ...] = field(default_factory=tuple)

    @classmethod
    def from_json(cls, data: Any) -> PinStatus:
        """Build from a decoded JSON value. Raises ValueError on bad shape."""
        if not isinstance(data, dict):
            raise ValueError(f"verify record must be an object, got {type(data).__name__}")
        cid = data.get("Cid") or ""
        ok = data.get("Ok") or False
        if not isinstance(cid, str):
            raise ValueError(f"verify record Cid must be a string, got {cid!r}")
        if not isinstance(ok, bool):
            raise ValueError(f"verify record Ok must be a bool, got {ok!r}")
        raw_nodes = data.get("BadNodes") or []
        if not isinstance(raw_nodes, list):
            raise ValueError("verify record BadNodes must be a list")
        return cls(
            cid=cid,
            ok=ok,
            bad_nodes=tuple(BadPinNode.from_json(n) for n in raw_nodes),
        )
