"""CID parsing and resolved IPFS paths."""

from __future__ import annotations

from dataclasses import dataclass

from multiformats import CID

from ipfs_pinapi.errors import ParseError


def parse_cid(value: str) -> CID:
    """Decode a CID string (v0 base58 or multibase-prefixed v1).

    Raises ParseError wrapping the decoder's own exception.
    """
    if not isinstance(value, str) or not value:
        raise ParseError(str(value), "empty cid")
    try:
        return CID.decode(value)
    except Exception as exc:
        raise ParseError(value, str(exc) or type(exc).__name__) from exc


@dataclass(frozen=True)
class ResolvedPath:
    """An /ipfs/ path that points directly at a CID."""

    cid: CID

    @classmethod
    def from_cid_string(cls, value: str) -> ResolvedPath:
        return cls(parse_cid(value))

    @property
    def root(self) -> CID:
        return self.cid

    @property
    def remainder(self) -> str:
        return ""

    def __str__(self) -> str:
        return f"/ipfs/{self.cid}"
