"""Per-call options for the pin operations.

Each options object is validated once on construction and stays fixed for
the duration of the call that uses it.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, TypeVar

from ipfs_pinapi.errors import ConfigError


class PinType(str, Enum):
    """Pin type filter accepted by pin/ls."""

    DIRECT = "direct"
    INDIRECT = "indirect"
    RECURSIVE = "recursive"
    ALL = "all"


def _require_bool(name: str, value: Any) -> None:
    if not isinstance(value, bool):
        raise ConfigError(f"option {name!r} must be a bool, got {value!r}")


@dataclass(frozen=True)
class PinAddOptions:
    recursive: bool = True  # pin the whole DAG, not just the root node

    def __post_init__(self) -> None:
        _require_bool("recursive", self.recursive)


@dataclass(frozen=True)
class PinLsOptions:
    type: PinType = PinType.ALL

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "type", PinType(self.type))
        except ValueError:
            allowed = ", ".join(t.value for t in PinType)
            raise ConfigError(
                f"invalid pin type {self.type!r} (expected one of: {allowed})"
            ) from None


@dataclass(frozen=True)
class PinUpdateOptions:
    unpin: bool = True  # drop the old pin once the new one is in place

    def __post_init__(self) -> None:
        _require_bool("unpin", self.unpin)


_O = TypeVar("_O", PinAddOptions, PinLsOptions, PinUpdateOptions)


def resolve_options(cls: type[_O], options: _O | None, overrides: dict[str, Any]) -> _O:
    """Merge an options object and keyword overrides into concrete options.

    Passing both at once is ambiguous and rejected.
    """
    if options is not None and overrides:
        raise ConfigError(
            f"pass either a {cls.__name__} or keyword options, not both"
        )
    if options is not None:
        if not isinstance(options, cls):
            raise ConfigError(f"expected {cls.__name__}, got {type(options).__name__}")
        return options

    known = {f.name for f in fields(cls)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ConfigError(f"unknown option(s) for {cls.__name__}: {', '.join(unknown)}")
    return cls(**overrides)
