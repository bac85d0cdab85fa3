"""Configuration loading: TOML file + environment variables."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

from ipfs_pinapi.errors import ConfigError
from ipfs_pinapi.models.config import ClientConfig


def _timeout(value: object) -> float:
    try:
        timeout = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ConfigError(f"timeout must be a number, got {value!r}") from None
    if timeout <= 0:
        raise ConfigError(f"timeout must be positive, got {timeout}")
    return timeout


LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def _log_level(value: object) -> str:
    level = str(value).lower()
    if level not in LOG_LEVELS:
        raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
    return level


def load_config(
    config_path: str | Path | None = None,
    env_prefix: str = "IPFS_PINAPI_",
) -> ClientConfig:
    """Load client configuration from a TOML file and env vars.

    Priority (highest wins):
        1. Environment variables (IPFS_PINAPI_API_URL, etc.)
        2. TOML config file
        3. Defaults from ClientConfig
    """
    raw: dict = {}
    if config_path is not None:
        p = Path(config_path).expanduser()
        if p.exists():
            try:
                with open(p, "rb") as f:
                    raw = tomllib.load(f)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigError(f"{p}: {exc}") from exc

    cfg = ClientConfig()

    # ── API section ────────────────────────────────────────
    api = raw.get("api", {})
    if v := api.get("url"):
        cfg.api_url = str(v)
    if (v := api.get("timeout")) is not None:
        cfg.timeout = _timeout(v)
    if v := api.get("auth"):
        cfg.auth = str(v)

    # ── Client section ─────────────────────────────────────
    client = raw.get("client", {})
    if v := client.get("log_level"):
        cfg.log_level = _log_level(v)

    # ── Environment variable overrides (highest priority) ──
    if url := os.environ.get(f"{env_prefix}API_URL"):
        cfg.api_url = url
    if timeout := os.environ.get(f"{env_prefix}TIMEOUT"):
        cfg.timeout = _timeout(timeout)
    if auth := os.environ.get(f"{env_prefix}AUTH"):
        cfg.auth = auth

    return cfg
