"""Configuration model for the client."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ClientConfig:
    """Complete client configuration."""

    # API
    api_url: str = "http://127.0.0.1:5001"
    timeout: float = 60.0  # seconds, per HTTP request
    auth: str = ""  # Authorization header value, e.g. "Bearer xyz"

    # Client
    log_level: str = "info"
