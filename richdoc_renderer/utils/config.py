"""Runtime settings for conversion and delivery."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_ASSET_BASE_URL = "https://content.creditloan.com/wp-content/uploads/"
DEFAULT_LINE_SEPARATOR = "\r"
DEFAULT_SMTP_HOST = "localhost"
DEFAULT_SMTP_PORT = 25


@dataclass(frozen=True, slots=True)
class RendererSettings:
    """Settings shared by the renderer and the delivery layer."""

    asset_base_url: str = DEFAULT_ASSET_BASE_URL
    line_separator: str = DEFAULT_LINE_SEPARATOR
    smtp_host: str = DEFAULT_SMTP_HOST
    smtp_port: int = DEFAULT_SMTP_PORT
    sender: Optional[str] = None
    recipient: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RendererSettings":
        """Build settings from ``RICHDOC_*`` environment variables."""
        env = os.environ if environ is None else environ
        port_raw = env.get("RICHDOC_SMTP_PORT")
        try:
            port = int(port_raw) if port_raw else DEFAULT_SMTP_PORT
        except ValueError as exc:
            raise ValueError(f"RICHDOC_SMTP_PORT must be an integer, got {port_raw!r}") from exc
        return cls(
            asset_base_url=env.get("RICHDOC_ASSET_BASE_URL", DEFAULT_ASSET_BASE_URL),
            line_separator=env.get("RICHDOC_LINE_SEPARATOR", DEFAULT_LINE_SEPARATOR),
            smtp_host=env.get("RICHDOC_SMTP_HOST", DEFAULT_SMTP_HOST),
            smtp_port=port,
            sender=env.get("RICHDOC_SENDER") or None,
            recipient=env.get("RICHDOC_RECIPIENT") or None,
        )
