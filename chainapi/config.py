# chainapi — dynamic namespace client for HTTP APIs
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later
"""Client configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _default_user_agent() -> str:
    from . import __version__
    return f"chainapi/{__version__}"


@dataclass
class ClientConfig:
    """Connection settings shared by the transports and clients."""

    base_url: str = "http://localhost:8000"
    api_token: str = ""
    request_timeout: int = 30
    user_agent: str = field(default_factory=_default_user_agent)

    def endpoint(self, path: str) -> str:
        """Join the base URL with a slash-prefixed method path."""
        if not path.startswith("/"):
            path = "/" + path
        return self.base_url.rstrip("/") + path

    @classmethod
    def from_env(cls) -> ClientConfig:
        """Load configuration from environment variables."""
        return cls(
            base_url=os.environ.get("CHAINAPI_BASE_URL", "http://localhost:8000"),
            api_token=os.environ.get("CHAINAPI_TOKEN", ""),
            request_timeout=int(os.environ.get("CHAINAPI_REQUEST_TIMEOUT", "30")),
            user_agent=os.environ.get("CHAINAPI_USER_AGENT", "") or _default_user_agent(),
        )
