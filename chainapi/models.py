# chainapi — dynamic namespace client for HTTP APIs
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Pydantic v2 models for API requests and responses.

Models use ``extra="allow"`` so envelopes with extra fields still validate.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any

from pydantic import BaseModel


class RequestKind(str, Enum):
    """HTTP verb used for a remote method call."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @property
    def sends_body(self) -> bool:
        return self not in (RequestKind.GET, RequestKind.DELETE)


class _Base(BaseModel):
    model_config = {"extra": "allow"}


class ApiResponse(_Base):
    """Common ``{"status": ..., "data": ...}`` response envelope."""

    status: Any = None
    data: Any = None
    message: Any = None
    details: Any = None

    @property
    def succeeded(self) -> bool:
        # Endpoints without an envelope are judged by HTTP status alone
        return self.status is None or self.status == "success"

    def error_message(self, default: str) -> str:
        if self.message is None or self.message == "":
            return default
        if isinstance(self.message, str):
            return self.message
        return json.dumps(self.message, default=str)
