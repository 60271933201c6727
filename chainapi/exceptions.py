# chainapi — dynamic namespace client for HTTP APIs
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later
"""Exception hierarchy for chainapi.

All exceptions inherit from :class:`ChainApiError`::

    ChainApiError
    +-- InvalidAction            node mutation, unknown request kind
    +-- NamespaceDepthExceeded   method path deeper than the allowed maximum
    +-- CallMethodFailed         remote call did not succeed

Nothing in the library catches these; the CLI is the only place that turns
them into an exit code.
"""

from __future__ import annotations

from typing import Any, Optional


class ChainApiError(Exception):
    """Base exception for all chainapi errors."""


class InvalidAction(ChainApiError):
    """Raised on misuse: setting attributes on a namespace node, or an
    unsupported ``method_type``."""


class NamespaceDepthExceeded(ChainApiError):
    """Raised when a method path has more segments than allowed."""

    def __init__(self, message: str, depth: int, limit: int):
        super().__init__(message)
        self.depth = depth
        self.limit = limit


class CallMethodFailed(ChainApiError):
    """Raised by a dispatcher when the remote method did not succeed.

    Args:
        message: Human-readable description.
        path: The resolved method path that was called.
        status_code: HTTP status, or ``None`` when no response was received.
        response: Decoded response body, when there was one.
    """

    def __init__(
        self,
        message: str,
        path: str,
        status_code: Optional[int] = None,
        response: Any = None,
    ):
        super().__init__(message)
        self.path = path
        self.status_code = status_code
        self.response = response
