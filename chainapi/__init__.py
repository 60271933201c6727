# chainapi — dynamic namespace client for HTTP APIs
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later
"""chainapi — call remote HTTP methods through dynamic namespace chains."""

__version__ = "0.1.0"

from .config import ClientConfig
from .client import AsyncClient, Client
from ._transport import AsyncTransport, SyncTransport
from .namespace import MAX_NAMESPACE_DEPTH, Dispatcher, NamespaceNode
from .models import ApiResponse, RequestKind
from .exceptions import (
    ChainApiError,
    InvalidAction,
    NamespaceDepthExceeded,
    CallMethodFailed,
)

__all__ = [
    # Clients
    "AsyncClient",
    "Client",
    # Transports
    "AsyncTransport",
    "SyncTransport",
    # Namespaces
    "Dispatcher",
    "NamespaceNode",
    "MAX_NAMESPACE_DEPTH",
    # Config
    "ClientConfig",
    # Models
    "ApiResponse",
    "RequestKind",
    # Errors
    "ChainApiError",
    "InvalidAction",
    "NamespaceDepthExceeded",
    "CallMethodFailed",
]
