# chainapi — dynamic namespace client for HTTP APIs
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level chainapi clients with dynamic namespace access.

Usage (async)::

    async with AsyncClient() as client:
        info = await client.page.getInfo()
        await client.subscriber.addTag({"subscriber_id": 1, "tag_id": 2}, method_type="POST")

Usage (sync, safe in Jupyter)::

    client = Client()
    info = client.page.getInfo()
    client.close()
"""

from __future__ import annotations

from typing import Any, Union

from ._transport import AsyncTransport, SyncTransport
from .config import ClientConfig
from .models import RequestKind
from .namespace import NamespaceNode, namespace_chain


class _NamespaceRoot:
    """Attribute access on a client yields root namespace nodes.

    Client attributes (``call``, ``close``, ``config``, ``namespace``) take
    precedence; reach a remote namespace of the same name with
    ``client.namespace("call")``.
    """

    _transport: Any

    def __getattr__(self, name: str) -> NamespaceNode:
        if name.startswith("_"):
            raise AttributeError(name)
        return NamespaceNode(name, self._transport)

    def namespace(self, *segments: str) -> NamespaceNode:
        """Build a node chain explicitly: ``namespace("foo", "bar")``."""
        return namespace_chain(self._transport, segments)


class AsyncClient(_NamespaceRoot):
    """Async client; calls return awaitables.

    Use as an async context manager::

        async with AsyncClient() as client:
            info = await client.page.getInfo()
    """

    def __init__(self, config: ClientConfig | None = None, transport: AsyncTransport | None = None):
        self.config = config or (transport.config if transport else ClientConfig.from_env())
        self._transport = transport or AsyncTransport(self.config)

    async def call(
        self,
        path: str,
        arguments: dict[str, Any] | None = None,
        method_type: Union[RequestKind, str] = RequestKind.GET,
    ) -> dict[str, Any]:
        """Call a resolved method path directly."""
        return await self._transport.call_method(path, arguments or {}, method_type)

    async def __aenter__(self) -> "AsyncClient":
        await self._transport.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._transport.__aexit__(*args)

    async def close(self) -> None:
        await self._transport.close()


class Client(_NamespaceRoot):
    """Synchronous client.

    Uses a background thread event loop, safe for Jupyter notebooks::

        client = Client()
        info = client.page.getInfo()
        client.close()
    """

    def __init__(self, config: ClientConfig | None = None, transport: SyncTransport | None = None):
        self.config = config or (transport.config if transport else ClientConfig.from_env())
        self._transport = transport or SyncTransport(self.config)

    def call(
        self,
        path: str,
        arguments: dict[str, Any] | None = None,
        method_type: Union[RequestKind, str] = RequestKind.GET,
    ) -> dict[str, Any]:
        """Call a resolved method path directly."""
        return self._transport.call_method(path, arguments or {}, method_type)

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
