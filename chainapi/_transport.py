# chainapi — dynamic namespace client for HTTP APIs
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Low-level async & sync transports that perform resolved method calls."""

from __future__ import annotations

import asyncio
import concurrent.futures
import json
import logging
import threading
import uuid
from collections.abc import Mapping
from typing import Any, Union

import aiohttp

from .config import ClientConfig
from .exceptions import CallMethodFailed, InvalidAction
from .models import ApiResponse, RequestKind

logger = logging.getLogger(__name__)


def request_kind_of(value: Union[RequestKind, str]) -> RequestKind:
    """Coerce a ``method_type`` value to a :class:`RequestKind`."""
    if isinstance(value, RequestKind):
        return value
    try:
        return RequestKind(str(value).upper())
    except ValueError:
        raise InvalidAction(f"Unsupported method_type: {value!r}") from None


def query_params(arguments: Mapping[str, Any]) -> dict[str, str]:
    """Flatten call arguments into query-string values."""
    params: dict[str, str] = {}
    for key, value in arguments.items():
        if value is None:
            continue
        if isinstance(value, bool):
            params[str(key)] = "true" if value else "false"
        elif isinstance(value, (dict, list, tuple)):
            params[str(key)] = json.dumps(value)
        else:
            params[str(key)] = str(value)
    return params


class AsyncTransport:
    """Async HTTP dispatcher for resolved method paths.

    Usage::

        async with AsyncTransport(config) as t:
            result = await t.call_method("/page/getInfo", {}, "GET")
    """

    def __init__(self, config: ClientConfig | None = None):
        self.config = config or ClientConfig.from_env()
        self._session: aiohttp.ClientSession | None = None

    async def __aenter__(self) -> "AsyncTransport":
        await self._ensure_session()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.config.request_timeout)
            )
        return self._session

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "User-Agent": self.config.user_agent,
            "X-Trace-Id": str(uuid.uuid4()),
        }
        if self.config.api_token:
            headers["Authorization"] = f"Bearer {self.config.api_token}"
        return headers

    async def call_method(
        self,
        path: str,
        arguments: Mapping[str, Any] | None = None,
        request_kind: Union[RequestKind, str] = RequestKind.GET,
    ) -> dict[str, Any]:
        """Perform one request for ``path`` and return the decoded body.

        Raises:
            InvalidAction: for an unknown request kind (no request is made).
            CallMethodFailed: on network errors, non-JSON bodies, HTTP
                status >= 400 or an envelope whose status is not "success".
        """
        kind = request_kind_of(request_kind)
        arguments = arguments or {}
        url = self.config.endpoint(path)

        request: dict[str, Any] = {"headers": self._headers()}
        if kind.sends_body:
            request["json"] = arguments
        elif isinstance(arguments, Mapping):
            request["params"] = query_params(arguments)
        else:
            raise InvalidAction(f"{kind.value} arguments must be a mapping, got {type(arguments).__name__}")

        logger.debug("%s %s", kind.value, url)
        session = await self._ensure_session()
        try:
            async with session.request(kind.value, url, **request) as resp:
                status = resp.status
                text = await resp.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning("%s %s failed: %s", kind.value, path, e)
            raise CallMethodFailed(f"Request to {path} failed: {e}", path) from e

        return self._decode(path, status, text)

    def _decode(self, path: str, status: int, text: str) -> dict[str, Any]:
        try:
            data = json.loads(text) if text else {}
        except json.JSONDecodeError:
            raise CallMethodFailed(
                f"Method {path} returned a non-JSON response (HTTP {status})",
                path, status_code=status, response=text,
            ) from None

        # Every envelope field is optional and untyped, so any dict validates
        envelope = ApiResponse.model_validate(data) if isinstance(data, dict) else None

        if status >= 400 or (envelope is not None and not envelope.succeeded):
            default = f"Method {path} didn't succeed (HTTP {status})"
            message = envelope.error_message(default) if envelope else default
            logger.warning("%s", message)
            raise CallMethodFailed(message, path, status_code=status, response=data)

        return data

    async def close(self) -> None:
        if self._session:
            await self._session.close()
            self._session = None


class SyncTransport:
    """Synchronous wrapper around AsyncTransport using a background event loop.

    Safe to use in Jupyter notebooks and other environments where an event loop
    may already be running.

    Usage::

        t = SyncTransport()
        result = t.call_method("/page/getInfo", {}, "GET")
        t.close()
    """

    def __init__(self, config: ClientConfig | None = None):
        self.config = config or ClientConfig.from_env()
        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(target=self._loop.run_forever, daemon=True)
        self._thread.start()
        self._async_transport = AsyncTransport(self.config)

    def call_method(
        self,
        path: str,
        arguments: Mapping[str, Any] | None = None,
        request_kind: Union[RequestKind, str] = RequestKind.GET,
    ) -> dict[str, Any]:
        # Validate here so a bad kind never reaches the loop thread
        kind = request_kind_of(request_kind)
        future = asyncio.run_coroutine_threadsafe(
            self._async_transport.call_method(path, arguments, kind), self._loop
        )
        timeout = self.config.request_timeout + 5
        try:
            return future.result(timeout=timeout)
        except concurrent.futures.TimeoutError as e:
            future.cancel()
            logger.warning("%s %s timed out after %ss", kind.value, path, timeout)
            raise CallMethodFailed(f"Request to {path} timed out after {timeout}s", path) from e

    def close(self) -> None:
        if not self._loop.is_running():
            return
        asyncio.run_coroutine_threadsafe(
            self._async_transport.close(), self._loop
        ).result(timeout=5)
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(timeout=5)
        self._loop.close()

    def __enter__(self) -> "SyncTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
