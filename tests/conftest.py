# chainapi — dynamic namespace client for HTTP APIs
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared test fixtures for chainapi tests."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from chainapi.config import ClientConfig
from chainapi.namespace import NamespaceNode


@pytest.fixture
def config() -> ClientConfig:
    """Test config with dummy values."""
    return ClientConfig(
        base_url="http://api.test",
        api_token="test-token",
        request_timeout=5,
        user_agent="chainapi-tests",
    )


@pytest.fixture
def dispatcher() -> MagicMock:
    """Synchronous dispatcher with call_method mocked."""
    d = MagicMock()
    d.call_method.return_value = {"status": "success", "data": {}}
    return d


@pytest.fixture
def async_dispatcher() -> MagicMock:
    """Dispatcher whose call_method is a coroutine function."""
    d = MagicMock()
    d.call_method = AsyncMock(return_value={"status": "success", "data": {}})
    d.close = AsyncMock()
    return d


@pytest.fixture
def root(dispatcher) -> NamespaceNode:
    return NamespaceNode("foo", dispatcher)
