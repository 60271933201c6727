# chainapi — dynamic namespace client for HTTP APIs
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Tests for AsyncClient and Client."""

from unittest.mock import MagicMock

import pytest

from chainapi._transport import AsyncTransport, SyncTransport
from chainapi.client import AsyncClient, Client
from chainapi.exceptions import InvalidAction, NamespaceDepthExceeded
from chainapi.models import RequestKind
from chainapi.namespace import NamespaceNode


class TestAsyncClient:
    def test_construction(self, config):
        client = AsyncClient(config)
        assert client.config is config
        assert isinstance(client._transport, AsyncTransport)

    def test_default_config(self, monkeypatch):
        monkeypatch.delenv("CHAINAPI_BASE_URL", raising=False)
        client = AsyncClient()
        assert client.config.base_url == "http://localhost:8000"

    def test_attribute_yields_root_node(self, config, async_dispatcher):
        client = AsyncClient(config, transport=async_dispatcher)
        node = client.page
        assert isinstance(node, NamespaceNode)
        assert node._parent is None
        assert node._dispatcher is async_dispatcher

    def test_private_names_are_not_namespaces(self, config):
        client = AsyncClient(config)
        with pytest.raises(AttributeError):
            client._missing

    @pytest.mark.asyncio
    async def test_chain_call(self, config, async_dispatcher):
        client = AsyncClient(config, transport=async_dispatcher)
        result = await client.foo.bar.baz({"id": 5})
        assert result == {"status": "success", "data": {}}
        async_dispatcher.call_method.assert_awaited_once_with(
            "/foo/bar/baz", {"id": 5}, RequestKind.GET
        )

    @pytest.mark.asyncio
    async def test_depth_error_raised_before_await(self, config, async_dispatcher):
        client = AsyncClient(config, transport=async_dispatcher)
        node = client.namespace(*[f"s{i}" for i in range(10)])
        with pytest.raises(NamespaceDepthExceeded):
            node.method()
        async_dispatcher.call_method.assert_not_called()

    @pytest.mark.asyncio
    async def test_direct_call(self, config, async_dispatcher):
        client = AsyncClient(config, transport=async_dispatcher)
        await client.call("/page/getInfo", method_type="POST")
        async_dispatcher.call_method.assert_awaited_once_with("/page/getInfo", {}, "POST")

    @pytest.mark.asyncio
    async def test_close(self, config, async_dispatcher):
        client = AsyncClient(config, transport=async_dispatcher)
        await client.close()
        async_dispatcher.close.assert_awaited_once()


class TestClientSync:
    def test_construction(self, config):
        client = Client(config)
        try:
            assert client.config is config
            assert isinstance(client._transport, SyncTransport)
        finally:
            client.close()

    def test_context_manager(self, config):
        transport = MagicMock()
        with Client(config, transport=transport) as client:
            assert isinstance(client.page, NamespaceNode)
        transport.close.assert_called_once()

    def test_chain_call_with_method_type(self, config, dispatcher):
        client = Client(config, transport=dispatcher)
        client.subscriber.addTag({"subscriber_id": 1}, method_type="POST")
        dispatcher.call_method.assert_called_once_with(
            "/subscriber/addTag", {"subscriber_id": 1}, "POST"
        )

    def test_namespace_builds_chain(self, config, dispatcher):
        client = Client(config, transport=dispatcher)
        node = client.namespace("fb", "page")
        assert node.resolve_path("getInfo") == "/fb/page/getInfo"

    def test_namespace_requires_segment(self, config, dispatcher):
        client = Client(config, transport=dispatcher)
        with pytest.raises(InvalidAction):
            client.namespace()

    def test_config_taken_from_transport(self, config):
        transport = SyncTransport(config)
        try:
            assert Client(transport=transport).config is config
        finally:
            transport.close()

    def test_namespace_reaches_names_taken_by_client(self, config, dispatcher):
        client = Client(config, transport=dispatcher)
        assert callable(client.call)
        client.namespace("call").list()
        client.namespace("config").get({"key": "x"})
        assert dispatcher.call_method.call_args_list[0].args == ("/call/list", {}, RequestKind.GET)
        assert dispatcher.call_method.call_args_list[1].args == ("/config/get", {"key": "x"}, RequestKind.GET)
