# chainapi — dynamic namespace client for HTTP APIs
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Tests for config loading, request kinds and the response envelope."""

import chainapi
from chainapi.config import ClientConfig
from chainapi.models import ApiResponse, RequestKind


def test_request_kind_compares_to_strings():
    assert RequestKind.GET == "GET"
    assert RequestKind("POST") is RequestKind.POST


def test_request_kind_body():
    assert RequestKind.POST.sends_body
    assert RequestKind.PATCH.sends_body
    assert not RequestKind.GET.sends_body
    assert not RequestKind.DELETE.sends_body


def test_api_response_success():
    r = ApiResponse.model_validate({"status": "success", "data": {"id": 1}})
    assert r.succeeded
    assert r.data == {"id": 1}


def test_api_response_error_message():
    r = ApiResponse.model_validate({"status": "error", "message": "Wrong tag", "details": {"x": 1}})
    assert not r.succeeded
    assert r.error_message("fallback") == "Wrong tag"


def test_api_response_without_envelope_keeps_extras():
    r = ApiResponse.model_validate({"items": []})
    assert r.succeeded
    assert r.error_message("fallback") == "fallback"
    assert r.model_extra == {"items": []}


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("CHAINAPI_BASE_URL", "https://api.example.com/")
    monkeypatch.setenv("CHAINAPI_TOKEN", "secret")
    monkeypatch.setenv("CHAINAPI_REQUEST_TIMEOUT", "12")
    monkeypatch.delenv("CHAINAPI_USER_AGENT", raising=False)
    config = ClientConfig.from_env()
    assert config.api_token == "secret"
    assert config.request_timeout == 12
    assert config.user_agent == f"chainapi/{chainapi.__version__}"
    assert config.endpoint("/page/getInfo") == "https://api.example.com/page/getInfo"


def test_endpoint_adds_leading_slash():
    assert ClientConfig(base_url="http://x").endpoint("a/b") == "http://x/a/b"


def test_top_level_imports():
    for name in ("AsyncClient", "Client", "NamespaceNode", "ClientConfig",
                 "InvalidAction", "NamespaceDepthExceeded", "CallMethodFailed"):
        assert hasattr(chainapi, name)
