"""Tests for RestClient request assembly, hooks and construction."""

from __future__ import annotations

import json
from unittest.mock import MagicMock

import pytest

from restcore.auth import BearerAuthenticator
from restcore.auth.base import Authenticator
from restcore.client import RestClient
from restcore.exceptions import ConfigurationError
from restcore.formats import JSONFormat, PickleFormat
from restcore.models import AuthConfig, ClientConfig, HTTPMethod, Request
from restcore.mutators import ChainMutator, HeaderMutator, LoggingMutator, RequestMutator
from restcore.transport import HTTPXTransport


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_defaults_to_httpx_transport(self) -> None:
        client = RestClient()
        assert isinstance(client._transport, HTTPXTransport)
        assert client.format is None

    def test_rejects_object_without_format_interface(self) -> None:
        with pytest.raises(ConfigurationError, match="format must implement Format"):
            RestClient(format=object())  # type: ignore[arg-type]

    def test_rejects_bad_mutator(self) -> None:
        class NotAMutator:
            def alter_request(self, request: Request) -> None:
                pass

        with pytest.raises(ConfigurationError, match="RequestMutator"):
            RestClient(mutator=NotAMutator())  # type: ignore[arg-type]

    def test_rejects_bad_authenticator(self) -> None:
        with pytest.raises(ConfigurationError, match="Authenticator"):
            RestClient(authenticator="token")  # type: ignore[arg-type]

    def test_rejects_bad_transport(self) -> None:
        with pytest.raises(ConfigurationError, match="Transport"):
            RestClient(transport=MagicMock())  # type: ignore[arg-type]


class TestFromConfig:
    def test_builds_format_and_auth(self, make_transport, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RESTCORE_TEST_TOKEN", "s3cret")
        config = ClientConfig(
            format="json",
            auth=AuthConfig(type="bearer", source="env:RESTCORE_TEST_TOKEN"),
        )
        transport = make_transport()
        client = RestClient.from_config(config, transport=transport)
        assert isinstance(client.format, JSONFormat)
        assert isinstance(client._authenticator, BearerAuthenticator)
        assert client._transport is transport

    def test_no_format(self) -> None:
        client = RestClient.from_config(ClientConfig(format=None))
        assert client.format is None

    def test_single_header_mutator(self) -> None:
        client = RestClient.from_config(ClientConfig(headers=["Accept: application/json"]))
        assert isinstance(client._mutator, HeaderMutator)

    def test_headers_and_logging_chain(self) -> None:
        client = RestClient.from_config(
            ClientConfig(headers=["Accept: application/json"], log_requests=True)
        )
        assert isinstance(client._mutator, ChainMutator)
        assert len(client._mutator) == 2

    def test_logging_only(self) -> None:
        client = RestClient.from_config(ClientConfig(log_requests=True))
        assert isinstance(client._mutator, LoggingMutator)

    def test_unknown_format(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown format"):
            RestClient.from_config(ClientConfig(format="xml"))

    def test_unresolvable_credential(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("RESTCORE_MISSING", raising=False)
        config = ClientConfig(auth=AuthConfig(type="bearer", source="env:RESTCORE_MISSING"))
        with pytest.raises(ConfigurationError, match="RESTCORE_MISSING"):
            RestClient.from_config(config)

    def test_transport_settings_applied(self) -> None:
        config = ClientConfig()
        config.transport.timeout = 5
        client = RestClient.from_config(config)
        assert client._transport._timeout == 5


# ---------------------------------------------------------------------------
# Verb helpers and URL rendering
# ---------------------------------------------------------------------------


class TestVerbs:
    def test_get_renders_query(self, ok_transport) -> None:
        client = RestClient(transport=ok_transport)
        client.get("https://example.com/node", {"q": "a b", "k": ["1", "2"]})
        call = ok_transport.last
        assert call["method"] == "GET"
        assert call["url"] == "https://example.com/node?q=a%20b&k[]=1&k[]=2"
        assert call["body"] is None

    def test_get_without_params_keeps_url(self, ok_transport) -> None:
        RestClient(transport=ok_transport).get("https://example.com/node?x=1")
        assert ok_transport.last["url"] == "https://example.com/node?x=1"

    def test_delete(self, ok_transport) -> None:
        RestClient(transport=ok_transport).delete("https://example.com/node/1")
        assert ok_transport.last["method"] == "DELETE"
        assert ok_transport.last["body"] is None

    @pytest.mark.parametrize("verb", ["post", "put"])
    def test_post_and_put_send_body(self, ok_transport, verb: str) -> None:
        client = RestClient(format=JSONFormat(), transport=ok_transport)
        getattr(client, verb)("https://example.com/node", {"title": "Hi"}, {"_format": "json"})
        call = ok_transport.last
        assert call["method"] == verb.upper()
        assert call["url"] == "https://example.com/node?_format=json"
        assert json.loads(call["body"]) == {"title": "Hi"}

    def test_options_forwarded(self, ok_transport) -> None:
        client = RestClient(transport=ok_transport)
        request = Request(method=HTTPMethod.GET, url="https://example.com/", options={"timeout": 3})
        client.execute(request)
        assert ok_transport.last["options"] == {"timeout": 3}


# ---------------------------------------------------------------------------
# Body preparation
# ---------------------------------------------------------------------------


class TestBodyPreparation:
    def test_format_sets_content_type_and_length(self, ok_transport) -> None:
        client = RestClient(format=JSONFormat(), transport=ok_transport)
        client.post("https://example.com/node", {"title": "café"})
        call = ok_transport.last
        assert "Content-Type: application/json" in call["headers"]
        assert f"Content-Length: {len(call['body'])}" in call["headers"]
        assert call["body"] == '{"title": "café"}'.encode("utf-8")

    def test_no_format_sends_text(self, ok_transport) -> None:
        client = RestClient(transport=ok_transport)
        client.post("https://example.com/node", 12345)
        call = ok_transport.last
        assert call["body"] == b"12345"
        assert "Content-Length: 5" in call["headers"]
        assert not any(h.lower().startswith("content-type") for h in call["headers"])

    def test_no_format_passes_bytes_through(self, ok_transport) -> None:
        client = RestClient(transport=ok_transport)
        client.put("https://example.com/blob", b"\x00\x01")
        assert ok_transport.last["body"] == b"\x00\x01"
        assert "Content-Length: 2" in ok_transport.last["headers"]

    def test_pickle_format_mime_type(self, make_transport, raw_response) -> None:
        transport = make_transport(raw=raw_response(body=PickleFormat().serialize({"ok": True})))
        client = RestClient(format=PickleFormat(), transport=transport)
        assert client.post("https://example.com/", [1, 2]) == {"ok": True}
        assert "Content-Type: application/vnd.python.pickle" in transport.last["headers"]

    def test_expect_header_always_cleared(self, ok_transport) -> None:
        client = RestClient(transport=ok_transport)
        client.get("https://example.com/")
        assert "Expect:" in ok_transport.last["headers"]
        client.post("https://example.com/", "x")
        assert ok_transport.last["headers"].count("Expect:") == 1

    def test_no_content_headers_without_body(self, ok_transport) -> None:
        RestClient(format=JSONFormat(), transport=ok_transport).get("https://example.com/")
        headers = ok_transport.last["headers"]
        assert not any(h.startswith(("Content-Type", "Content-Length")) for h in headers)


# ---------------------------------------------------------------------------
# Mutator and authenticator hooks
# ---------------------------------------------------------------------------


class _RecordingMutator(RequestMutator):
    def __init__(self, calls: list[str]) -> None:
        self.calls = calls

    def alter_request(self, request: Request) -> None:
        self.calls.append("mutator")
        request.params["mutated"] = "1"
        request.set_header("Authorization", "from-mutator")


class _RecordingAuthenticator(Authenticator):
    def __init__(self, calls: list[str]) -> None:
        self.calls = calls

    @property
    def auth_type(self) -> str:
        return "recording"

    def authenticate(self, request: Request) -> None:
        self.calls.append("authenticator")
        request.set_header("Authorization", "from-auth")


class TestHooks:
    def test_mutator_runs_before_authenticator_once_each(self, ok_transport) -> None:
        calls: list[str] = []
        client = RestClient(
            mutator=_RecordingMutator(calls),
            authenticator=_RecordingAuthenticator(calls),
            transport=ok_transport,
        )
        client.get("https://example.com/")
        assert calls == ["mutator", "authenticator"]
        assert "Authorization: from-auth" in ok_transport.last["headers"]
        assert "Authorization: from-mutator" not in ok_transport.last["headers"]

    def test_params_added_by_hooks_are_rendered(self, ok_transport) -> None:
        calls: list[str] = []
        client = RestClient(mutator=_RecordingMutator(calls), transport=ok_transport)
        client.get("https://example.com/", {"a": "1"})
        assert ok_transport.last["url"] == "https://example.com/?a=1&mutated=1"

    def test_request_edited_in_place(self, ok_transport) -> None:
        calls: list[str] = []
        client = RestClient(authenticator=_RecordingAuthenticator(calls), transport=ok_transport)
        request = Request(method="GET", url="https://example.com/")
        client.execute(request)
        assert request.get_header("Authorization") == "from-auth"

    def test_hooks_skipped_when_not_configured(self, ok_transport) -> None:
        RestClient(transport=ok_transport).get("https://example.com/")
        assert ok_transport.last["headers"] == ["Expect:"]

    def test_each_call_runs_hooks_again(self, ok_transport) -> None:
        calls: list[str] = []
        client = RestClient(authenticator=_RecordingAuthenticator(calls), transport=ok_transport)
        client.get("https://example.com/1")
        client.get("https://example.com/2")
        assert calls == ["authenticator", "authenticator"]

    def test_body_added_to_get_by_hook_rejected(self, ok_transport) -> None:
        class BodyMutator(RequestMutator):
            def alter_request(self, request: Request) -> None:
                request.body = {"sneaky": True}

        client = RestClient(mutator=BodyMutator(), transport=ok_transport)
        with pytest.raises(ConfigurationError, match="GET requests cannot carry a body"):
            client.get("https://example.com/")
        assert ok_transport.calls == []
