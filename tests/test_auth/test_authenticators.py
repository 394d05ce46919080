"""Tests for the built-in authenticators and the auth manager."""

from __future__ import annotations

import base64
from pathlib import Path

import pytest

from restcore.auth import (
    APIKeyAuthenticator,
    AuthManager,
    BasicAuthenticator,
    BearerAuthenticator,
    create_authenticator,
    create_default_manager,
)
from restcore.exceptions import ConfigurationError
from restcore.models import AuthConfig, Request


def _request() -> Request:
    return Request(method="GET", url="https://api.example.com/")


# ---------------------------------------------------------------------------
# Basic
# ---------------------------------------------------------------------------


class TestBasicAuthenticator:
    def test_sets_authorization_header(self) -> None:
        request = _request()
        BasicAuthenticator("alice", "pa:ss").authenticate(request)
        expected = base64.b64encode(b"alice:pa:ss").decode("ascii")
        assert request.get_header("Authorization") == f"Basic {expected}"

    def test_from_credential_splits_on_first_colon(self) -> None:
        request = _request()
        BasicAuthenticator.from_credential("bob:x:y").authenticate(request)
        expected = base64.b64encode(b"bob:x:y").decode("ascii")
        assert request.get_header("Authorization") == f"Basic {expected}"

    def test_from_credential_requires_colon(self) -> None:
        with pytest.raises(ConfigurationError, match="username:password"):
            BasicAuthenticator.from_credential("nocolon")

    def test_username_with_colon_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            BasicAuthenticator("a:b", "pw")

    def test_replaces_existing_authorization(self) -> None:
        request = _request()
        request.set_header("Authorization", "old")
        BasicAuthenticator("u", "p").authenticate(request)
        assert len([h for h in request.headers if h.startswith("Authorization")]) == 1


# ---------------------------------------------------------------------------
# Bearer
# ---------------------------------------------------------------------------


class TestBearerAuthenticator:
    def test_sets_bearer_header(self) -> None:
        request = _request()
        BearerAuthenticator("tok123").authenticate(request)
        assert request.get_header("Authorization") == "Bearer tok123"
        assert BearerAuthenticator("t").auth_type == "bearer"

    def test_empty_token_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            BearerAuthenticator("")


# ---------------------------------------------------------------------------
# API key
# ---------------------------------------------------------------------------


class TestAPIKeyAuthenticator:
    def test_header_default_name(self) -> None:
        request = _request()
        APIKeyAuthenticator("k1").authenticate(request)
        assert request.get_header("X-API-Key") == "k1"

    def test_header_custom_name(self) -> None:
        request = _request()
        APIKeyAuthenticator("k1", name="X-Token").authenticate(request)
        assert request.get_header("X-Token") == "k1"

    def test_query_param(self) -> None:
        request = _request()
        request.params["page"] = 1
        APIKeyAuthenticator("k 1", location="query").authenticate(request)
        assert request.render_url() == "https://api.example.com/?page=1&api_key=k%201"

    def test_invalid_location(self) -> None:
        with pytest.raises(ConfigurationError, match="Invalid location 'cookie'"):
            APIKeyAuthenticator("k", location="cookie")


# ---------------------------------------------------------------------------
# Manager
# ---------------------------------------------------------------------------


class TestAuthManager:
    def test_default_types(self) -> None:
        assert create_default_manager().auth_types == ["api_key", "basic", "bearer"]

    def test_create_bearer_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RC_TOKEN", "abc")
        authenticator = create_authenticator(AuthConfig(type="bearer", source="env:RC_TOKEN"))
        request = _request()
        authenticator.authenticate(request)
        assert request.get_header("Authorization") == "Bearer abc"

    def test_create_api_key_from_file(self, tmp_path: Path) -> None:
        key_file = tmp_path / "key.txt"
        key_file.write_text("filekey\n")
        authenticator = create_authenticator(
            AuthConfig(type="api_key", source=f"file:{key_file}", location="query", name="key")
        )
        request = _request()
        authenticator.authenticate(request)
        assert request.params == {"key": "filekey"}

    def test_create_basic_from_value(self) -> None:
        authenticator = create_authenticator(AuthConfig(type="basic", source="value:u:p"))
        assert isinstance(authenticator, BasicAuthenticator)

    def test_unknown_type(self) -> None:
        with pytest.raises(ConfigurationError, match="Available types: api_key, basic, bearer"):
            create_authenticator(AuthConfig(type="oauth2", source="value:x"))

    def test_empty_manager(self) -> None:
        with pytest.raises(ConfigurationError, match=r"\(none\)"):
            AuthManager().create(AuthConfig(type="bearer", source="value:x"))

    def test_register_replaces(self) -> None:
        manager = AuthManager()
        manager.register("bearer", lambda cfg, cred: BearerAuthenticator("first"))
        manager.register("bearer", lambda cfg, cred: BearerAuthenticator(cred.upper()))
        request = _request()
        manager.create(AuthConfig(type="bearer", source="value:second")).authenticate(request)
        assert request.get_header("Authorization") == "Bearer SECOND"
