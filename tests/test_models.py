"""Tests for configuration and resource models."""

import httpx
import pydantic
import pytest

from zendesk_sdk.exceptions import ZendeskConfigError
from zendesk_sdk.models import DEFAULT_TIMEOUT_MS, ClientConfig, ResourceDescriptor


class TestClientConfig:
    """Tests for ClientConfig.from_credentials()."""

    def test_parses_url(self):
        """Should split the URL into scheme, host and port."""
        config = ClientConfig.from_credentials(
            url="https://acme.zendesk.com", token="secret", email="agent@acme.com"
        )
        assert config.scheme == "https"
        assert config.host == "acme.zendesk.com"
        assert config.port == 443
        assert config.base_url == "https://acme.zendesk.com/api/v2"

    def test_explicit_port(self):
        """Should keep a non-default port in the base URL."""
        config = ClientConfig.from_credentials(
            url="http://localhost:8080", token="secret", oauth=True
        )
        assert config.port == 8080
        assert config.base_url == "http://localhost:8080/api/v2"

    def test_keeps_mount_path(self):
        """Should keep a path prefix in front of the API prefix."""
        config = ClientConfig.from_credentials(
            url="https://proxy.example.com/zendesk/", token="secret", oauth=True
        )
        assert config.path == "/zendesk"
        assert config.base_url == "https://proxy.example.com/zendesk/api/v2"

    def test_root_path_is_empty(self):
        """A bare origin or trailing slash should not add a path."""
        config = ClientConfig.from_credentials(
            url="https://acme.zendesk.com/", token="secret", oauth=True
        )
        assert config.path == ""
        assert config.base_url == "https://acme.zendesk.com/api/v2"

    def test_ipv6_host_is_bracketed(self):
        """Should bracket IPv6 hosts so the port stays separate."""
        config = ClientConfig.from_credentials(url="https://[::1]:8443", token="secret", oauth=True)
        assert config.host == "::1"
        assert config.base_url == "https://[::1]:8443/api/v2"
        assert httpx.URL(config.base_url).port == 8443

    def test_defaults(self):
        """Should default timeout and debug."""
        config = ClientConfig.from_credentials(
            url="https://acme.zendesk.com", token="secret", oauth=True
        )
        assert config.timeout_ms == DEFAULT_TIMEOUT_MS == 30000
        assert config.debug is False

    def test_missing_url(self):
        """Should raise ZendeskConfigError without url."""
        with pytest.raises(ZendeskConfigError, match="URL"):
            ClientConfig.from_credentials(url=None, token="secret", email="agent@acme.com")

    def test_missing_token(self):
        """Should raise ZendeskConfigError without token."""
        with pytest.raises(ZendeskConfigError, match="access token"):
            ClientConfig.from_credentials(
                url="https://acme.zendesk.com", token="", email="agent@acme.com"
            )

    def test_missing_email(self):
        """Should raise ZendeskConfigError without email for token auth."""
        with pytest.raises(ZendeskConfigError, match="email"):
            ClientConfig.from_credentials(url="https://acme.zendesk.com", token="secret")

    @pytest.mark.parametrize("url", ["acme.zendesk.com", "ftp://acme.zendesk.com", "https://"])
    def test_invalid_url(self, url):
        """Should reject URLs without an http(s) scheme and host."""
        with pytest.raises(ZendeskConfigError):
            ClientConfig.from_credentials(url=url, token="secret", oauth=True)

    def test_invalid_timeout(self):
        """Should reject a non-positive timeout."""
        with pytest.raises(ZendeskConfigError):
            ClientConfig.from_credentials(
                url="https://acme.zendesk.com", token="secret", oauth=True, timeout_ms=0
            )

    def test_authorization_hidden_from_repr(self):
        """Should not leak credentials through repr."""
        config = ClientConfig.from_credentials(
            url="https://acme.zendesk.com", token="secret", oauth=True
        )
        assert config.authorization == "Bearer secret"
        assert "secret" not in repr(config)

    def test_frozen(self):
        """Should be immutable after construction."""
        config = ClientConfig.from_credentials(
            url="https://acme.zendesk.com", token="secret", oauth=True
        )
        with pytest.raises(pydantic.ValidationError):
            config.authorization = "Bearer other"  # type: ignore[misc]


class TestResourceDescriptor:
    """Tests for ResourceDescriptor."""

    def test_paths_at_top_level(self):
        """Should build collection, member and show_many paths."""
        tickets = ResourceDescriptor(singular="ticket", plural="tickets")
        assert tickets.collection_path() == "/tickets.json"
        assert tickets.member_path(42) == "/tickets/42.json"
        assert tickets.show_many_path() == "/tickets/show_many.json"

    def test_scoped_paths(self):
        """Should prefix paths with the parent scope."""
        comments = ResourceDescriptor(singular="comment", plural="comments").scoped("/tickets/7")
        assert comments.prefix == "/tickets/7"
        assert comments.collection_path() == "/tickets/7/comments.json"

    def test_scoped_returns_copy(self):
        """Scoping should not modify the original descriptor."""
        tickets = ResourceDescriptor(singular="ticket", plural="tickets")
        tickets.scoped("/users/1")
        assert tickets.prefix == ""

    def test_collection_key(self):
        """Should default the list envelope key to the plural name."""
        assert ResourceDescriptor(singular="macro", plural="macros").collection_key == "macros"
        search = ResourceDescriptor(singular="search", plural="search", list_key="results")
        assert search.collection_key == "results"

    def test_frozen(self):
        """Names should not be reassignable."""
        tickets = ResourceDescriptor(singular="ticket", plural="tickets")
        with pytest.raises(pydantic.ValidationError):
            tickets.plural = "issues"  # type: ignore[misc]

    def test_rejects_empty_names(self):
        """Should require non-empty names."""
        with pytest.raises(pydantic.ValidationError):
            ResourceDescriptor(singular="", plural="tickets")
