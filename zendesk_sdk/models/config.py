"""Client configuration model."""

import httpx
from pydantic import BaseModel, Field, ValidationError

from zendesk_sdk._internal.auth import build_authorization
from zendesk_sdk.exceptions import ZendeskConfigError

DEFAULT_TIMEOUT_MS = 30 * 1000
API_PREFIX = "/api/v2"

DEFAULT_PORTS = {"http": 80, "https": 443}


class ClientConfig(BaseModel):
    """Resolved, immutable configuration for one Zendesk client.

    Use `ClientConfig.from_credentials()` rather than constructing directly:
    it validates the input and derives the Authorization header once.
    """

    scheme: str
    host: str
    port: int
    path: str = ""
    email: str | None = None
    oauth: bool = False
    authorization: str = Field(repr=False)
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0)
    debug: bool = False

    model_config = {"frozen": True}

    @classmethod
    def from_credentials(
        cls,
        *,
        url: str | None,
        token: str | None,
        email: str | None = None,
        oauth: bool = False,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        debug: bool = False,
    ) -> "ClientConfig":
        """Validate credentials and build a config.

        Raises:
            ZendeskConfigError: If url or token is missing, email is missing
                for token auth, or the URL is not an http(s) URL with a host.
        """
        if not url:
            raise ZendeskConfigError("You must specify Zendesk URL")
        if not token:
            raise ZendeskConfigError("You must specify Zendesk access token")

        authorization = build_authorization(token, email=email, oauth=oauth)

        try:
            parsed = httpx.URL(url)
        except httpx.InvalidURL as e:
            raise ZendeskConfigError(f"Invalid Zendesk URL: {url}") from e
        if parsed.scheme not in DEFAULT_PORTS or not parsed.host:
            raise ZendeskConfigError(f"Invalid Zendesk URL: {url}")

        try:
            return cls(
                scheme=parsed.scheme,
                host=parsed.host,
                port=parsed.port or DEFAULT_PORTS[parsed.scheme],
                path=parsed.path.rstrip("/"),
                email=email,
                oauth=bool(oauth),
                authorization=authorization,
                timeout_ms=timeout_ms,
                debug=debug,
            )
        except ValidationError as e:
            raise ZendeskConfigError(str(e)) from e

    @property
    def base_url(self) -> str:
        """Origin, mount path and API prefix, e.g. ``https://acme.zendesk.com/api/v2``.

        IPv6 hosts are bracketed; default ports are omitted.
        """
        host = f"[{self.host}]" if ":" in self.host else self.host
        if self.port != DEFAULT_PORTS[self.scheme]:
            host = f"{host}:{self.port}"
        return f"{self.scheme}://{host}{self.path}{API_PREFIX}"
