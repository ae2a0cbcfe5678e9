"""Zendesk API client.

Example:
    from zendesk_sdk import ZendeskClient

    async with ZendeskClient(
        url="https://acme.zendesk.com",
        email="agent@acme.com",
        token="api-token",
    ) as client:
        tickets = await client.tickets.list({"sort_by": "created_at"})
        comments = await client.ticket(7).comments.list()
"""

import os
from types import TracebackType

import httpx

from zendesk_sdk._internal.http import HttpTransport
from zendesk_sdk._internal.pipeline import RequestPipeline
from zendesk_sdk.models.config import DEFAULT_TIMEOUT_MS, ClientConfig
from zendesk_sdk.resources import (
    NESTED,
    TOP_LEVEL,
    OperationSet,
    ResourceId,
    ResourceScope,
    make_scope,
)


class ZendeskClient:
    """Asynchronous client for the Zendesk ``/api/v2`` REST API.

    One instance owns one keep-alive connection pool, shared by every
    operation and safe for concurrent use. Close it with `aclose()` or use
    the client as an async context manager.

    Top-level resources:
        tickets, ticket_fields, organizations, users, user_fields, macros, search

    Scoped resources:
        ticket(id).comments, organization(id).tickets, user(id).tickets
    """

    def __init__(
        self,
        *,
        url: str | None = None,
        token: str | None = None,
        email: str | None = None,
        oauth: bool = False,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        debug: bool = False,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            url: Account URL, e.g. https://acme.zendesk.com.
            token: API token, or OAuth access token when `oauth` is set.
            email: Agent email, required unless `oauth` is set.
            oauth: Authenticate with a Bearer token.
            timeout_ms: Request timeout in milliseconds.
            debug: Enable debug logging to stderr.
            http_client: Optional preconfigured httpx.AsyncClient. It is not
                closed by `aclose()`.

        Raises:
            ZendeskConfigError: If a required setting is missing or invalid.
        """
        self._config = ClientConfig.from_credentials(
            url=url,
            token=token,
            email=email,
            oauth=oauth,
            timeout_ms=timeout_ms,
            debug=debug,
        )
        self._transport = HttpTransport(timeout_ms=self._config.timeout_ms, client=http_client)
        self._pipeline = RequestPipeline(self._config, self._transport)

        self.tickets = self._bind("tickets")
        self.ticket_fields = self._bind("ticket_fields")
        self.organizations = self._bind("organizations")
        self.users = self._bind("users")
        self.user_fields = self._bind("user_fields")
        self.macros = self._bind("macros")
        self.search = self._bind("search")

        self._scopes = {
            parent_name: make_scope(self._pipeline, parent, children)
            for parent_name, (parent, children) in NESTED.items()
        }

    @classmethod
    def from_env(cls) -> "ZendeskClient":
        """Create a client from environment variables.

        Required environment variables:
            ZENDESK_URL: The account URL.
            ZENDESK_TOKEN: API token or OAuth access token.
            ZENDESK_EMAIL: Agent email (not needed with ZENDESK_OAUTH).

        Optional environment variables:
            ZENDESK_OAUTH: Set to "1" or "true" to use Bearer auth.
            ZENDESK_TIMEOUT_MS: Request timeout in milliseconds.
            ZENDESK_DEBUG: Set to "1" to enable debug logging.

        Raises:
            ZendeskConfigError: If required variables are missing.
            ValueError: If ZENDESK_TIMEOUT_MS is not an integer.
        """
        oauth = os.environ.get("ZENDESK_OAUTH", "").lower() in ("1", "true")
        debug = os.environ.get("ZENDESK_DEBUG", "") == "1"
        timeout_ms = int(os.environ.get("ZENDESK_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))

        return cls(
            url=os.environ.get("ZENDESK_URL"),
            token=os.environ.get("ZENDESK_TOKEN"),
            email=os.environ.get("ZENDESK_EMAIL"),
            oauth=oauth,
            timeout_ms=timeout_ms,
            debug=debug,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def is_closed(self) -> bool:
        return self._transport.is_closed

    def _bind(self, name: str) -> OperationSet:
        return OperationSet(TOP_LEVEL[name], self._pipeline)

    # =========================================================================
    # Scoped Resources
    # =========================================================================

    def scope(self, parent: str, parent_id: ResourceId) -> ResourceScope:
        """Return the sub-resources of one parent record.

        Args:
            parent: Registered parent name ('ticket', 'organization', 'user').
            parent_id: The parent record's id.

        Raises:
            KeyError: If `parent` has no registered sub-resources.
        """
        return self._scopes[parent](parent_id)

    def ticket(self, ticket_id: ResourceId) -> ResourceScope:
        """Sub-resources of one ticket: ``comments``."""
        return self.scope("ticket", ticket_id)

    def organization(self, organization_id: ResourceId) -> ResourceScope:
        """Sub-resources of one organization: ``tickets``."""
        return self.scope("organization", organization_id)

    def user(self, user_id: ResourceId) -> ResourceScope:
        """Sub-resources of one user: ``tickets``."""
        return self.scope("user", user_id)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def aclose(self) -> None:
        """Close the connection pool."""
        await self._transport.aclose()

    async def __aenter__(self) -> "ZendeskClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


def get_client() -> ZendeskClient:
    """Get a client configured from environment variables.

    Returns:
        A configured ZendeskClient instance.
    """
    return ZendeskClient.from_env()
