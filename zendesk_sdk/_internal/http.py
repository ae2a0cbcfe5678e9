"""Shared HTTP client configuration and transport."""

import asyncio

import httpx
from pydantic import BaseModel

from zendesk_sdk._version import __version__
from zendesk_sdk.exceptions import (
    ZendeskCancelledError,
    ZendeskTimeoutError,
    ZendeskTransportError,
)
from zendesk_sdk.models.config import DEFAULT_TIMEOUT_MS

USER_AGENT = f"zendesk-sdk/{__version__}"


def create_http_client(*, timeout_ms: int = DEFAULT_TIMEOUT_MS) -> httpx.AsyncClient:
    """Create configured HTTP client.

    The client keeps connections alive and is shared by every request of a
    ZendeskClient.

    Args:
        timeout_ms: Default timeout in milliseconds, applied to each of the
            connect, read, write and pool phases.

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=timeout_ms / 1000,
        headers={"User-Agent": USER_AGENT},
    )


class RawResponse(BaseModel):
    """Status line and accumulated body of one response."""

    status_code: int
    reason_phrase: str = ""
    body: bytes = b""

    model_config = {"frozen": True}


class HttpTransport:
    """Issues single HTTP requests over a pooled httpx.AsyncClient.

    A client passed in by the caller is used as-is and left open on
    `aclose()`; a client created here is owned and closed by the transport.
    """

    def __init__(
        self,
        *,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._timeout_ms = timeout_ms
        self._owns_client = client is None
        self._client = client or create_http_client(timeout_ms=timeout_ms)

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def send(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str],
        content: bytes | None = None,
        timeout_ms: int | None = None,
        cancel: asyncio.Event | None = None,
    ) -> RawResponse:
        """Send one request and read the whole response body.

        Args:
            method: HTTP method.
            url: Absolute request URL, query string included.
            headers: Request headers.
            content: Encoded request body, if any.
            timeout_ms: Override of the default timeout in milliseconds.
            cancel: Event that aborts the request when set.

        Returns:
            The response status and body. Non-2xx statuses are not errors here.

        Raises:
            ZendeskTimeoutError: The connection stalled past the timeout.
            ZendeskTransportError: The connection failed.
            ZendeskCancelledError: `cancel` was set before the request finished.
        """
        if cancel is None:
            return await self._send(method, url, headers, content, timeout_ms)

        if cancel.is_set():
            raise ZendeskCancelledError("Cancelled")

        request = asyncio.ensure_future(self._send(method, url, headers, content, timeout_ms))
        waiter = asyncio.ensure_future(cancel.wait())
        done: set[asyncio.Future] = set()
        try:
            done, _ = await asyncio.wait({request, waiter}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            waiter.cancel()
            if not request.done():
                request.cancel()
                # Let the stream context close the connection before returning
                await asyncio.gather(request, return_exceptions=True)

        if request in done:
            return request.result()
        raise ZendeskCancelledError("Cancelled")

    async def _send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        content: bytes | None,
        timeout_ms: int | None,
    ) -> RawResponse:
        timeout = httpx.Timeout((timeout_ms or self._timeout_ms) / 1000)
        try:
            async with self._client.stream(
                method,
                url,
                headers=headers,
                content=content,
                timeout=timeout,
            ) as response:
                chunks = [chunk async for chunk in response.aiter_bytes()]
        except httpx.TimeoutException as e:
            raise ZendeskTimeoutError("Timeout") from e
        except httpx.RequestError as e:
            raise ZendeskTransportError(str(e) or type(e).__name__) from e

        return RawResponse(
            status_code=response.status_code,
            reason_phrase=response.reason_phrase,
            body=b"".join(chunks),
        )

    async def aclose(self) -> None:
        """Close the connection pool if this transport owns it."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()
