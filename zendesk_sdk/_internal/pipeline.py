"""Request pipeline: parameter encoding, transport and JSON decoding."""

import asyncio
import json
from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qs

import httpx
from pydantic import BaseModel

from zendesk_sdk._internal.http import USER_AGENT, HttpTransport, RawResponse
from zendesk_sdk._internal.redaction import redact_payload
from zendesk_sdk.exceptions import (
    ZendeskAPIError,
    ZendeskEmptyReplyError,
    ZendeskHTTPStatusError,
    ZendeskMalformedResponseError,
)
from zendesk_sdk.models.config import ClientConfig

ACCEPT = "application/json;q=0.9,text/plain"
BODY_METHODS = frozenset({"POST", "PUT"})

Params = Mapping[str, Any] | str | None


def parse_params(params: Params) -> Mapping[str, Any] | None:
    """Parse an encoded query string into a mapping.

    Mappings and None pass through unchanged. Repeated keys collapse into a
    list, single keys into a plain string.
    """
    if not isinstance(params, str):
        return params

    parsed = parse_qs(params.lstrip("?"), keep_blank_values=True)
    return {key: values[0] if len(values) == 1 else values for key, values in parsed.items()}


def encode_query(params: Params) -> str:
    """Encode read parameters as a query string.

    List values are joined with commas (``ids=1,2,3``), booleans are
    lowercased and None values are dropped.
    """
    mapping = parse_params(params)
    if not mapping:
        return ""

    normalized: dict[str, str] = {}
    for key, value in mapping.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            normalized[key] = ",".join(_stringify(item) for item in value)
        else:
            normalized[key] = _stringify(value)
    return str(httpx.QueryParams(normalized))


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class RequestSpec(BaseModel):
    """One request to issue: method, API path and parameters."""

    method: str
    path: str
    params: Any = None

    model_config = {"frozen": True}

    @property
    def has_body(self) -> bool:
        return self.method in BODY_METHODS

    def target(self) -> str:
        """Path with the query string appended for read methods."""
        if self.has_body:
            return self.path
        query = encode_query(self.params)
        return f"{self.path}?{query}" if query else self.path

    def body(self) -> bytes | None:
        if not self.has_body:
            return None
        return json.dumps(self.params if self.params is not None else {}).encode("utf-8")


class RequestPipeline:
    """Builds, sends and decodes requests for one client configuration.

    Holds no per-request state, so a single pipeline serves any number of
    concurrent calls.
    """

    def __init__(self, config: ClientConfig, transport: HttpTransport) -> None:
        self._config = config
        self._transport = transport

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._config.debug:
            import sys

            print(f"[zendesk-sdk] {message}", file=sys.stderr)

    def _headers(self, spec: RequestSpec) -> dict[str, str]:
        headers = {
            "Authorization": self._config.authorization,
            "Accept": ACCEPT,
            "User-Agent": USER_AGENT,
        }
        if spec.has_body:
            headers["Content-Type"] = "application/json"
        return headers

    async def execute(
        self,
        method: str,
        path: str,
        params: Params = None,
        *,
        cancel: asyncio.Event | None = None,
    ) -> Any:
        """Issue one request and return the decoded JSON envelope.

        Args:
            method: HTTP method.
            path: API path below ``/api/v2``, e.g. ``/tickets.json``.
            params: Query parameters (mapping or encoded string) for reads,
                JSON body for POST/PUT.
            cancel: Event that aborts the request when set.

        Returns:
            The decoded JSON response.

        Raises:
            ZendeskAPIError: Any transport, status or decoding failure. The
                subclass tells which.
        """
        spec = RequestSpec(method=method.upper(), path=path, params=parse_params(params))
        if self._config.debug:
            self._log_debug(f"{spec.method} {spec.path} params={redact_payload(spec.params)}")

        try:
            raw = await self._transport.send(
                spec.method,
                self._config.base_url + spec.target(),
                headers=self._headers(spec),
                content=spec.body(),
                timeout_ms=self._config.timeout_ms,
                cancel=cancel,
            )
            envelope = self._decode(raw)
        except ZendeskAPIError as e:
            self._log_debug(f"{spec.method} {spec.path} failed: {type(e).__name__}: {e}")
            raise

        self._log_debug(f"{spec.method} {spec.path} -> {raw.status_code}")
        return envelope

    def _decode(self, raw: RawResponse) -> Any:
        if not 200 <= raw.status_code < 300:
            raise ZendeskHTTPStatusError(
                raw.reason_phrase or f"HTTP {raw.status_code}",
                status_code=raw.status_code,
            )

        # 204 No Content carries no body by definition
        if raw.status_code == 204:
            return {}

        if not raw.body:
            raise ZendeskEmptyReplyError("Empty reply from Zendesk", status_code=raw.status_code)

        try:
            return json.loads(raw.body)
        except ValueError as e:
            raise ZendeskMalformedResponseError(str(e), status_code=raw.status_code) from e
