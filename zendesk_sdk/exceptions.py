"""Public exceptions for the Zendesk SDK."""


class ZendeskError(Exception):
    """Base exception for all Zendesk SDK errors."""


class ZendeskConfigError(ZendeskError):
    """Configuration error (missing credentials, invalid URL)."""


class ZendeskAPIError(ZendeskError):
    """Error from a Zendesk API request.

    Every failed resource operation surfaces as this type. The subclasses
    below tell the failure modes apart; the original exception, if any, is
    available as ``__cause__``.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ZendeskTimeoutError(ZendeskAPIError):
    """No progress on the connection within the configured timeout."""


class ZendeskTransportError(ZendeskAPIError):
    """Low-level connection failure (DNS, refused, reset)."""


class ZendeskCancelledError(ZendeskAPIError):
    """Request aborted by the caller's cancel event."""


class ZendeskEmptyReplyError(ZendeskAPIError):
    """Connection succeeded but the response body was empty."""


class ZendeskHTTPStatusError(ZendeskAPIError):
    """Response status outside the 2xx range."""

    def __init__(self, status_message: str, status_code: int) -> None:
        super().__init__(status_message, status_code=status_code)
        self.status_message = status_message


class ZendeskMalformedResponseError(ZendeskAPIError):
    """Response body is not valid JSON."""


class ZendeskShapeError(ZendeskAPIError):
    """Valid JSON without the expected envelope field."""
