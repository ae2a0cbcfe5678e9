"""Authorization header derivation."""

import base64

from zendesk_sdk.exceptions import ZendeskConfigError


def build_authorization(token: str, email: str | None = None, oauth: bool = False) -> str:
    """Build the Authorization header value for a set of credentials.

    Args:
        token: API token, or OAuth access token when ``oauth`` is set.
        email: Agent email, required for API token auth.
        oauth: Use Bearer auth with ``token`` instead of Basic token auth.

    Returns:
        The header value, e.g. ``"Basic ..."`` or ``"Bearer ..."``.

    Raises:
        ZendeskConfigError: If ``email`` is missing for token auth.
    """
    if oauth:
        return f"Bearer {token}"

    if not email:
        raise ZendeskConfigError("You must specify Zendesk email")

    credentials = f"{email}/token:{token}".encode("utf-8")
    return "Basic " + base64.b64encode(credentials).decode("ascii")
