"""Shared fixtures."""

import pytest

from zendesk_sdk import ZendeskClient

BASE_URL = "https://acme.zendesk.com/api/v2"


@pytest.fixture
async def client():
    """Client with API token auth against acme.zendesk.com."""
    client = ZendeskClient(
        url="https://acme.zendesk.com",
        email="agent@acme.com",
        token="secret",
    )
    yield client
    await client.aclose()
