"""Zendesk SDK for Python.

Asynchronous client for the Zendesk ``/api/v2`` REST API.

Public API:
    ZendeskClient - Client exposing tickets, users, organizations, ...
    OperationSet - list/show/show_many/create/update/delete for one resource
    make_operations - Build operation sets for other resource types
    exceptions - Error taxonomy rooted at ZendeskError
"""

from zendesk_sdk._version import __version__
from zendesk_sdk.client import ZendeskClient, get_client
from zendesk_sdk.exceptions import (
    ZendeskAPIError,
    ZendeskCancelledError,
    ZendeskConfigError,
    ZendeskEmptyReplyError,
    ZendeskError,
    ZendeskHTTPStatusError,
    ZendeskMalformedResponseError,
    ZendeskShapeError,
    ZendeskTimeoutError,
    ZendeskTransportError,
)
from zendesk_sdk.models import ClientConfig, ResourceDescriptor
from zendesk_sdk.resources import OperationSet, ResourceScope, make_operations

__all__ = [
    "__version__",
    "ZendeskClient",
    "get_client",
    "ClientConfig",
    "ResourceDescriptor",
    "OperationSet",
    "ResourceScope",
    "make_operations",
    "ZendeskError",
    "ZendeskConfigError",
    "ZendeskAPIError",
    "ZendeskTimeoutError",
    "ZendeskTransportError",
    "ZendeskCancelledError",
    "ZendeskEmptyReplyError",
    "ZendeskHTTPStatusError",
    "ZendeskMalformedResponseError",
    "ZendeskShapeError",
]
