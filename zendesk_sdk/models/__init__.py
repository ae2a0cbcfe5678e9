"""Configuration and resource models."""

from zendesk_sdk.models.config import API_PREFIX, DEFAULT_TIMEOUT_MS, ClientConfig
from zendesk_sdk.models.resource import ResourceDescriptor

__all__ = ["API_PREFIX", "DEFAULT_TIMEOUT_MS", "ClientConfig", "ResourceDescriptor"]
