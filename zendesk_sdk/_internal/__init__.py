"""Internal modules for Zendesk SDK.

These modules are not part of the public API.

Modules:
    auth - Authorization header derivation
    http - Shared HTTP client configuration and transport
    pipeline - Request encoding and response decoding
    redaction - Masking of credentials in debug output
"""
