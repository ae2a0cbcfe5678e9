"""Tests for redaction of request parameters in debug output."""

from zendesk_sdk._internal.redaction import REDACTED_VALUE, redact_payload


class TestRedactPayload:
    """Tests for redact_payload()."""

    def test_redacts_top_level_keys(self):
        """Should redact sensitive keys at the top level."""
        result = redact_payload({"password": "hunter2", "name": "Jane"})
        assert result == {"password": REDACTED_VALUE, "name": "Jane"}

    def test_redacts_nested_keys(self):
        """Should redact inside resource envelopes."""
        result = redact_payload({"user": {"name": "Jane", "password": "hunter2"}})
        assert result == {"user": {"name": "Jane", "password": REDACTED_VALUE}}

    def test_case_insensitive(self):
        """Should match keys regardless of case."""
        result = redact_payload({"Authorization": "Basic abc", "API_TOKEN": "x"})
        assert result == {"Authorization": REDACTED_VALUE, "API_TOKEN": REDACTED_VALUE}

    def test_redacts_inside_lists(self):
        """Should walk lists of objects."""
        result = redact_payload({"users": [{"token": "a"}, {"id": 1}]})
        assert result == {"users": [{"token": REDACTED_VALUE}, {"id": 1}]}

    def test_does_not_mutate_input(self):
        """Original payload should be unchanged."""
        payload = {"user": {"password": "hunter2"}}
        redact_payload(payload)
        assert payload == {"user": {"password": "hunter2"}}

    def test_passes_through_scalars_and_none(self):
        """Non-container values should be returned as-is."""
        assert redact_payload(None) is None
        assert redact_payload("page=2") == "page=2"
