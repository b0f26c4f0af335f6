"""Unit tests for observability logging."""

from __future__ import annotations

import io
import json
import logging
from typing import Any

import pytest
import structlog

from mp_crypto.observability.logging import (
    DEFAULT_SENSITIVE_FIELDS,
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
)
from mp_crypto.security import decrypt, generate_spice
from mp_crypto.kernel.errors import DecryptionFailedError


@pytest.fixture
def json_stream():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    stream = io.StringIO()
    JsonLoggerFactory.configure(level=logging.DEBUG, handler=logging.StreamHandler(stream))
    yield stream
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def _records(stream: io.StringIO) -> list[dict[str, Any]]:
    return [json.loads(line) for line in stream.getvalue().splitlines() if line.strip()]


# ---------------------------------------------------------------------------
# SensitiveFieldsFilter
# ---------------------------------------------------------------------------


class TestSensitiveFieldsFilter:
    def test_redacts_known_sensitive_key(self) -> None:
        result = SensitiveFieldsFilter().redact({"password": "s3cr3t", "name": "alice"})
        assert result["password"] == SensitiveFieldsFilter.REDACTED
        assert result["name"] == "alice"

    def test_default_fields_cover_crypto_material(self) -> None:
        for name in ("password", "pepper", "salt", "key", "encryption_key", "plaintext"):
            assert name in DEFAULT_SENSITIVE_FIELDS

    def test_redacts_all_default_sensitive_fields(self) -> None:
        data = {name: "value" for name in DEFAULT_SENSITIVE_FIELDS}
        result = SensitiveFieldsFilter().redact(data)
        assert set(result.values()) == {SensitiveFieldsFilter.REDACTED}

    def test_case_insensitive_key_matching(self) -> None:
        result = SensitiveFieldsFilter().redact({"PEPPER": "p", "Key": "k", "normal": "ok"})
        assert result["PEPPER"] == SensitiveFieldsFilter.REDACTED
        assert result["Key"] == SensitiveFieldsFilter.REDACTED
        assert result["normal"] == "ok"

    def test_custom_sensitive_fields(self) -> None:
        f = SensitiveFieldsFilter(sensitive_fields=frozenset({"dsn"}))
        result = f.redact({"dsn": "postgres://", "password": "keep"})
        assert result["dsn"] == SensitiveFieldsFilter.REDACTED
        assert result["password"] == "keep"

    def test_redact_deep_nested(self) -> None:
        data: dict[str, Any] = {"user": "alice", "credentials": {"password": "hunter2", "salt": "abc"}}
        result = SensitiveFieldsFilter().redact_deep(data)
        assert result["user"] == "alice"
        assert result["credentials"]["password"] == SensitiveFieldsFilter.REDACTED
        assert result["credentials"]["salt"] == SensitiveFieldsFilter.REDACTED

    def test_redact_does_not_modify_original(self) -> None:
        original = {"password": "secret"}
        SensitiveFieldsFilter().redact_deep(original)
        assert original["password"] == "secret"

    def test_usable_as_structlog_processor(self) -> None:
        event = SensitiveFieldsFilter()(None, "info", {"event": "x", "key": "k"})
        assert event == {"event": "x", "key": SensitiveFieldsFilter.REDACTED}


# ---------------------------------------------------------------------------
# JsonLoggerFactory / get_logger
# ---------------------------------------------------------------------------


class TestJsonLogging:
    def test_structlog_events_are_json(self, json_stream: io.StringIO) -> None:
        get_logger("mp_crypto.test").info("hasher.configured", peppered=True)
        records = _records(json_stream)
        assert records[-1]["event"] == "hasher.configured"
        assert records[-1]["peppered"] is True
        assert records[-1]["level"] == "info"

    def test_bound_secret_is_redacted(self, json_stream: io.StringIO) -> None:
        get_logger("mp_crypto.test", pepper="c2VjcmV0").info("bound")
        record = _records(json_stream)[-1]
        assert record["pepper"] == SensitiveFieldsFilter.REDACTED
        assert "c2VjcmV0" not in json_stream.getvalue()

    def test_context_bound_secret_is_redacted(self, json_stream: io.StringIO) -> None:
        structlog.contextvars.bind_contextvars(pepper="c2VjcmV0", request_id="r-1")
        get_logger("mp_crypto.test").info("context")
        record = _records(json_stream)[-1]
        assert record["pepper"] == SensitiveFieldsFilter.REDACTED
        assert record["request_id"] == "r-1"
        assert "c2VjcmV0" not in json_stream.getvalue()

    def test_context_bound_secret_is_redacted_on_stdlib_records(self, json_stream: io.StringIO) -> None:
        structlog.contextvars.bind_contextvars(encryption_key="a2V5LWJ5dGVz")
        logging.getLogger("mp_crypto.test").warning("stdlib record")
        record = _records(json_stream)[-1]
        assert record["event"] == "stdlib record"
        assert record["encryption_key"] == SensitiveFieldsFilter.REDACTED
        assert "a2V5LWJ5dGVz" not in json_stream.getvalue()

    def test_stdlib_records_share_the_json_stream(self, json_stream: io.StringIO) -> None:
        with pytest.raises(DecryptionFailedError):
            decrypt("AAAA", generate_spice(32))
        records = _records(json_stream)
        assert any("decryption rejected" in r["event"] for r in records)
        assert any(r.get("logger") == "mp_crypto.security.encryption.aes_cbc" for r in records)

    def test_level_is_applied(self, json_stream: io.StringIO) -> None:
        assert logging.getLogger().level == logging.DEBUG
