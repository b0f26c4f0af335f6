"""Observability – structured logging with secret redaction."""
from mp_crypto.observability.logging import (
    DEFAULT_SENSITIVE_FIELDS,
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
)

__all__ = ["DEFAULT_SENSITIVE_FIELDS", "JsonLoggerFactory", "SensitiveFieldsFilter", "get_logger"]
