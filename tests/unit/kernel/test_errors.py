"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from mp_crypto.kernel.errors import (
    ApplicationError,
    BaseError,
    CryptoError,
    DecryptionFailedError,
    InvalidInputError,
    MalformedHashError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key_bits": 256})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key_bits": 256}}

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("Invalid padding bytes."))
        assert "Invalid padding bytes." in err.to_dict()["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops", detail={"x": 1})))
        assert parsed["code"] == "oops"
        assert parsed["message"] == "oops"

    def test_repr_contains_code_and_message(self) -> None:
        r = repr(BaseError("hello", code="hi"))
        assert "hi" in r
        assert "hello" in r


class TestCryptoErrors:
    @pytest.mark.parametrize(
        ("error_cls", "code"),
        [
            (MalformedHashError, "malformed_hash"),
            (DecryptionFailedError, "decryption_failed"),
        ],
    )
    def test_default_message_and_code(self, error_cls: type[CryptoError], code: str) -> None:
        err = error_cls()
        assert err.code == code
        assert err.message
        assert isinstance(err, CryptoError)
        assert isinstance(err, BaseError)

    def test_crypto_error_code(self) -> None:
        assert CryptoError("x").code == "crypto_error"

    def test_invalid_input_records_parameter(self) -> None:
        err = InvalidInputError("bad key", parameter="key")
        assert err.code == "invalid_input"
        assert err.parameter == "key"
        assert err.to_dict()["detail"] == {"parameter": "key"}

    def test_invalid_input_without_parameter(self) -> None:
        err = InvalidInputError("bad")
        assert err.parameter is None
        assert err.detail == {}

    def test_decryption_failed_chains_cause(self) -> None:
        cause = ValueError("Invalid padding bytes.")
        err = DecryptionFailedError(cause=cause)
        assert err.__cause__ is cause
        assert err.cause is cause

    def test_crypto_errors_are_not_application_errors(self) -> None:
        assert not issubclass(CryptoError, ApplicationError)

    def test_catchable_as_crypto_error(self) -> None:
        with pytest.raises(CryptoError):
            raise MalformedHashError()
