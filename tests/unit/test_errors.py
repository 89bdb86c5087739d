"""Unit tests for the CaptchaError hierarchy."""

import pytest

from errors import (
    CaptchaError,
    DecodeError,
    TransportError,
    VerificationError,
)


class TestCaptchaErrorSubclasses:
    @pytest.mark.parametrize(
        "cls, code",
        [
            (TransportError, "transport_error"),
            (DecodeError, "decode_error"),
        ],
        ids=["transport", "decode"],
    )
    def test_error_code(self, cls, code):
        e = cls("boom")
        assert isinstance(e, CaptchaError)
        assert e.error_code == code
        assert e.message == "boom"
        assert str(e) == "boom"

    def test_verification_error(self):
        e = VerificationError(["bad-request"], ["the request is invalid or malformed"])
        assert isinstance(e, CaptchaError)
        assert e.error_code == "verification_error"
        assert e.codes == ("bad-request",)
        assert e.messages == ("the request is invalid or malformed",)
        assert str(e) == "reCAPTCHA request errors: [the request is invalid or malformed]"


class TestCaptchaErrorToDict:
    def test_basic(self):
        e = TransportError("post error: connection refused")
        assert e.to_dict() == {
            "error": "post error: connection refused",
            "code": "transport_error",
        }

    def test_verification_details(self):
        d = VerificationError(["a", "b"], ["unknown error code a", "unknown error code b"]).to_dict()
        assert d["code"] == "verification_error"
        assert d["details"] == {
            "codes": ["a", "b"],
            "messages": ["unknown error code a", "unknown error code b"],
        }

    def test_no_details_when_absent(self):
        assert "details" not in DecodeError("bad json").to_dict()
