"""
reCAPTCHA error hierarchy.

CaptchaError is the base for all typed errors raised or returned by the
verifier. Transport and decode failures come from the round trip itself;
VerificationError aggregates the error codes reported by the provider and is
returned alongside the verification outcome rather than instead of it.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence


class CaptchaError(Exception):
    """Base captcha error. All typed errors inherit from this."""

    error_code: str = "captcha_error"

    def __init__(self, message: str, *, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        payload: dict = {"error": self.message, "code": self.error_code}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class TransportError(CaptchaError):
    """The verification endpoint could not be reached or its body read."""

    error_code = "transport_error"


class DecodeError(CaptchaError):
    """The response body is not JSON of the expected shape."""

    error_code = "decode_error"


class VerificationError(CaptchaError):
    error_code = "verification_error"

    def __init__(self, codes: Sequence[str], messages: Sequence[str]) -> None:
        self.codes = tuple(codes)
        self.messages = tuple(messages)
        super().__init__(
            f"reCAPTCHA request errors: [{', '.join(self.messages)}]",
            details={"codes": list(self.codes), "messages": list(self.messages)},
        )
