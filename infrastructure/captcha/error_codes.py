"""Translation of siteverify error codes into readable messages.

Texts follow https://developers.google.com/recaptcha/docs/verify.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, Sequence

from errors import VerificationError

ERROR_CODE_MESSAGES: Mapping[str, str] = MappingProxyType(
    {
        "missing-input-secret": "the secret parameter is missing",
        "invalid-input-secret": "the secret parameter is invalid or malformed",
        "missing-input-response": "the response parameter is missing",
        "invalid-input-response": "the response parameter is invalid or malformed",
        "bad-request": "the request is invalid or malformed",
        "timeout-or-duplicate": "the response is no longer valid - too old or used previously",
    }
)


def describe(code: str) -> str:
    return ERROR_CODE_MESSAGES.get(code, f"unknown error code {code}")


def translate(codes: Sequence[str]) -> Optional[VerificationError]:
    """Aggregate provider error codes into a single VerificationError.

    Returns None when there are no codes. Unknown codes are kept as
    "unknown error code <code>" so nothing the provider reports is dropped.
    """
    if not codes:
        return None
    return VerificationError(codes, [describe(code) for code in codes])
