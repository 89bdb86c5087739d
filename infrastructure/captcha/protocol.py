"""CaptchaVerifier protocol — callers depend on this, not the concrete implementation."""

from typing import NamedTuple, Optional, Protocol

from errors import CaptchaError


class Confirmation(NamedTuple):
    success: bool
    error: Optional[CaptchaError]


class ScoredConfirmation(NamedTuple):
    success: bool
    score: float
    action: str
    error: Optional[CaptchaError]


class CaptchaVerifier(Protocol):
    async def confirm(self, remote_ip: str, token: str) -> Confirmation: ...

    async def confirm_scored(self, remote_ip: str, token: str) -> ScoredConfirmation: ...
