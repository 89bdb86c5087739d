"""
Process-wide reCAPTCHA entry points.

Meant to be called from the HTTP server or framework that renders the
reCAPTCHA widget and receives the token the client submits:

    >>> import recaptcha
    >>> recaptcha.init("my-site-secret")
    >>> ok, err = await recaptcha.confirm(client_ip, token)
    >>> ok, score, action, err = await recaptcha.confirm_scored(client_ip, token)

init() is expected to run once at startup, before any traffic. Calling it
again replaces the key for every call made afterwards; there is no locking.
Code that wants an immutable key should construct its own
infrastructure.captcha.recaptcha.RecaptchaVerifier instead.
"""

from __future__ import annotations

import asyncio
from typing import Optional

from config import RECAPTCHA_VERIFY_URL, RecaptchaSettings
from infrastructure.captcha.protocol import (
    CaptchaVerifier,
    Confirmation,
    ScoredConfirmation,
)
from infrastructure.captcha.recaptcha import RecaptchaVerifier
from infrastructure.http_client import HttpClient
from shared.logging import get_logger

log = get_logger(__name__)

_private_key: str = ""
_verify_url: str = RECAPTCHA_VERIFY_URL
_timeout: float = 5.0
_http_client: Optional[HttpClient] = None
_http_loop: Optional[asyncio.AbstractEventLoop] = None


def init(key: str) -> None:
    """Set the site's private key, which differs for every domain."""
    global _private_key
    _private_key = key
    log.info("recaptcha_initialized", configured=bool(key))


def init_from_settings(settings: Optional[RecaptchaSettings] = None) -> None:
    """Configure key, endpoint and timeout from RECAPTCHA_* environment variables.

    The timeout applies to the shared client created after this call.
    """
    global _verify_url, _timeout
    settings = settings or RecaptchaSettings()
    _verify_url = settings.recaptcha_verify_url
    _timeout = settings.recaptcha_timeout
    init(settings.recaptcha_secret)


def _get_http_client() -> HttpClient:
    # an httpx client is bound to the loop it first ran on
    global _http_client, _http_loop
    loop = asyncio.get_running_loop()
    if _http_client is None or _http_loop is not loop:
        _http_client = HttpClient(timeout=_timeout)
        _http_loop = loop
    return _http_client


def _verifier() -> CaptchaVerifier:
    # key is captured per call so a later init() never changes an in-flight request
    return RecaptchaVerifier(_private_key, _get_http_client(), verify_url=_verify_url)


async def confirm(remote_ip: str, token: str) -> Confirmation:
    """Check a v2 token. Returns (success, error)."""
    return await _verifier().confirm(remote_ip, token)


async def confirm_scored(remote_ip: str, token: str) -> ScoredConfirmation:
    """Check a v3 token. Returns (success, score, action, error)."""
    return await _verifier().confirm_scored(remote_ip, token)


async def close() -> None:
    """Release the shared HTTP client. Safe to call when it was never opened.

    A client left behind by an earlier, finished event loop is dropped
    without being closed.
    """
    global _http_client, _http_loop
    client, loop = _http_client, _http_loop
    _http_client = None
    _http_loop = None
    if client is not None and loop is asyncio.get_running_loop():
        await client.aclose()
