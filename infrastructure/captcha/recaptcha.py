"""reCAPTCHA implementation of CaptchaVerifier.

- one form-encoded POST per call, no retry
- secret key is fixed at construction
- timeout is enforced by the injected HttpClient
"""

import httpx
from pydantic import ValidationError

from config import RECAPTCHA_VERIFY_URL
from errors import CaptchaError, DecodeError, TransportError
from infrastructure.captcha.error_codes import translate
from infrastructure.captcha.protocol import Confirmation, ScoredConfirmation
from infrastructure.http_client import HttpClient
from schemas.dto.responses.siteverify import VerificationResult
from shared.logging import get_logger, hash_ip

log = get_logger(__name__)


class RecaptchaVerifier:
    def __init__(
        self,
        secret: str,
        http_client: HttpClient,
        verify_url: str = RECAPTCHA_VERIFY_URL,
    ) -> None:
        self._secret = secret
        self._http = http_client
        self._verify_url = verify_url

    async def verify(self, remote_ip: str, token: str) -> VerificationResult:
        """Send the token to siteverify and decode the answer.

        Empty values are forwarded unchanged; the provider reports them as
        error codes. Raises TransportError when the endpoint cannot be
        reached or its body read, DecodeError when the body is not a
        siteverify JSON object.
        """
        if not self._secret:
            log.warning("recaptcha_secret_not_configured")
        try:
            response = await self._http.post(
                self._verify_url,
                data={
                    "secret": self._secret,
                    "remoteip": remote_ip,
                    "response": token,
                },
            )
        except httpx.HTTPError as e:
            log.error(
                "recaptcha_request_failed",
                error=str(e),
                error_type=type(e).__name__,
                remote_ip=hash_ip(remote_ip),
            )
            raise TransportError(f"post error: {e}") from e

        try:
            result = VerificationResult.model_validate_json(response.content, strict=True)
        except ValidationError as e:
            log.error(
                "recaptcha_decode_failed",
                status_code=response.status_code,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise DecodeError(f"read error: JSON decode error: {e}") from e

        log.debug(
            "recaptcha_verified",
            success=result.success,
            score=result.score,
            action=result.action,
            hostname=result.hostname,
            remote_ip=hash_ip(remote_ip),
        )
        if result.error_codes:
            log.warning("recaptcha_verification_errors", error_codes=result.error_codes)
        return result

    async def confirm(self, remote_ip: str, token: str) -> Confirmation:
        """Check a checkbox/invisible (v2) token.

        The error is set whenever the provider reported error codes, even if
        success is True.
        """
        try:
            result = await self.verify(remote_ip, token)
        except CaptchaError as e:
            return Confirmation(False, e)
        return Confirmation(result.success, translate(result.error_codes))

    async def confirm_scored(self, remote_ip: str, token: str) -> ScoredConfirmation:
        """Check a score-based (v3) token and return its score and action."""
        try:
            result = await self.verify(remote_ip, token)
        except CaptchaError as e:
            return ScoredConfirmation(False, 0.0, "", e)
        return ScoredConfirmation(
            result.success,
            result.score,
            result.action,
            translate(result.error_codes),
        )
