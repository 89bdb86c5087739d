"""
Response DTO for the reCAPTCHA siteverify endpoint.

VerificationResult — decoded body of POST /recaptcha/api/siteverify.
score and action are only populated by score-based (v3) keys.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class VerificationResult(BaseModel):
    """Decoded siteverify response. Unknown keys are dropped.

    Decode with model_validate_json(..., strict=True) so a mistyped field
    such as "success": "yes" is rejected rather than coerced.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    success: bool = False
    score: float = 0.0
    action: str = ""
    challenge_ts: Optional[datetime] = None
    hostname: str = ""
    error_codes: list[str] = Field(default_factory=list, alias="error-codes")

    @field_validator("success", "score", "action", "hostname", "error_codes", mode="before")
    @classmethod
    def _null_as_zero(cls, v: Any, info: ValidationInfo) -> Any:
        # JSON null decodes to the field's zero value
        if v is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return v
