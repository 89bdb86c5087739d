"""
Verifier configuration via pydantic-settings.

All settings are loaded from environment variables (and .env file). The
verifier itself never reads them; the surrounding application decides
whether to call recaptcha.init() directly or recaptcha.init_from_settings().
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

RECAPTCHA_VERIFY_URL = "https://www.google.com/recaptcha/api/siteverify"


class RecaptchaSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    recaptcha_secret: str = ""
    recaptcha_verify_url: str = RECAPTCHA_VERIFY_URL
    recaptcha_timeout: float = 5.0


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: str = "development"
    log_level: str = "INFO"
    log_format: str = "console"  # "json" in production

    @property
    def is_production(self) -> bool:
        return self.env == "production"
