"""
Logger factory and utility functions for the reCAPTCHA verifier.

Provides:
- get_logger(): Get a configured logger instance
- hash_ip(): Hash IP addresses for privacy
"""

from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from shared.logging_config import hash_ip as _hash_ip
from shared.logging_config import setup_logging


def get_logger(name: str) -> BoundLogger:
    """
    Get a configured logger instance.

    Example:
        >>> log = get_logger(__name__)
        >>> log.info("recaptcha_verified", success=True)
    """
    return structlog.get_logger(name)


def hash_ip(ip_address: Optional[str]) -> Optional[str]:
    """Hash an IP address in production; None and "" pass through."""
    if not ip_address:
        return ip_address
    return _hash_ip(ip_address)


__all__ = ["get_logger", "hash_ip", "setup_logging"]
