"""
Shared-secret authorization for the scheduled trigger endpoints.
"""
import hmac
from typing import Optional

from fastapi import Depends, Header, Query

from .config import Settings, get_settings
from .errors import Unauthorized


def _matches(provided: Optional[str], expected: str) -> bool:
    if not provided:
        return False
    return hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))


def require_cron_secret(
    x_cron_secret: Optional[str] = Header(None),
    secret: Optional[str] = Query(None),
    settings: Settings = Depends(get_settings),
) -> None:
    """
    Accept the secret from the X-Cron-Secret header or the ?secret= query
    parameter. With no CRON_SECRET configured every caller is allowed.
    """
    if not settings.cron_secret:
        return
    if _matches(x_cron_secret, settings.cron_secret) or _matches(secret, settings.cron_secret):
        return
    raise Unauthorized()
