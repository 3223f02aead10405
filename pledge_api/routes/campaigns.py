"""
Campaign trigger routes, called by the external scheduler.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..auth import require_cron_secret
from ..config import Settings, get_settings
from ..database import get_db
from ..errors import PledgeError
from ..logging_config import api_logger
from ..mailer import ResendClient, get_mailer
from ..responses import trigger_failure, trigger_success
from ..worker.campaign_trigger import run_campaign_trigger

router = APIRouter(prefix="/api", tags=["campaigns"])


@router.api_route("/trigger-campaigns", methods=["GET", "POST"])
def trigger_campaigns(
    _authorized: None = Depends(require_cron_secret),
    db: Session = Depends(get_db),
    mailer: ResendClient = Depends(get_mailer),
    settings: Settings = Depends(get_settings),
):
    """Notify pledgers of every campaign that reached its threshold."""
    try:
        summary = run_campaign_trigger(db, mailer, settings)
    except PledgeError as e:
        return trigger_failure(str(e), e.status_code)
    except Exception as e:
        api_logger.error("Trigger error", error=e)
        return trigger_failure(str(e) or type(e).__name__, 500)

    return trigger_success(summary)


@router.post("/test-email")
def send_test_email(
    to: str,
    _authorized: None = Depends(require_cron_secret),
    mailer: ResendClient = Depends(get_mailer),
    settings: Settings = Depends(get_settings),
):
    """Send a smoke-test message to check the email credentials."""
    message_id = mailer.send(
        sender=settings.email_from,
        to=to,
        subject="Smoke test: If We All Did",
        html=(
            "<p>This is a test email.</p>\n"
            "<p>If you received this, email sending works.</p>"
        ),
    )
    api_logger.info("Test email sent", recipient=to, message_id=message_id)
    return {"success": True, "id": message_id}
