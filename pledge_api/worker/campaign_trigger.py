"""
Campaign Trigger Job

Finds campaigns whose pledge count reached their threshold and notifies
every pledger once:

    collecting -> triggered -> notified

- The collecting -> triggered step is one conditional UPDATE. Only the
  invocation whose UPDATE matched the row owns the campaign; overlapping or
  repeated runs see zero affected rows and skip it.
- Pledges are handled one at a time: send, then stamp notified_at and
  commit, before the next send.
- Any store or send failure aborts the whole run. Rows committed before the
  failure stay committed, so the next run picks up where this one stopped.
"""
from datetime import datetime, timezone
from typing import List, Protocol, Tuple

from sqlalchemy import func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..config import Settings
from ..errors import PledgeError, StoreError
from ..logging_config import db_logger, timed, trigger_logger as logger
from ..models.campaign import Campaign, CampaignStatus
from ..models.pledge import Pledge
from ..schemas.trigger import CampaignResult, TriggerSummary
from .notifications import render_campaign_email


class Mailer(Protocol):
    def send(self, sender: str, to: str, subject: str, html: str): ...


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def find_ready_campaigns(db: Session) -> List[Campaign]:
    """Campaigns still collecting whose pledge count reached the threshold."""
    pledge_count = (
        select(func.count(Pledge.id))
        .where(Pledge.campaign == Campaign.campaign)
        .correlate(Campaign)
        .scalar_subquery()
    )
    stmt = (
        select(Campaign)
        .where(
            Campaign.status == CampaignStatus.COLLECTING.value,
            pledge_count >= Campaign.threshold,
        )
        .order_by(Campaign.campaign)
    )
    return list(db.scalars(stmt))


def claim_campaign(db: Session, campaign_key: str) -> bool:
    """
    Move a campaign from collecting to triggered.

    Returns False when the row was no longer collecting at execution time,
    i.e. another invocation already owns it.
    """
    result = db.execute(
        update(Campaign)
        .where(
            Campaign.campaign == campaign_key,
            Campaign.status == CampaignStatus.COLLECTING.value,
        )
        .values(status=CampaignStatus.TRIGGERED.value, triggered_at=_utcnow())
        .execution_options(synchronize_session=False)
    )
    db.commit()
    return result.rowcount == 1


def pending_pledges(db: Session, campaign_key: str) -> List[Tuple[int, str]]:
    """(id, email) of pledges with an address that were never notified."""
    stmt = (
        select(Pledge.id, Pledge.email)
        .where(
            Pledge.campaign == campaign_key,
            Pledge.notified_at.is_(None),
            Pledge.email.is_not(None),
        )
        .order_by(Pledge.id)
    )
    return [(row.id, row.email) for row in db.execute(stmt)]


def mark_pledge_notified(db: Session, pledge_id: int):
    db.execute(
        update(Pledge)
        .where(Pledge.id == pledge_id, Pledge.notified_at.is_(None))
        .values(notified_at=_utcnow())
        .execution_options(synchronize_session=False)
    )
    db.commit()


def mark_campaign_notified(db: Session, campaign_key: str):
    db.execute(
        update(Campaign)
        .where(Campaign.campaign == campaign_key)
        .values(status=CampaignStatus.NOTIFIED.value, notified_at=_utcnow())
        .execution_options(synchronize_session=False)
    )
    db.commit()


def notify_pledgers(db: Session, campaign: Campaign, mailer: Mailer, settings: Settings) -> int:
    """Email every pending pledger of a claimed campaign. Returns emails sent."""
    campaign_key = campaign.campaign
    pledges = pending_pledges(db, campaign_key)
    if not pledges:
        return 0

    message = render_campaign_email(campaign, settings.base_url)

    sent = 0
    for pledge_id, email in pledges:
        mailer.send(
            sender=settings.email_from,
            to=email,
            subject=message.subject,
            html=message.html,
        )
        mark_pledge_notified(db, pledge_id)
        sent += 1
        logger.debug("Pledger notified", campaign=campaign_key, pledge_id=pledge_id)

    return sent


@timed(logger)
def run_campaign_trigger(db: Session, mailer: Mailer, settings: Settings) -> TriggerSummary:
    """Run one trigger pass and return what it did."""
    summary = TriggerSummary()

    try:
        candidates = find_ready_campaigns(db)
        summary.checked = len(candidates)

        for campaign in candidates:
            campaign_key = campaign.campaign

            if not claim_campaign(db, campaign_key):
                logger.info("Campaign already claimed, skipping", campaign=campaign_key)
                continue

            summary.triggered += 1
            logger.info("Campaign triggered", campaign=campaign_key)

            sent = notify_pledgers(db, campaign, mailer, settings)
            mark_campaign_notified(db, campaign_key)

            summary.emails_sent += sent
            summary.campaigns.append(CampaignResult(campaign=campaign_key, emails_sent=sent))
            logger.info("Campaign notified", campaign=campaign_key, emails_sent=sent)

    except SQLAlchemyError as e:
        db.rollback()
        db_logger.error("Store failure, trigger run aborted", error=e, **_counts(summary))
        raise StoreError(f"Database error: {e}") from e
    except PledgeError as e:
        db.rollback()
        logger.error("Trigger run aborted", error=e, **_counts(summary))
        raise

    return summary


def _counts(summary: TriggerSummary) -> dict:
    return {
        "checked": summary.checked,
        "triggered": summary.triggered,
        "emails_sent": summary.emails_sent,
    }
