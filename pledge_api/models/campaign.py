"""
Campaign model: a pledge drive with a threshold and a one-way status.
"""
import enum
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, Text, JSON

from ..database import Base


class CampaignStatus(str, enum.Enum):
    """Lifecycle states. Transitions only move forward."""
    COLLECTING = "collecting"
    TRIGGERED = "triggered"
    NOTIFIED = "notified"


class Campaign(Base):
    __tablename__ = "campaigns"

    campaign = Column(String(100), primary_key=True)
    name = Column(String(200), nullable=True)
    path = Column(String(500), nullable=True)  # page path appended to BASE_URL
    threshold = Column(Integer, nullable=False)
    status = Column(String(20), nullable=False, default=CampaignStatus.COLLECTING.value, index=True)
    triggered_at = Column(DateTime, nullable=True)
    notified_at = Column(DateTime, nullable=True)

    # Email copy
    email_subject = Column(String(500), nullable=True)
    email_intro = Column(Text, nullable=True)
    email_bullets = Column(JSON, nullable=True)  # ["...", "..."]
    email_cta_label = Column(String(200), nullable=True)

    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
