"""
Pledge model: one person's commitment to a campaign.
"""
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey

from ..database import Base


class Pledge(Base):
    __tablename__ = "pledges"

    id = Column(Integer, primary_key=True, index=True)
    campaign = Column(String(100), ForeignKey("campaigns.campaign"), nullable=False, index=True)
    name = Column(String(200), nullable=True)
    email = Column(String(320), nullable=True)
    city = Column(String(200), nullable=True)
    country = Column(String(200), nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    notified_at = Column(DateTime, nullable=True, index=True)  # null until the trigger email went out
