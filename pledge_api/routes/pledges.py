"""
Pledge submission and counting routes.
"""
from fastapi import APIRouter, Body, Depends, Request
from pydantic import ValidationError
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Any, Optional

from ..config import get_settings
from ..database import get_db
from ..limiter import limiter
from ..logging_config import api_logger
from ..models.campaign import Campaign
from ..models.pledge import Pledge
from ..responses import error_response
from ..schemas.pledge import PledgeCount, PledgeCreate, PledgeCreated

settings = get_settings()

router = APIRouter(prefix="/api", tags=["pledges"])


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


@router.post("/pledges", status_code=201, response_model=PledgeCreated)
@limiter.limit(settings.pledge_rate_limit)
def create_pledge(
    request: Request,
    payload: Any = Body(None),
    db: Session = Depends(get_db),
):
    """Record a pledge for a campaign (defaults to the current campaign)."""
    try:
        pledge_data = PledgeCreate.model_validate(payload or {})
    except ValidationError:
        return error_response(400, "Name and email are required")

    name = _clean(pledge_data.name)
    email = _clean(pledge_data.email)
    if not name or not email:
        return error_response(400, "Name and email are required")

    campaign_key = _clean(pledge_data.pledge_campaign) or settings.default_campaign

    try:
        if db.get(Campaign, campaign_key) is None:
            return error_response(404, f"Campaign '{campaign_key}' not found")

        pledge = Pledge(
            campaign=campaign_key,
            name=name,
            email=email,
            city=_clean(pledge_data.city),
            country=_clean(pledge_data.country),
        )
        db.add(pledge)
        db.commit()
        db.refresh(pledge)
    except SQLAlchemyError as e:
        db.rollback()
        api_logger.error("Error inserting pledge", error=e, campaign=campaign_key)
        return error_response(500, "Internal server error")

    api_logger.info("Pledge recorded", campaign=campaign_key, pledge_id=pledge.id)
    return PledgeCreated.model_validate(pledge)


@router.get("/pledges-count", response_model=PledgeCount)
def get_pledge_count(
    campaign: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """Number of pledges made to a campaign."""
    campaign_key = campaign or settings.default_campaign
    try:
        count = db.scalar(
            select(func.count(Pledge.id)).where(Pledge.campaign == campaign_key)
        )
    except SQLAlchemyError as e:
        api_logger.error("Error getting pledge count", error=e, campaign=campaign_key)
        return error_response(500, "Internal server error")

    return PledgeCount(count=count or 0)
