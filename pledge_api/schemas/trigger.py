"""
Payloads returned by the campaign trigger.
"""
from pydantic import BaseModel, Field
from typing import List, Optional


class CampaignResult(BaseModel):
    """Emails sent for one claimed campaign."""
    campaign: str
    emails_sent: int = Field(0, alias="emailsSent")

    class Config:
        populate_by_name = True


class TriggerSummary(BaseModel):
    checked: int = 0
    triggered: int = 0
    emails_sent: int = Field(0, alias="emailsSent")
    campaigns: List[CampaignResult] = []

    class Config:
        populate_by_name = True


class TriggerResponse(BaseModel):
    success: bool
    summary: Optional[TriggerSummary] = None
    error: Optional[str] = None

    def to_payload(self) -> dict:
        """JSON body with camelCase keys and absent fields dropped."""
        return self.model_dump(by_alias=True, exclude_none=True)
