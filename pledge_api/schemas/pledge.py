from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class PledgeCreate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    pledge_campaign: Optional[str] = None


class PledgeCreated(BaseModel):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True


class PledgeCount(BaseModel):
    count: int
