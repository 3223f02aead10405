from .campaign import Campaign, CampaignStatus
from .pledge import Pledge

__all__ = [
    "Campaign",
    "CampaignStatus",
    "Pledge",
]
