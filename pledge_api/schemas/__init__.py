from .pledge import PledgeCreate, PledgeCreated, PledgeCount
from .trigger import CampaignResult, TriggerSummary, TriggerResponse

__all__ = [
    "PledgeCreate", "PledgeCreated", "PledgeCount",
    "CampaignResult", "TriggerSummary", "TriggerResponse",
]
