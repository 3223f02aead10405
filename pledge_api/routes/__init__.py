from .campaigns import router as campaigns_router
from .pledges import router as pledges_router

__all__ = [
    "campaigns_router",
    "pledges_router",
]
