"""
MindGuard API Routers.
"""

from mindguard.routers.checkin import router as checkin_router
from mindguard.routers.chat import router as chat_router

__all__ = [
    "checkin_router",
    "chat_router",
]
