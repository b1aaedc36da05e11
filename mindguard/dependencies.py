"""
FastAPI dependencies for the MindGuard application.

Services are created once at startup by ``init_all_services`` and handed
to routers through the ``get_*`` getters.
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from common.ai import AIProvider, ClaudeProvider, OpenAIProvider
from mindguard.clock import SystemClock
from mindguard.coach.services.advice_chat_service import AdviceChatService
from mindguard.config import Settings
from mindguard.engagement.services.streak_store import (
    StreakStore,
    MongoStreakStore,
    InMemoryStreakStore,
)
from mindguard.stress.services.report_service import StressReportService
from mindguard.stress.services.stress_analytics import StressAnalytics

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────
# Global service instances
# ─────────────────────────────────────────────────────────────────

_clock: Optional[SystemClock] = None
_streak_store: Optional[StreakStore] = None
_report_service: Optional[StressReportService] = None
_stress_analytics: Optional[StressAnalytics] = None
_advice_chat_service: Optional[AdviceChatService] = None


def build_ai_provider(settings: Settings) -> Optional[AIProvider]:
    """
    Create the configured AI provider.

    Returns None when the provider's API key is missing; advice chat then
    answers with 503 while check-ins keep working.
    """
    api_key = settings.get_ai_api_key()
    if not api_key:
        logger.warning(f"No API key for AI provider '{settings.AI_PROVIDER}', advice chat disabled")
        return None

    if settings.AI_PROVIDER == "claude":
        return ClaudeProvider(api_key=api_key, model=settings.CLAUDE_MODEL)
    return OpenAIProvider(api_key=api_key, model=settings.OPENAI_MODEL)


def init_all_services(
    db: AsyncIOMotorDatabase,
    settings: Settings,
    ai_provider: Optional[AIProvider] = None,
    streak_store: Optional[StreakStore] = None,
    clock: Optional[SystemClock] = None,
) -> None:
    """
    Initialize all services.

    Called once at application startup.

    Args:
        db: MongoDB database connection
        settings: Application settings
        ai_provider: Provider for advice chat (None disables it)
        streak_store: Override for the streak store (defaults to STREAK_STORE)
        clock: Override for the wall clock
    """
    global _clock, _streak_store, _report_service, _stress_analytics, _advice_chat_service

    _clock = clock or SystemClock(settings.CHECKIN_TIMEZONE)
    if streak_store is not None:
        _streak_store = streak_store
    elif settings.STREAK_STORE == "memory":
        logger.warning("Using in-memory streak store, streaks are lost on restart")
        _streak_store = InMemoryStreakStore()
    else:
        _streak_store = MongoStreakStore(db)
    _report_service = StressReportService(db, max_limit=settings.MAX_HISTORY_LIMIT)
    _stress_analytics = StressAnalytics(report_service=_report_service)
    _advice_chat_service = AdviceChatService(
        ai_provider=ai_provider,
        max_tokens=settings.ADVICE_MAX_TOKENS,
        temperature=settings.ADVICE_TEMPERATURE,
    )

    logger.info("All services initialized")


def get_clock() -> SystemClock:
    """Get the wall clock."""
    if _clock is None:
        raise RuntimeError("Services not initialized. Call init_all_services first.")
    return _clock


def get_streak_store() -> StreakStore:
    """Get the streak store instance."""
    if _streak_store is None:
        raise RuntimeError("Services not initialized. Call init_all_services first.")
    return _streak_store


def get_report_service() -> StressReportService:
    """Get the stress report service instance."""
    if _report_service is None:
        raise RuntimeError("Services not initialized. Call init_all_services first.")
    return _report_service


def get_stress_analytics() -> StressAnalytics:
    """Get the stress analytics instance."""
    if _stress_analytics is None:
        raise RuntimeError("Services not initialized. Call init_all_services first.")
    return _stress_analytics


def get_advice_chat_service() -> AdviceChatService:
    """Get the advice chat service instance."""
    if _advice_chat_service is None:
        raise RuntimeError("Services not initialized. Call init_all_services first.")
    return _advice_chat_service
