"""
MindGuard application settings.

Extends the base settings with check-in and streak configuration.
"""

from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """MindGuard-specific settings."""

    # ==========================================================================
    # Check-in Settings
    # ==========================================================================
    # IANA zone used to decide which calendar day a check-in belongs to
    CHECKIN_TIMEZONE: str = "UTC"

    # Read-modify-write attempts for a streak update before giving up
    STREAK_MAX_ATTEMPTS: int = 3

    # "mongo" or "memory" (single-process, not persisted)
    STREAK_STORE: str = "mongo"

    # ==========================================================================
    # History & Analytics Settings
    # ==========================================================================
    TREND_LOOKBACK_DAYS: int = 30
    MAX_HISTORY_LIMIT: int = 90

    # ==========================================================================
    # Advice Chat Settings
    # ==========================================================================
    ADVICE_MAX_TOKENS: int = 512
    ADVICE_TEMPERATURE: float = 0.7


# Global settings instance
settings = Settings()
