"""Advice chat services."""

from mindguard.coach.services.advice_chat_service import AdviceChatService, SYSTEM_PROMPT

__all__ = ["AdviceChatService", "SYSTEM_PROMPT"]
