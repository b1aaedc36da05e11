"""
Advice Chat

Free-text supportive conversation backed by a pluggable AI provider.
Independent of the classifier's fixed advice.
"""

from mindguard.coach.services.advice_chat_service import AdviceChatService

__all__ = ["AdviceChatService"]
