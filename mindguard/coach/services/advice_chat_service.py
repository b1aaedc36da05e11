"""
Conversational advice service.

Relays a user's free-text message to the configured AI provider under a
supportive, non-diagnostic system prompt.
"""

import logging
from typing import Optional

from common.ai.base import AIProvider
from common.utils.exceptions import BadRequestException, ServiceUnavailableException

logger = logging.getLogger(__name__)


SYSTEM_PROMPT = """You are an empathetic mental health support assistant.

RULES:
- Do NOT diagnose any medical or mental health condition
- Do NOT prescribe medicines or treatments
- Do NOT claim to be a doctor
- Provide emotional support and general coping strategies only
- Encourage professional help if stress feels overwhelming
- If the user expresses hopelessness, panic, or distress, advise seeking help
- Keep responses calm, supportive, non-judgmental"""


class AdviceChatService:
    """
    Stateless single-turn advice chat.
    """

    MAX_MESSAGE_LENGTH = 2000

    def __init__(
        self,
        ai_provider: Optional[AIProvider],
        max_tokens: int = 512,
        temperature: float = 0.7,
    ):
        """
        Initialize AdviceChatService.

        Args:
            ai_provider: Provider to relay to; None when no API key is configured
            max_tokens: Maximum tokens in a reply
            temperature: Sampling temperature
        """
        self._ai = ai_provider
        self._max_tokens = max_tokens
        self._temperature = temperature

    @property
    def is_available(self) -> bool:
        return self._ai is not None

    async def reply(self, message: Optional[str]) -> str:
        """
        Get a supportive reply to ``message``.

        Raises:
            BadRequestException: Message is empty or too long
            ServiceUnavailableException: No provider, or the provider call failed
        """
        if message is None or not message.strip():
            raise BadRequestException("Message required", code="MESSAGE_REQUIRED")

        message = message.strip()
        if len(message) > self.MAX_MESSAGE_LENGTH:
            raise BadRequestException(
                f"Message cannot exceed {self.MAX_MESSAGE_LENGTH} characters",
                code="MESSAGE_TOO_LONG",
            )

        if self._ai is None:
            raise ServiceUnavailableException("AI service unavailable", code="AI_UNAVAILABLE")

        try:
            return await self._ai.chat(
                message=message,
                system_prompt=SYSTEM_PROMPT,
                max_tokens=self._max_tokens,
                temperature=self._temperature,
            )
        except Exception as e:
            logger.error(f"Advice chat provider call failed: {e}")
            raise ServiceUnavailableException(
                "AI service unavailable", code="AI_UNAVAILABLE"
            ) from e
