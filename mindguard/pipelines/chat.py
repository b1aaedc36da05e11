"""
Advice chat pipeline functions.
"""

from typing import Dict, Optional

from mindguard.coach.services.advice_chat_service import AdviceChatService


async def chat_pipeline(
    advice_service: AdviceChatService,
    message: Optional[str],
) -> Dict[str, str]:
    """
    Get a supportive reply for a free-text message.

    Returns:
        dict with the reply text
    """
    reply = await advice_service.reply(message)
    return {"reply": reply}
