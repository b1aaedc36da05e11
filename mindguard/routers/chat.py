"""
FastAPI router for the advice chat endpoint.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from common.utils import success_response
from mindguard.coach.services.advice_chat_service import AdviceChatService
from mindguard.dependencies import get_advice_chat_service
from mindguard.schemas.chat import ChatRequest, ChatData
from mindguard.pipelines.chat import chat_pipeline

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])


@router.post("/gpt-chat")
async def chat(
    body: ChatRequest,
    advice_service: Annotated[AdviceChatService, Depends(get_advice_chat_service)],
):
    """
    Send a free-text message and get a supportive reply.

    Fails with 503 when the AI provider is unavailable; check-ins are unaffected.
    """
    result = await chat_pipeline(advice_service, body.message)
    return success_response(ChatData(**result).model_dump())
