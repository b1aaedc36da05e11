"""
Common library for reusable infrastructure components.

Generic modules shared by the MindGuard service:

- database: Async MongoDB connection manager (Motor)
- ai: Pluggable AI providers (OpenAI, Claude)
- utils: Standard responses and HTTP-aware exceptions
- config: Base settings class
"""

from common.database import MongoDB
from common.ai import AIProvider, ClaudeProvider, OpenAIProvider
from common.utils import (
    success_response,
    error_response,
    paginated_response,
    APIException,
    BadRequestException,
    ConflictException,
    ValidationException,
    ServiceUnavailableException,
)
from common.config import BaseAppSettings

__all__ = [
    # Database
    "MongoDB",
    # AI
    "AIProvider",
    "ClaudeProvider",
    "OpenAIProvider",
    # Utils
    "success_response",
    "error_response",
    "paginated_response",
    "APIException",
    "BadRequestException",
    "ConflictException",
    "ValidationException",
    "ServiceUnavailableException",
    # Config
    "BaseAppSettings",
]
