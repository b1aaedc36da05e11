"""
Standard API response helpers.

Every endpoint wraps its payload in the same envelope so clients can
branch on the ``success`` flag alone.

Example:
    from common.utils import success_response

    @router.get("/users/{user_id}/streak")
    async def get_streak(user_id: str):
        return success_response({"currentStreak": 3})
"""

from typing import Any, Optional, Dict


def success_response(
    data: Any = None,
    message: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Create a standard success response.

    Args:
        data: The response data (dict, list, or any serializable type)
        message: Optional success message

    Returns:
        Dictionary with success=True and optional data/message
    """
    response: Dict[str, Any] = {"success": True}

    if data is not None:
        response["data"] = data

    if message:
        response["message"] = message

    return response


def error_response(
    message: str,
    code: Optional[str] = None,
    details: Optional[Any] = None,
    errors: Optional[list] = None,
) -> Dict[str, Any]:
    """
    Create a standard error response.

    Args:
        message: Human-readable error message
        code: Machine-readable error code (e.g., "CLOCK_SKEW")
        details: Additional error details
        errors: List of specific errors (for request validation)

    Returns:
        Dictionary with success=False and error info
    """
    error: Dict[str, Any] = {"message": message}

    if code:
        error["code"] = code

    if details is not None:
        error["details"] = details

    if errors:
        error["errors"] = errors

    return {"success": False, "error": error}


def paginated_response(
    items: list,
    total: int,
    limit: int,
    offset: int = 0,
    message: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Create an offset-paginated success response.

    Args:
        items: Items on the current page
        total: Total number of items across all pages
        limit: Page size that was applied
        offset: Number of items skipped
        message: Optional success message

    Returns:
        Dictionary with success=True, items and pagination metadata
    """
    response: Dict[str, Any] = {
        "success": True,
        "data": items,
        "pagination": {
            "limit": limit,
            "offset": offset,
            "total": total,
            "hasMore": (offset + len(items)) < total,
        },
    }

    if message:
        response["message"] = message

    return response
