"""
Response envelopes.

Success:  {"success": true, "data": ..., "message": ...}
Error:    {"success": false, "error": {"message", "code", "details"}}
"""

from typing import Any, Optional, Dict


def success_response(
    data: Any = None,
    message: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Wrap data in the success envelope.

    Args:
        data: Response payload; omitted when None
        message: Optional user-facing notice (toast text, fallback notice)
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
) -> Dict[str, Any]:
    """
    Build the error envelope.

    Args:
        message: Human-readable error message
        code: Machine-readable error code (e.g. "INVALID_QUEST_STATE")
        details: Additional error details
    """
    error: Dict[str, Any] = {"message": message}

    if code:
        error["code"] = code

    if details is not None:
        error["details"] = details

    return {"success": False, "error": error}
