"""
HTTP exceptions with machine-readable error codes.

Each class extends FastAPI's HTTPException so routers can raise it
directly; the app-level handler renders it with error_response.

Example:
    from common.utils import NotFoundException, InvalidStateException

    def find_quest(quests, quest_id):
        for quest in quests:
            if quest.id == quest_id:
                return quest
        raise NotFoundException("Quest not found", code="QUEST_NOT_FOUND")
"""

from typing import Optional, Any, Dict
from fastapi import HTTPException


class APIException(HTTPException):
    """
    Base API exception carrying a message, a code and optional details.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        code: Optional[str] = None,
        details: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Create an API exception.

        Args:
            status_code: HTTP status code
            message: Human-readable error message
            code: Machine-readable error code
            details: Additional error details
            headers: Optional response headers
        """
        self.message = message
        self.code = code
        self.details = details

        detail: Dict[str, Any] = {"message": message}
        if code:
            detail["code"] = code
        if details is not None:
            detail["details"] = details

        super().__init__(status_code=status_code, detail=detail, headers=headers)

    def __str__(self) -> str:
        return f"{self.code}: {self.message}" if self.code else self.message


class NotFoundException(APIException):
    """404 - Unknown quest, milestone, task or tool."""

    def __init__(self, message: str = "Not found", code: str = "NOT_FOUND", details: Optional[Any] = None):
        super().__init__(404, message, code, details)


class ConflictException(APIException):
    """409 - Duplicate resource, or an operation already in progress."""

    def __init__(self, message: str = "Conflict", code: str = "CONFLICT", details: Optional[Any] = None):
        super().__init__(409, message, code, details)


class ValidationException(APIException):
    """422 - Input rejected by a lifecycle or toolkit operation."""

    def __init__(
        self,
        message: str = "Validation error",
        code: str = "VALIDATION_ERROR",
        details: Optional[Any] = None,
    ):
        super().__init__(422, message, code, details)


class InvalidStateException(ValidationException):
    """422 - Transition not allowed from the entity's current state."""

    def __init__(
        self,
        message: str = "Invalid state transition",
        code: str = "INVALID_STATE",
        current_state: Optional[str] = None,
    ):
        self.current_state = current_state
        details = {"currentState": current_state} if current_state else None
        super().__init__(message=message, code=code, details=details)


class ExternalServiceException(APIException):
    """502 - An upstream service failed or returned an unusable body."""

    def __init__(
        self,
        message: str = "External service error",
        code: str = "EXTERNAL_SERVICE_ERROR",
        details: Optional[Any] = None,
    ):
        super().__init__(502, message, code, details)
