"""
Utilities module - Response envelopes and HTTP exceptions.
"""

from common.utils.responses import success_response, error_response
from common.utils.exceptions import (
    APIException,
    NotFoundException,
    ConflictException,
    ValidationException,
    InvalidStateException,
    ExternalServiceException,
)

__all__ = [
    "success_response",
    "error_response",
    "APIException",
    "NotFoundException",
    "ConflictException",
    "ValidationException",
    "InvalidStateException",
    "ExternalServiceException",
]
