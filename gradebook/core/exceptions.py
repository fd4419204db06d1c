from enum import Enum
from typing import Any, Dict, Optional
from fastapi import status

class BaseAPIException(Exception):
    """
    Base class for every custom error raised by the service.
    Keeps the error format returned to clients uniform.
    """
    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

# =========================================================
# 1. COMMON ERRORS
# =========================================================

class BadRequestException(BaseAPIException):
    """400: the request is invalid (logic error, conflicting data...)"""
    def __init__(self, message: str = "Bad Request", details: dict = None):
        super().__init__(
            message=message,
            code="BAD_REQUEST",
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details
        )

class NotFoundException(BaseAPIException):
    """404: resource not found"""
    def __init__(self, message: str = "Resource not found", details: dict = None):
        super().__init__(
            message=message,
            code="NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND,
            details=details
        )

# =========================================================
# 2. GRADEBOOK DOMAIN ERRORS
# =========================================================

class NotFoundReason(str, Enum):
    STUDENT = "student_not_found"
    GRADE = "grade_not_found"
    SUBJECT = "unknown_subject"


class StudentOrGradeNotFoundException(NotFoundException):
    """
    404: a student id, a grade id or a subject tag did not resolve.

    Clients always receive the same message; ``reason`` tells the three
    causes apart for logs and tests.
    """
    MESSAGE = "Student or Grade was not found"

    def __init__(self, reason: NotFoundReason, details: dict = None):
        self.reason = reason
        super().__init__(message=self.MESSAGE, details=details)
