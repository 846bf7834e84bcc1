"""
Custom exception classes for the application
"""
from typing import Optional, Dict, Any


class ResumeKitException(Exception):
    """Base exception for ResumeKit"""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(ResumeKitException):
    """Resource not found errors"""

    def __init__(self, resource: str, identifier: Optional[str] = None):
        message = f"{resource} not found"
        if identifier:
            message += f": {identifier}"
        super().__init__(message, status_code=404)


class ValidationError(ResumeKitException):
    """Invalid edits against the resume record"""

    def __init__(self, message: str = "Validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=422, details=details)


class ProcessingError(ResumeKitException):
    """File/resume processing errors"""

    def __init__(self, message: str = "Processing failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=422, details=details)


class AIEngineError(ResumeKitException):
    """Remote language-model extraction errors"""

    def __init__(self, message: str = "AI processing failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=502, details=details)
