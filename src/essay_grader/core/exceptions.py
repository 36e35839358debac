"""
Custom Exception Classes

Application-specific exception classes for the essay grading system.
The grading core itself never raises; these cover file loading,
state persistence and misuse of the session state machine.
"""

from typing import Optional, Any, Dict


class EssayGraderException(Exception):
    """Base exception class for all essay-grader errors."""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
    
    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(EssayGraderException):
    """Raised when the application configuration cannot be loaded."""
    pass


class ContentError(EssayGraderException):
    """Raised when a content file cannot be read or is not a mapping."""
    
    def __init__(self, message: str, content_path: Optional[str] = None, **kwargs):
        super().__init__(message, kwargs)
        self.content_path = content_path


class StateError(EssayGraderException):
    """Raised when state persistence or a session transition fails."""
    
    def __init__(self, message: str, state_id: Optional[str] = None, **kwargs):
        super().__init__(message, kwargs)
        self.state_id = state_id


class ValidationError(EssayGraderException):
    """Raised when a single value fails validation."""
    
    def __init__(self, message: str, field_name: Optional[str] = None,
                 invalid_value: Optional[Any] = None, **kwargs):
        super().__init__(message, kwargs)
        self.field_name = field_name
        self.invalid_value = invalid_value
