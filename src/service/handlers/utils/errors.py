"""
Error types for the status endpoint handlers.

Handlers raise these from their request path and convert them into HTTP
responses in one place. Each error carries a fixed user-facing message;
upstream detail stays in the logs.
"""

import uuid
from enum import Enum
from typing import Any, Dict, Optional


class ErrorCategory(str, Enum):
    """Error categories for classification."""
    VALIDATION = "VALIDATION"
    NOT_FOUND = "NOT_FOUND"
    EXTERNAL_SERVICE = "EXTERNAL_SERVICE"
    INFRASTRUCTURE = "INFRASTRUCTURE"


class StatusEndpointError(Exception):
    """Base exception class for handler errors."""

    status_code: int = 500
    category: ErrorCategory = ErrorCategory.INFRASTRUCTURE

    def __init__(
        self,
        message: str,
        user_message: str = "Internal server error",
        cache_max_age: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message
        self.cache_max_age = cache_max_age
        self.error_id = str(uuid.uuid4())

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for structured logging."""
        return {
            "error_id": self.error_id,
            "error_type": type(self).__name__,
            "category": self.category.value,
            "status_code": self.status_code,
            "error_message": self.message,
            "user_message": self.user_message,
        }


class MissingParameterError(StatusEndpointError):
    """Raised when a required query string parameter is absent or empty."""

    status_code = 400
    category = ErrorCategory.VALIDATION

    def __init__(self, parameter: str):
        super().__init__(
            message=f"Missing required query parameter '{parameter}'",
            user_message=f"{parameter} is required",
        )
        self.parameter = parameter


class UpstreamNotFoundError(StatusEndpointError):
    """Raised when the upstream API answers with a non-success HTTP status."""

    status_code = 404
    category = ErrorCategory.NOT_FOUND

    def __init__(
        self,
        service_name: str,
        upstream_status: int,
        user_message: str,
        cache_max_age: Optional[int] = None,
    ):
        super().__init__(
            message=f"{service_name} responded with HTTP {upstream_status}",
            user_message=user_message,
            cache_max_age=cache_max_age,
        )
        self.service_name = service_name
        self.upstream_status = upstream_status


class UpstreamServiceError(StatusEndpointError):
    """Raised when the upstream API fails or reports an internal failure."""

    status_code = 500
    category = ErrorCategory.EXTERNAL_SERVICE

    def __init__(self, service_name: str, message: str, user_message: str):
        super().__init__(message=message, user_message=user_message)
        self.service_name = service_name
