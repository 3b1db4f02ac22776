"""
Error handling utilities for consistent error patterns across connection runs.

Defines the failure taxonomy for a run and simple helper functions that
standardize logging before an error is raised.
"""

import bittensor as bt
from typing import Any, Dict, Optional, Type


SENSITIVE_KEYS = ['api_key', 'token', 'password', 'secret', 'authorization']


class ConnectionRunError(Exception):
    """Base class for failures that abort a connection run."""


class EmptyInput(ConnectionRunError):
    """The identifier list is empty after blank entries are dropped."""


class ResolutionError(ConnectionRunError):
    """Resolving the followers of one identifier failed."""

    def __init__(self, message: str, identifier: Optional[str] = None):
        super().__init__(message)
        self.identifier = identifier


class AuthorizationFailure(ResolutionError):
    """The credential is missing or was rejected by the directory service."""


class TransientServiceFailure(ResolutionError):
    """Network failure, timeout, rate limiting or a server-side error."""


class IdentifierNotFound(ResolutionError):
    """The directory service does not know the identifier."""


def sanitize_params(params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Drop credential-like keys so they never reach the logs."""
    if not params:
        return {}
    return {k: v for k, v in params.items() if k.lower() not in SENSITIVE_KEYS}


def log_and_raise_api_error(
    error: Exception,
    endpoint: str,
    identifier: Optional[str] = None,
    params: Optional[Dict[str, Any]] = None,
    context: str = "API call",
    error_class: Type[ResolutionError] = ResolutionError
) -> None:
    """
    Log API error with context and raise a ResolutionError subclass.

    Args:
        error: The original exception (or a description of the bad response)
        endpoint: API endpoint that failed
        identifier: Identifier whose resolution failed
        params: Request parameters (will be sanitized)
        context: Additional context for the error
        error_class: ResolutionError subclass to raise

    Raises:
        ResolutionError: Always raises the requested subclass
    """
    bt.logging.error(
        f"{context} failed: {error}",
        extra={
            'endpoint': endpoint,
            'identifier': identifier,
            'params': sanitize_params(params),
            'error_type': type(error).__name__
        }
    )

    raise error_class(f"{context} failed for {endpoint}: {error}", identifier=identifier)


def log_and_raise_validation_error(
    message: str,
    data: Optional[Any] = None,
    error_class: Type[Exception] = ValueError
) -> None:
    """
    Log validation error with context and raise it.

    Args:
        message: Error message describing what validation failed
        data: Data that failed validation (will be truncated if large)
        error_class: Exception class to raise (default: ValueError)

    Raises:
        Exception: Always raises error_class with the message
    """
    safe_data = data
    if data and len(str(data)) > 200:
        safe_data = str(data)[:200] + "... (truncated)"

    bt.logging.error(
        f"Validation failed: {message}",
        extra={'validation_data': safe_data}
    )

    raise error_class(message)


class ErrorMessages:
    """Standard error messages for consistency."""

    CREDENTIALS_MISSING = "A GitHub token is required"
    CREDENTIALS_REJECTED = "GitHub rejected the token"
    API_RATE_LIMITED = "GitHub API rate limit exceeded"
    API_TIMEOUT = "GitHub API request timed out"
    API_CONNECTION_FAILED = "Failed to connect to GitHub API"
    API_INVALID_RESPONSE = "GitHub API returned invalid response"
    IDENTIFIER_NOT_FOUND = "User not found"
    EMPTY_INPUT = "No usernames given"
    RUN_IN_PROGRESS = "A connection run is already in progress"
