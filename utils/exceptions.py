"""
Exception classes for the query API clients.
"""
from typing import Optional


class QueryAPIError(Exception):
    """Base class for every error raised by the query API clients."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TransportError(QueryAPIError):
    """Exception raised when the HTTP request could not be completed."""

    def __init__(self, message: str, url: Optional[str] = None):
        """
        Initialize transport error.

        Args:
            message: Error message
            url: Request URL if available
        """
        super().__init__(message)
        self.url = url


class ServiceError(QueryAPIError):
    """
    Exception raised for a non-200 response from a query API.

    Only the first error of the response envelope is exposed.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        code: str = "",
        request_id: str = ""
    ):
        """
        Initialize service error.

        Args:
            message: Human readable message
            status_code: HTTP status code (403, 500, ...)
            code: Machine readable error code ("InvalidParameterValue", ...)
            request_id: Request id reported by the service
        """
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.request_id = request_id

    def __str__(self) -> str:
        if not self.code:
            return self.message
        return f"{self.message} ({self.code})"


class DecodeError(QueryAPIError):
    """Exception raised when a successful response body is not valid XML."""

    def __init__(self, message: str, shape: Optional[str] = None):
        """
        Initialize decode error.

        Args:
            message: Parser error message
            shape: Name of the response shape being decoded
        """
        super().__init__(message)
        self.shape = shape


class ConfigurationError(QueryAPIError):
    """Exception raised for unusable region or endpoint configuration."""

    def __init__(self, message: str, endpoint: Optional[str] = None):
        super().__init__(message)
        self.endpoint = endpoint
