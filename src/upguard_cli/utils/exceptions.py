"""Custom exceptions for upguard_cli.

Exceptions shared between the API layer and the CLI. The API layer raises
them; the CLI catches each category and reports it.
"""


class UpGuardCliError(Exception):
    """Base exception for all upguard_cli errors.

    All custom exceptions in the project should inherit from this base class.
    """
    pass


class UsageError(UpGuardCliError):
    """Caller supplied an invalid combination of parameters.

    Raised when:
    - Neither a relative path nor a full URL is given to the dispatcher
    - Both a relative path and a full URL are given to the dispatcher

    No network I/O is attempted before this is raised.
    """
    pass


class ApiError(UpGuardCliError):
    """Error envelope for a failed API call.

    Raised when:
    - API returns a non-success status code
    - API returns a body that cannot be decoded as expected

    Attributes:
        status: HTTP status code returned by the server
        message: Server-supplied error message (or raw body fallback)
    """

    def __init__(self, status, message):
        self.status = status
        self.message = message
        super().__init__(f"HTTP {status}: {message}")


class TransportError(UpGuardCliError):
    """Network-level failure before any HTTP status was received.

    Raised when:
    - DNS resolution fails
    - Connection is refused or reset
    - TLS handshake fails
    - Transport timeout occurs
    """
    pass


class ConfigurationError(UpGuardCliError):
    """Configuration file or settings error.

    Raised when:
    - Configuration file cannot be loaded
    - Required credentials are missing
    - Configuration values are not recognized
    """
    pass


class DataNotFoundError(UpGuardCliError):
    """Requested data not found.

    Raised when:
    - Node group lookup returns no id
    """
    pass


class ValidationError(UpGuardCliError):
    """Data validation error.

    Raised when:
    - A filter value is not one of the accepted values
    """
    pass


__all__ = [
    'UpGuardCliError',
    'UsageError',
    'ApiError',
    'TransportError',
    'ConfigurationError',
    'DataNotFoundError',
    'ValidationError',
]
