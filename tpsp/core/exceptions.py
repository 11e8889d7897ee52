"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Every error is terminal for the CLI: it is printed to stderr and the
process exits with status 1.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class NetworkError(ApplicationError):
    """Raised when the HTTP request cannot complete."""

    def __init__(self, message: str = "Failed to fetch data") -> None:
        super().__init__(message, code="NET_REQUEST_FAILED")


class StatusError(ApplicationError):
    """Raised when the status API answers with a non-200 status."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"API returned status {status_code}", code="API_BAD_STATUS")


class ParseError(ApplicationError):
    """Raised when the response body is not the expected JSON document."""

    def __init__(self, message: str = "Failed to parse response") -> None:
        super().__init__(message, code="API_PARSE_ERROR")


class UnsuccessfulResponseError(ApplicationError):
    """Raised when the status API reports an unsuccessful status."""

    def __init__(self, message: str = "API returned unsuccessful status") -> None:
        super().__init__(message, code="API_UNSUCCESSFUL")


class InvalidServiceError(ApplicationError):
    """Raised when the requested service is not a known operator."""

    def __init__(self, service: str, valid_services: tuple[str, ...]) -> None:
        self.service = service
        self.valid_services = valid_services
        super().__init__(f"invalid service '{service}'", code="VAL_INVALID_SERVICE")


class EmptyResultError(ApplicationError):
    """Raised when no line matches the request."""

    def __init__(self, message: str = "no lines found") -> None:
        super().__init__(message, code="RES_EMPTY")


class ConfigurationError(ApplicationError):
    """Raised when a settings file or TPSP_* override is invalid."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message, code="SYS_CONFIGURATION_ERROR")
