class DomainError(Exception):
    """Base exception for business rule violations."""

    code = "domain_error"


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    code = "invalid_input"


class MissingFieldError(ValidationError):
    """Raised when a required field is absent or empty."""

    code = "missing_fields"

    def __init__(self, message: str = "Missing required fields"):
        super().__init__(message)


class AlreadyCheckedInError(DomainError):
    """Raised when the (name, team, type, date) slot already has a check-in."""

    code = "already_checked_in"

    def __init__(self, message: str = "今日已打卡"):
        super().__init__(message)


class StorageError(DomainError):
    """Raised when the record store fails unexpectedly."""

    code = "storage_failure"


class NetworkError(DomainError):
    """Raised by the HTTP client when the server cannot be reached."""

    code = "network_failure"
