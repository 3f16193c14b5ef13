"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class LicenseException(DomainException):
    """Base exception for license-related errors."""

    pass


class LicenseNotFoundError(LicenseException):
    """Raised when a license is not found."""

    def __init__(self, message: str = "Invalid license"):
        super().__init__(message, code="NOT_FOUND")


class LicenseAlreadyClaimedError(LicenseException):
    """Raised when claiming a license that already has an owner."""

    def __init__(self, message: str = "License already claimed"):
        super().__init__(message, code="ALREADY_CLAIMED")


class InvalidConfigurationError(LicenseException):
    """Raised when the key generator cannot produce a usable key."""

    def __init__(self, message: str = "Invalid license key configuration"):
        super().__init__(message, code="INVALID_CONFIGURATION")


class InvalidArgumentError(DomainException):
    """Raised when an operation receives an unusable argument."""

    def __init__(self, message: str = "Invalid argument"):
        super().__init__(message, code="INVALID_ARGUMENT")


class AuthorizationException(DomainException):
    """Base exception for caller authorization errors."""

    pass


class InvalidTokenError(AuthorizationException):
    """Raised when a caller token does not resolve to an account."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message, code="INVALID_TOKEN")


class UnauthorizedError(AuthorizationException):
    """Raised when the caller's rank is below the required rank."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, code="UNAUTHORIZED")


class AccountException(DomainException):
    """Base exception for account-related errors."""

    pass


class UsernameTakenError(AccountException):
    """Raised when an account with the same username exists."""

    def __init__(self, message: str = "Username already taken"):
        super().__init__(message, code="USERNAME_TAKEN")


class InternalError(DomainException):
    """
    Generic failure surfaced to callers.

    Storage details are logged, never carried in the message.
    """

    def __init__(self, message: str = "Internal Server Error"):
        super().__init__(message, code="INTERNAL_ERROR")


class PersistenceError(Exception):
    """
    Raised by store adapters on database faults and timeouts.

    Not a DomainException: it must be translated to InternalError
    before it reaches a caller.
    """

    def __init__(self, operation: str, cause: Exception = None):
        super().__init__(f"Store operation '{operation}' failed: {cause!r}")
        self.operation = operation
        self.cause = cause
