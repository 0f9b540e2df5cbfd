"""
Custom exception hierarchy for the account core.

Raised by the hasher, token service, user repository and auth use cases.
Every failure carries a user-facing message so the HTTP layer can translate
it into a response without inspecting internals.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, List, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class AccountError(Exception):
    """Base exception for all account errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


class ValidationFailed(AccountError):
    """Raised on the first field that violates a validation rule."""

    def __init__(self, field: str, reason: str):
        super().__init__(
            f"{field} {reason}",
            details={"field": field, "reason": reason},
        )
        self.field = field
        self.reason = reason


class DuplicateField(AccountError):
    """Raised when a unique field (email, mobile) is already taken."""

    _MESSAGES = {
        "email": "Email already registered",
        "mobile": "Mobile number already registered",
    }

    def __init__(self, field: str):
        super().__init__(
            f"Duplicate value for {field}",
            user_message=self._MESSAGES.get(field, f"{field} already registered"),
            details={"field": field},
        )
        self.field = field


# -----------------------------------------------------------------------------
# Authentication
# -----------------------------------------------------------------------------


class InvalidCredentials(AccountError):
    """Login raises it with the same message whether the account is unknown or the password is wrong."""

    def __init__(self, message: str = "Invalid email or password") -> None:
        super().__init__(message)


class NotFound(AccountError):
    """Raised when a record no longer resolves."""

    def __init__(self, resource: str = "User"):
        super().__init__(f"{resource} not found", details={"resource": resource})
        self.resource = resource


class InvalidToken(AccountError):
    """Raised for tokens that cannot be trusted."""

    def __init__(self, message: str = "Invalid token.") -> None:
        super().__init__(message, user_message="Invalid token.")


class MalformedToken(InvalidToken):
    """Bad signature, bad structure, or wrong purpose."""
    pass


class ExpiredToken(AccountError):
    """Raised when a token is past its expiry."""

    def __init__(self) -> None:
        super().__init__("Token expired. Please login again.")


# -----------------------------------------------------------------------------
# Infrastructure
# -----------------------------------------------------------------------------


class StoreUnavailable(AccountError):
    """Raised when the user store cannot complete an operation."""

    def __init__(self, message: str = "User store unavailable") -> None:
        super().__init__(message, user_message="Service temporarily unavailable. Please try again.")


class HashingError(AccountError):
    """Raised when a stored digest is malformed or corrupt."""

    def __init__(self, message: str = "Malformed password digest") -> None:
        super().__init__(message, user_message="Server error. Please try again.")


class ConfigurationError(AccountError):
    """Raised at startup when required settings are missing."""

    def __init__(self, missing: List[str]):
        super().__init__(
            f"Missing required configuration: {', '.join(missing)}",
            details={"missing": list(missing)},
        )
        self.missing = list(missing)
