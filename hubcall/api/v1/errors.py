# Standard library imports
import logging
from typing import Dict, Tuple, Type

# External package imports
from fastapi import HTTPException, status

# Local application imports
from ...core.exceptions import (
    AccountError,
    DuplicateField,
    ExpiredToken,
    HashingError,
    InvalidCredentials,
    InvalidToken,
    NotFound,
    StoreUnavailable,
    ValidationFailed,
)

logger = logging.getLogger(__name__)

# Checked in order, so subclasses must come before their bases
STATUS_BY_ERROR: Tuple[Tuple[Type[AccountError], int], ...] = (
    (ValidationFailed, status.HTTP_400_BAD_REQUEST),
    (DuplicateField, status.HTTP_409_CONFLICT),
    (InvalidCredentials, status.HTTP_401_UNAUTHORIZED),
    (ExpiredToken, status.HTTP_401_UNAUTHORIZED),
    (InvalidToken, status.HTTP_401_UNAUTHORIZED),
    (NotFound, status.HTTP_404_NOT_FOUND),
    (StoreUnavailable, status.HTTP_503_SERVICE_UNAVAILABLE),
    (HashingError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)

BEARER_CHALLENGE: Dict[str, str] = {"WWW-Authenticate": "Bearer"}


def status_for(error: AccountError) -> int:
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def to_http_exception(error: AccountError) -> HTTPException:
    """
    Translate a core error into the HTTPException the client sees

    Args:
        error: Error raised by a use case

    Returns:
        HTTPException with a user-facing message and, for validation and
        duplicate errors, the offending field
    """
    status_code = status_for(error)
    if status_code >= 500:
        logger.error(f"{type(error).__name__}: {error.message}")

    detail: Dict[str, str] = {"message": error.user_message}
    if isinstance(error, (ValidationFailed, DuplicateField)):
        detail["field"] = error.field

    headers = BEARER_CHALLENGE if status_code == status.HTTP_401_UNAUTHORIZED else None
    return HTTPException(status_code=status_code, detail=detail, headers=headers)
