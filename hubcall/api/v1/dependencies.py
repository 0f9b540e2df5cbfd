# Standard library imports
import logging
from typing import Optional

# External package imports
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.use_cases.auth.verify_token import VerifyTokenUseCase
from ...core.exceptions import ExpiredToken, InvalidToken
from ...di.container import get_container
from .errors import BEARER_CHALLENGE

logger = logging.getLogger(__name__)

security_scheme = HTTPBearer(auto_error=False)


def _unauthorized(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail={"message": message},
        headers=BEARER_CHALLENGE,
    )


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> str:
    """
    FastAPI dependency to authorize a request from its bearer token

    Args:
        credentials: HTTP Bearer token credentials, if any

    Returns:
        ID of the authenticated user

    Raises:
        HTTPException: 401 if the token is missing, expired or invalid
    """
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Access denied. No token provided.")

    container = get_container()
    verify_token_use_case = container.get(VerifyTokenUseCase)

    try:
        return await verify_token_use_case.execute(credentials.credentials)
    except ExpiredToken as exception:
        raise _unauthorized(exception.user_message)
    except InvalidToken as exception:
        logger.info(f"Rejected bearer token: {exception.message}")
        raise _unauthorized(exception.user_message)
