# Standard library imports
import logging

# Local application imports
from ....core.exceptions import NotFound
from ....domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class LogoutUserUseCase:
    """
    Use case for logging out.

    Sessions are stateless JWTs with no revocation list, so the token stays
    valid until it expires; the client is expected to discard it.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> None:
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFound("User")
        logger.info(f"User {user.id} logged out")
