# Standard library imports
import logging

# Local application imports
from ....core.exceptions import NotFound
from ....core.security import TokenService
from ....domain.repositories.user_repository import UserRepository
from ....domain.validation import normalize_email

logger = logging.getLogger(__name__)


class ForgotPasswordUseCase:
    """
    Use case for starting a password reset.

    The reset token is handed back to the caller; nothing is emailed.
    """

    def __init__(self, user_repository: UserRepository, token_service: TokenService) -> None:
        self.user_repository = user_repository
        self.token_service = token_service

    async def execute(self, email: str) -> str:
        """
        Issue a short-lived password-reset token

        Args:
            email: Email of the account to reset

        Returns:
            Reset-purpose JWT token

        Raises:
            NotFound: If no account uses this email
        """
        user = await self.user_repository.find_by_email(normalize_email(email))
        if user is None:
            raise NotFound("Email")

        logger.info(f"Password reset requested for user {user.id}")
        return self.token_service.issue_reset_token(user.id)
