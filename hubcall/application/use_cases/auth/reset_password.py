# Standard library imports
import logging

# Local application imports
from ....core.exceptions import InvalidToken
from ....core.security import PasswordHasher, TokenPurpose, TokenService
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields
from ....domain.validation import ValidationPolicy, new_password_pipeline
from ...dto.auth_dto import ResetPasswordRequest

logger = logging.getLogger(__name__)


class ResetPasswordUseCase:
    """Use case for setting a new password with a reset token"""

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
        validation_policy: ValidationPolicy,
    ) -> None:
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.token_service = token_service
        self.pipeline = new_password_pipeline(validation_policy)

    async def execute(self, request: ResetPasswordRequest) -> None:
        """
        Replace the password of the token's subject

        Raises:
            ExpiredToken: If the reset token has expired
            InvalidToken: If the token is not a valid reset token or its
                user no longer exists
            ValidationFailed: If the new password is weak or unconfirmed
        """
        claims = self.token_service.verify(request.token, purpose=TokenPurpose.PASSWORD_RESET)
        self.pipeline.run(request.to_record())

        user = await self.user_repository.find_by_id(claims["sub"])
        if user is None:
            raise InvalidToken("Reset token subject no longer exists")

        await self.user_repository.update(
            user.id,
            {UserFields.HASHED_PASSWORD: self.password_hasher.hash(request.new_password)},
        )
        logger.info(f"Password reset for user {user.id}")
