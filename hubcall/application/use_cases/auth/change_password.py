# Standard library imports
import logging

# Local application imports
from ....core.exceptions import HashingError, InvalidCredentials, NotFound, ValidationFailed
from ....core.security import PasswordHasher
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields
from ....domain.validation import NEW_PASSWORD_FIELD, ValidationPolicy, new_password_pipeline
from ...dto.auth_dto import ChangePasswordRequest

logger = logging.getLogger(__name__)


class ChangePasswordUseCase:
    """Use case for changing the password of an authenticated user"""

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        validation_policy: ValidationPolicy,
    ) -> None:
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.pipeline = new_password_pipeline(validation_policy)

    async def execute(self, user_id: str, request: ChangePasswordRequest) -> None:
        """
        Verify the current password and store the new one

        Args:
            user_id: Subject of an already verified token
            request: Current, new and confirmation passwords

        Raises:
            NotFound: If the user no longer exists
            InvalidCredentials: If the current password is wrong
            ValidationFailed: If the new password is weak, unchanged or
                unconfirmed
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFound("User")

        try:
            current_ok = self.password_hasher.verify(request.current_password, user.hashed_password)
        except HashingError:
            logger.error(f"Stored password digest for user {user.id} is malformed", exc_info=True)
            current_ok = False
        if not current_ok:
            raise InvalidCredentials("Current password is incorrect")

        self.pipeline.run(request.to_record())
        if request.new_password == request.current_password:
            raise ValidationFailed(NEW_PASSWORD_FIELD, "must differ from current password")

        await self.user_repository.update(
            user.id,
            {UserFields.HASHED_PASSWORD: self.password_hasher.hash(request.new_password)},
        )
        logger.info(f"Password changed for user {user.id}")
