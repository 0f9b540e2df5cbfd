# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.validation import email_format, normalize_email
from ....domain.constants import UserFields


class CheckEmailAvailabilityUseCase:
    """Use case for checking whether an email is already registered"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
        self.check_format = email_format()

    async def execute(self, email: str) -> bool:
        """
        Returns:
            True if a user with this email exists

        Raises:
            ValidationFailed: If the email is malformed
        """
        email = normalize_email(email)
        self.check_format({UserFields.EMAIL: email})
        return await self.user_repository.find_by_email(email) is not None
