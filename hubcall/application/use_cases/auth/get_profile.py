# Local application imports
from ....core.exceptions import NotFound
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse


class GetProfileUseCase:
    """Use case for reading the authenticated user's profile"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> UserResponse:
        """
        Get the profile of a verified user ID

        Args:
            user_id: Subject of an already verified token

        Returns:
            UserResponse with user information

        Raises:
            NotFound: If the user no longer exists
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFound("User")

        return UserResponse.from_domain(user)
