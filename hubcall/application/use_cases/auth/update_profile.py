# Standard library imports
import logging
from typing import Any, Dict

# Local application imports
from ....core.exceptions import NotFound
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields
from ....domain.validation import normalize_name, parse_age, profile_patch_pipeline
from ...dto.user_dto import ProfileUpdateRequest, UserResponse

logger = logging.getLogger(__name__)


class UpdateProfileUseCase:
    """Use case for a partial update of the mutable profile fields"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
        self.pipeline = profile_patch_pipeline()

    async def execute(self, user_id: str, request: ProfileUpdateRequest) -> UserResponse:
        """
        Apply the fields present in the request

        Args:
            user_id: Subject of an already verified token
            request: Fields to change; absent fields are left untouched

        Returns:
            UserResponse with the updated profile

        Raises:
            ValidationFailed: If a present field breaks its rule
            NotFound: If the user no longer exists
        """
        patch = request.to_patch()
        self.pipeline.run(patch)

        if not patch:
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                raise NotFound("User")
            return UserResponse.from_domain(user)

        user = await self.user_repository.update(user_id, self._normalize(patch))
        logger.info(f"Updated profile fields {sorted(patch)} for user {user.id}")
        return UserResponse.from_domain(user)

    @staticmethod
    def _normalize(patch: Dict[str, Any]) -> Dict[str, Any]:
        changes = dict(patch)
        for name in (UserFields.FIRST_NAME, UserFields.LAST_NAME):
            if name in changes:
                changes[name] = normalize_name(changes[name])
        if UserFields.AGE in changes:
            changes[UserFields.AGE] = parse_age(changes[UserFields.AGE])
        if UserFields.PROFILE_PICTURE in changes:
            changes[UserFields.PROFILE_PICTURE] = (changes[UserFields.PROFILE_PICTURE] or "").strip() or None
        return changes
