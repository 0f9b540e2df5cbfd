# Standard library imports
import logging

# Local application imports
from ....core.exceptions import DuplicateField
from ....core.security import PasswordHasher, TokenService
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import AccountStatus, User
from ....domain.constants import UserFields
from ....domain.validation import (
    ValidationPolicy,
    normalize_email,
    normalize_mobile,
    normalize_name,
    parse_age,
    registration_pipeline,
)
from ...dto.auth_dto import AuthResult, UserRegistrationRequest
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""

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
        self.pipeline = registration_pipeline(validation_policy)

    async def execute(self, request: UserRegistrationRequest) -> AuthResult:
        """
        Register a new user

        Args:
            request: Registration request with user details

        Returns:
            AuthResult with a login token and the created user

        Raises:
            ValidationFailed: On the first field that breaks a rule
            DuplicateField: If email or mobile is already registered,
                including when a concurrent insert wins the race
        """
        self.pipeline.run(request.to_record())

        email = normalize_email(request.email)
        mobile = normalize_mobile(request.mobile)

        # Early, friendlier answers; the unique indexes remain authoritative
        if await self.user_repository.find_by_email(email) is not None:
            raise DuplicateField(UserFields.EMAIL)
        if await self.user_repository.find_by_mobile(mobile) is not None:
            raise DuplicateField(UserFields.MOBILE)

        new_user = User(
            id=None,  # Will be set by repository
            first_name=normalize_name(request.first_name),
            last_name=normalize_name(request.last_name),
            email=email,
            mobile=mobile,
            age=parse_age(request.age),
            hashed_password=self.password_hasher.hash(request.password),
            terms_accepted=True,
            status=AccountStatus.ACTIVE,
            is_verified=False,
        )

        saved_user = await self.user_repository.create(new_user)
        logger.info(f"Registered user {saved_user.id}")

        token = self.token_service.issue_access_token(saved_user.id, saved_user.email)
        return AuthResult(token=token, user=UserResponse.from_domain(saved_user))
