# Standard library imports
import logging
from datetime import datetime, timezone

# Local application imports
from ....core.exceptions import HashingError, InvalidCredentials
from ....core.security import PasswordHasher, TokenService
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields
from ....domain.validation import normalize_email
from ...dto.auth_dto import AuthResult, UserLoginRequest
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT token"""

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ) -> None:
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def execute(self, request: UserLoginRequest) -> AuthResult:
        """
        Authenticate user and generate access token

        Args:
            request: Login request with email and password

        Returns:
            AuthResult with a login token and the user

        Raises:
            InvalidCredentials: If the email is unknown or the password is
                wrong (same error either way)
        """
        email = normalize_email(request.email)

        user = await self.user_repository.find_by_email(email)
        if user is None:
            logger.warning("Login failed: invalid credentials")
            raise InvalidCredentials()

        try:
            password_ok = self.password_hasher.verify(request.password, user.hashed_password)
        except HashingError:
            logger.error(f"Stored password digest for user {user.id} is malformed", exc_info=True)
            password_ok = False

        if not password_ok:
            logger.warning("Login failed: invalid credentials")
            raise InvalidCredentials()

        # Account status is tracked but does not gate login
        user = await self.user_repository.update(
            user.id, {UserFields.LAST_LOGIN: datetime.now(timezone.utc)}
        )
        logger.info(f"User {user.id} logged in")

        token = self.token_service.issue_access_token(user.id, user.email)
        return AuthResult(token=token, user=UserResponse.from_domain(user))
