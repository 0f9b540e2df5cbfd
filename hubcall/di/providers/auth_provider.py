from typing import TYPE_CHECKING
from ...core.security import PasswordHasher, TokenService
from ...domain.repositories.user_repository import UserRepository
from ...domain.validation import ValidationPolicy
from ...application.use_cases.auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    CheckEmailAvailabilityUseCase,
    GetProfileUseCase,
    UpdateProfileUseCase,
    ForgotPasswordUseCase,
    ResetPasswordUseCase,
    ChangePasswordUseCase,
    VerifyTokenUseCase,
    LogoutUserUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Authentication use case provider - registers all auth-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all authentication use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            RegisterUserUseCase,
            lambda: RegisterUserUseCase(
                user_repository=container.get(UserRepository),
                password_hasher=container.get(PasswordHasher),
                token_service=container.get(TokenService),
                validation_policy=container.get(ValidationPolicy),
            )
        )

        container.register_factory(
            LoginUserUseCase,
            lambda: LoginUserUseCase(
                user_repository=container.get(UserRepository),
                password_hasher=container.get(PasswordHasher),
                token_service=container.get(TokenService),
            )
        )

        container.register_factory(
            CheckEmailAvailabilityUseCase,
            lambda: CheckEmailAvailabilityUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            GetProfileUseCase,
            lambda: GetProfileUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            UpdateProfileUseCase,
            lambda: UpdateProfileUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            ForgotPasswordUseCase,
            lambda: ForgotPasswordUseCase(
                user_repository=container.get(UserRepository),
                token_service=container.get(TokenService),
            )
        )

        container.register_factory(
            ResetPasswordUseCase,
            lambda: ResetPasswordUseCase(
                user_repository=container.get(UserRepository),
                password_hasher=container.get(PasswordHasher),
                token_service=container.get(TokenService),
                validation_policy=container.get(ValidationPolicy),
            )
        )

        container.register_factory(
            ChangePasswordUseCase,
            lambda: ChangePasswordUseCase(
                user_repository=container.get(UserRepository),
                password_hasher=container.get(PasswordHasher),
                validation_policy=container.get(ValidationPolicy),
            )
        )

        container.register_factory(
            VerifyTokenUseCase,
            lambda: VerifyTokenUseCase(
                token_service=container.get(TokenService)
            )
        )

        container.register_factory(
            LogoutUserUseCase,
            lambda: LogoutUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )
