from .auth import (
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

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "CheckEmailAvailabilityUseCase",
    "GetProfileUseCase",
    "UpdateProfileUseCase",
    "ForgotPasswordUseCase",
    "ResetPasswordUseCase",
    "ChangePasswordUseCase",
    "VerifyTokenUseCase",
    "LogoutUserUseCase",
]
