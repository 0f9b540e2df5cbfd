from .auth_dto import (
    UserRegistrationRequest,
    UserLoginRequest,
    ForgotPasswordRequest,
    ResetPasswordRequest,
    ChangePasswordRequest,
    AuthResult,
    AuthResponse,
    EmailAvailabilityResponse,
    ResetTokenResponse,
    MessageResponse,
)
from .user_dto import UserResponse, ProfileUpdateRequest, ProfileResponse

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "ForgotPasswordRequest",
    "ResetPasswordRequest",
    "ChangePasswordRequest",
    "AuthResult",
    "AuthResponse",
    "EmailAvailabilityResponse",
    "ResetTokenResponse",
    "MessageResponse",
    "UserResponse",
    "ProfileUpdateRequest",
    "ProfileResponse",
]
