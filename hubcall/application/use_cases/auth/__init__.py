from .register_user import RegisterUserUseCase
from .login_user import LoginUserUseCase
from .check_email import CheckEmailAvailabilityUseCase
from .get_profile import GetProfileUseCase
from .update_profile import UpdateProfileUseCase
from .forgot_password import ForgotPasswordUseCase
from .reset_password import ResetPasswordUseCase
from .change_password import ChangePasswordUseCase
from .verify_token import VerifyTokenUseCase
from .logout_user import LogoutUserUseCase

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
