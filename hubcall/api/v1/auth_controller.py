# Standard library imports
from datetime import datetime, timezone

# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.auth_dto import (
    AuthResponse,
    ChangePasswordRequest,
    EmailAvailabilityResponse,
    ForgotPasswordRequest,
    MessageResponse,
    ResetPasswordRequest,
    ResetTokenResponse,
    UserLoginRequest,
    UserRegistrationRequest,
)
from ...application.dto.user_dto import ProfileResponse, ProfileUpdateRequest
from ...application.use_cases.auth import (
    ChangePasswordUseCase,
    CheckEmailAvailabilityUseCase,
    ForgotPasswordUseCase,
    GetProfileUseCase,
    LoginUserUseCase,
    LogoutUserUseCase,
    RegisterUserUseCase,
    ResetPasswordUseCase,
    UpdateProfileUseCase,
)
from ...core.exceptions import AccountError
from ...di.container import get_container
from .dependencies import get_current_user_id
from .errors import to_http_exception


router = APIRouter(tags=["authentication"])


@router.get("/")
async def auth_index() -> dict:
    return {
        "success": True,
        "message": "HUB CALL Authentication API",
        "version": "1.0.0",
    }


@router.get("/health")
async def auth_health() -> dict:
    return {
        "success": True,
        "message": "Auth service is healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register_user(request: UserRegistrationRequest) -> AuthResponse:
    """
    Register a new user

    Args:
        request: User registration request

    Returns:
        AuthResponse with a login token and the created user
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)

    try:
        result = await register_use_case.execute(request)
    except AccountError as exception:
        raise to_http_exception(exception)

    return AuthResponse(
        message="User registered successfully",
        token=result.token,
        user=result.user,
    )


@router.post("/login", response_model=AuthResponse)
async def login_user(request: UserLoginRequest) -> AuthResponse:
    """
    Authenticate user and get access token

    Args:
        request: User login request

    Returns:
        AuthResponse with a login token and the user
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)

    try:
        result = await login_use_case.execute(request)
    except AccountError as exception:
        raise to_http_exception(exception)

    return AuthResponse(
        message="Login successful",
        token=result.token,
        user=result.user,
    )


@router.get("/check-email/{email}", response_model=EmailAvailabilityResponse)
async def check_email(email: str) -> EmailAvailabilityResponse:
    """Tell whether an email is already registered"""
    container = get_container()
    check_email_use_case = container.get(CheckEmailAvailabilityUseCase)

    try:
        exists = await check_email_use_case.execute(email)
    except AccountError as exception:
        raise to_http_exception(exception)

    return EmailAvailabilityResponse(
        exists=exists,
        message="Email already registered" if exists else "Email is available",
    )


@router.get("/profile", response_model=ProfileResponse)
async def get_profile(user_id: str = Depends(get_current_user_id)) -> ProfileResponse:
    """
    Get current authenticated user information

    Args:
        user_id: Current authenticated user ID (from dependency)

    Returns:
        ProfileResponse with user information
    """
    container = get_container()
    get_profile_use_case = container.get(GetProfileUseCase)

    try:
        user = await get_profile_use_case.execute(user_id)
    except AccountError as exception:
        raise to_http_exception(exception)

    return ProfileResponse(user=user)


@router.put("/profile", response_model=ProfileResponse)
async def update_profile(
    request: ProfileUpdateRequest,
    user_id: str = Depends(get_current_user_id),
) -> ProfileResponse:
    """Update first name, last name, age or profile picture"""
    container = get_container()
    update_profile_use_case = container.get(UpdateProfileUseCase)

    try:
        user = await update_profile_use_case.execute(user_id, request)
    except AccountError as exception:
        raise to_http_exception(exception)

    return ProfileResponse(message="Profile updated successfully", user=user)


@router.post("/forgot-password", response_model=ResetTokenResponse)
async def forgot_password(request: ForgotPasswordRequest) -> ResetTokenResponse:
    """
    Issue a password reset token.

    The token is returned in the response body; no email is sent.
    """
    container = get_container()
    forgot_password_use_case = container.get(ForgotPasswordUseCase)

    try:
        reset_token = await forgot_password_use_case.execute(request.email)
    except AccountError as exception:
        raise to_http_exception(exception)

    return ResetTokenResponse(
        message="Password reset token generated",
        reset_token=reset_token,
    )


@router.post("/reset-password", response_model=MessageResponse)
async def reset_password(request: ResetPasswordRequest) -> MessageResponse:
    """Set a new password using a reset token"""
    container = get_container()
    reset_password_use_case = container.get(ResetPasswordUseCase)

    try:
        await reset_password_use_case.execute(request)
    except AccountError as exception:
        raise to_http_exception(exception)

    return MessageResponse(message="Password reset successfully")


@router.put("/change-password", response_model=MessageResponse)
async def change_password(
    request: ChangePasswordRequest,
    user_id: str = Depends(get_current_user_id),
) -> MessageResponse:
    """Change the password of the authenticated user"""
    container = get_container()
    change_password_use_case = container.get(ChangePasswordUseCase)

    try:
        await change_password_use_case.execute(user_id, request)
    except AccountError as exception:
        raise to_http_exception(exception)

    return MessageResponse(message="Password changed successfully")


@router.post("/logout", response_model=MessageResponse)
async def logout_user(user_id: str = Depends(get_current_user_id)) -> MessageResponse:
    """
    Log out the authenticated user.

    Tokens are not revoked server-side; the client must discard its token.
    """
    container = get_container()
    logout_use_case = container.get(LogoutUserUseCase)

    try:
        await logout_use_case.execute(user_id)
    except AccountError as exception:
        raise to_http_exception(exception)

    return MessageResponse(message="Logged out successfully")
