from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from .user_dto import UserResponse


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_record(self) -> Dict[str, Any]:
        """Field values keyed by their wire names, for the validation rules"""
        return self.model_dump(by_alias=True)


class UserRegistrationRequest(_CamelModel):
    """
    DTO for user registration request.

    Types are kept loose: the registration use case runs the ordered,
    fail-fast field checks. Only shape errors are rejected here.
    """
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    mobile: Optional[str | int] = None
    age: Optional[int | str] = None
    password: Optional[str] = None
    confirm_password: Optional[str] = None
    terms_accepted: Optional[bool | str] = None


class UserLoginRequest(_CamelModel):
    """DTO for user login request"""
    email: EmailStr
    password: str = Field(min_length=1, max_length=256)


class ForgotPasswordRequest(_CamelModel):
    """DTO for forgot-password request"""
    email: EmailStr


class ResetPasswordRequest(_CamelModel):
    """DTO for reset-password request"""
    token: str = Field(min_length=1)
    new_password: Optional[str] = None
    confirm_password: Optional[str] = None


class ChangePasswordRequest(_CamelModel):
    """DTO for change-password request"""
    current_password: str = Field(min_length=1)
    new_password: Optional[str] = None
    confirm_password: Optional[str] = None


class AuthResult(BaseModel):
    """Token plus sanitized user, returned by register and login"""
    token: str
    user: UserResponse


class AuthResponse(BaseModel):
    """DTO for register/login response"""
    success: bool = True
    message: str
    token: str
    user: UserResponse


class EmailAvailabilityResponse(BaseModel):
    """DTO for check-email response"""
    success: bool = True
    exists: bool
    message: str


class ResetTokenResponse(BaseModel):
    """DTO for forgot-password response"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = True
    message: str
    reset_token: str


class MessageResponse(BaseModel):
    """DTO for responses that only carry a message"""
    success: bool = True
    message: str
