from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ...domain.models.user import User


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(alias="_id")
    first_name: str
    last_name: str
    full_name: str
    email: str
    mobile: str
    age: int
    profile_picture: Optional[str] = None
    status: str
    is_verified: bool = False
    last_login: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id or "",
            first_name=user.first_name,
            last_name=user.last_name,
            full_name=user.full_name,
            email=user.email,
            mobile=user.mobile,
            age=user.age,
            profile_picture=user.profile_picture,
            status=user.status.value,
            is_verified=user.is_verified,
            last_login=user.last_login,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def to_public_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class ProfileUpdateRequest(BaseModel):
    """DTO for a partial profile update; unset fields stay untouched"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    age: Optional[int | str] = None
    profile_picture: Optional[str] = None

    def to_patch(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)


class ProfileResponse(BaseModel):
    """DTO wrapping the current user's profile"""
    success: bool = True
    message: Optional[str] = None
    user: UserResponse
