from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class AccountStatus(str, Enum):
    """Lifecycle status of an account"""
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    first_name: str
    last_name: str
    email: str
    mobile: str
    age: int
    hashed_password: str
    terms_accepted: bool = True
    profile_picture: Optional[str] = None
    status: AccountStatus = AccountStatus.ACTIVE
    is_verified: bool = False
    last_login: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Business validations"""
        if not self.hashed_password:
            raise ValueError("Password hash is required")
        if self.terms_accepted is not True:
            raise ValueError("Terms and conditions must be accepted")
        if not isinstance(self.status, AccountStatus):
            self.status = AccountStatus(self.status)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
