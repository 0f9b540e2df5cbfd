from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from ..models.user import User


class UserRepository(ABC):
    """
    Repository interface - defines contract for user data access.

    Implementations enforce email/mobile uniqueness atomically and raise
    DuplicateField when an insert or update violates it. Lookups by email
    and mobile normalize their argument the same way writes do.
    """

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user, returning it with its generated ID"""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass

    @abstractmethod
    async def find_by_mobile(self, mobile: str) -> Optional[User]:
        """Find user by mobile number"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass

    @abstractmethod
    async def update(self, user_id: str, patch: Dict[str, Any]) -> User:
        """Apply a partial update keyed by document field names"""
        pass

    @abstractmethod
    async def ensure_indexes(self) -> None:
        """Create the unique indexes the store relies on"""
        pass
