"""
Shared pytest fixtures for hubcall tests.
"""
import asyncio
import os
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from unittest.mock import MagicMock, patch

import pytest
from bson import ObjectId

from hubcall.core.exceptions import DuplicateField, NotFound
from hubcall.core.security import PasswordHasher, TokenService
from hubcall.domain.constants import UserFields
from hubcall.domain.models.user import User
from hubcall.domain.repositories.user_repository import UserRepository
from hubcall.domain.validation import (
    PasswordPolicy,
    ValidationPolicy,
    normalize_email,
    normalize_mobile,
)


TEST_SECRET = "test_jwt_secret"

_ATTRIBUTE_BY_FIELD = {
    UserFields.FIRST_NAME: "first_name",
    UserFields.LAST_NAME: "last_name",
    UserFields.EMAIL: "email",
    UserFields.MOBILE: "mobile",
    UserFields.AGE: "age",
    UserFields.HASHED_PASSWORD: "hashed_password",
    UserFields.PROFILE_PICTURE: "profile_picture",
    UserFields.STATUS: "status",
    UserFields.IS_VERIFIED: "is_verified",
    UserFields.LAST_LOGIN: "last_login",
    UserFields.UPDATED_AT: "updated_at",
}


class InMemoryUserRepository(UserRepository):
    """
    UserRepository fake with the same uniqueness contract as the Mongo one.

    Lookups yield to the event loop so concurrent callers interleave; the
    uniqueness check and the insert in create() run without a suspension
    point in between, like a unique index.
    """

    def __init__(self) -> None:
        self.users: Dict[str, User] = {}

    async def ensure_indexes(self) -> None:
        return None

    async def create(self, user: User) -> User:
        self._check_unique(user.email, user.mobile)
        now = datetime.now(timezone.utc)
        saved = replace(
            user,
            id=str(ObjectId()),
            email=normalize_email(user.email),
            mobile=normalize_mobile(user.mobile),
            created_at=now,
            updated_at=now,
        )
        self.users[saved.id] = saved
        return saved

    async def find_by_email(self, email: str) -> Optional[User]:
        await asyncio.sleep(0)
        email = normalize_email(email)
        return next((u for u in self.users.values() if u.email == email), None)

    async def find_by_mobile(self, mobile: str) -> Optional[User]:
        await asyncio.sleep(0)
        mobile = normalize_mobile(mobile)
        return next((u for u in self.users.values() if u.mobile == mobile), None)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        await asyncio.sleep(0)
        return self.users.get(user_id)

    async def update(self, user_id: str, patch: Dict[str, Any]) -> User:
        user = self.users.get(user_id)
        if user is None:
            raise NotFound("User")
        changes = {_ATTRIBUTE_BY_FIELD[k]: v for k, v in patch.items()}
        changes["updated_at"] = datetime.now(timezone.utc)
        updated = replace(user, **changes)
        self.users[user_id] = updated
        return updated

    def _check_unique(self, email: str, mobile: str) -> None:
        for existing in self.users.values():
            if existing.email == normalize_email(email):
                raise DuplicateField(UserFields.EMAIL)
            if existing.mobile == normalize_mobile(mobile):
                raise DuplicateField(UserFields.MOBILE)


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_hubcall_db",
        "JWT_SECRET": "test_secret_key_for_testing_only",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for code that reads process settings."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = TEST_SECRET
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_days = 7
    mock.reset_token_expire_minutes = 60
    mock.is_development = False

    with patch("hubcall.core.config.get_settings", return_value=mock), patch(
        "hubcall.main.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def password_hasher():
    """Low work factor keeps the suite fast."""
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_service():
    return TokenService(secret_key=TEST_SECRET)


@pytest.fixture
def validation_policy():
    return ValidationPolicy(
        password=PasswordPolicy(require_composition=True),
        allowed_email_domain="gmail.com",
    )


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def registration_payload():
    return {
        "firstName": "Ann",
        "lastName": "Lee",
        "email": "ann@gmail.com",
        "mobile": "9876543210",
        "age": 25,
        "password": "Abcd123!",
        "confirmPassword": "Abcd123!",
        "termsAccepted": True,
    }
