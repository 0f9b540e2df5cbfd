# Standard library imports
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...core.exceptions import DuplicateField, NotFound, StoreUnavailable
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import AccountStatus, User
from ...domain.constants import UserFields
from ...domain.validation import normalize_email, normalize_mobile
from .mongo_connection import get_user_collection

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def duplicate_field_from_error(error: DuplicateKeyError) -> str:
    """
    Work out which unique field an E11000 error refers to

    Args:
        error: The DuplicateKeyError raised by the driver

    Returns:
        Document field name (email or mobile)
    """
    details = error.details or {}
    for key in ("keyPattern", "keyValue"):
        fields = details.get(key) or {}
        for name in fields:
            if name in UserFields.UNIQUE_FIELDS:
                return name

    # Older servers only report the index name in the message
    message = str(error)
    for name in UserFields.UNIQUE_FIELDS:
        if f"{name}_1" in message or f"{{ {name}:" in message:
            return name
    return UserFields.EMAIL


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def ensure_indexes(self) -> None:
        """Create unique indexes on email and mobile"""
        try:
            for name in UserFields.UNIQUE_FIELDS:
                await self.user_collection.create_index([(name, ASCENDING)], unique=True)
        except PyMongoError as e:
            logger.error(f"Error creating user indexes: {e}", exc_info=True)
            raise StoreUnavailable(f"Error creating user indexes: {str(e)}")

    async def create(self, user: User) -> User:
        """
        Insert a new user

        Args:
            user: User domain model without an ID

        Returns:
            Saved User domain model with ID set

        Raises:
            DuplicateField: If email or mobile is already taken
            StoreUnavailable: On any other database error
        """
        if not user:
            raise ValueError("User cannot be None")

        user_dict = self._user_to_dict(user)
        user_dict.pop(UserFields.MONGO_ID, None)
        timestamp = _utcnow()
        user_dict[UserFields.CREATED_AT] = timestamp
        user_dict[UserFields.UPDATED_AT] = timestamp

        try:
            result = await self.user_collection.insert_one(user_dict)
        except DuplicateKeyError as e:
            raise DuplicateField(duplicate_field_from_error(e))
        except PyMongoError as e:
            raise StoreUnavailable(f"Error creating user: {str(e)}")

        user_dict[UserFields.MONGO_ID] = result.inserted_id
        return self._document_to_user(user_dict)

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for

        Returns:
            User domain model if found, None otherwise
        """
        email = normalize_email(email)
        if not email:
            return None
        return await self._find_one({UserFields.EMAIL: email}, "email")

    async def find_by_mobile(self, mobile: str) -> Optional[User]:
        """Find user by mobile number (digits only)"""
        mobile = normalize_mobile(mobile)
        if not mobile:
            return None
        return await self._find_one({UserFields.MOBILE: mobile}, "mobile")

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not user_id:
            return None

        try:
            object_id = ObjectId(user_id)
        except (InvalidId, ValueError, TypeError):
            return None

        return await self._find_one({UserFields.MONGO_ID: object_id}, "ID")

    async def update(self, user_id: str, patch: Dict[str, Any]) -> User:
        """
        Apply a $set of the given document fields

        Args:
            user_id: ID of the user to update
            patch: Document field names mapped to new values

        Returns:
            Updated User domain model

        Raises:
            NotFound: If no user has this ID
            DuplicateField: If the patch collides with a unique index
            StoreUnavailable: On any other database error
        """
        try:
            object_id = ObjectId(user_id)
        except (InvalidId, ValueError, TypeError):
            raise NotFound("User")

        changes = {k: v for k, v in patch.items() if k != UserFields.MONGO_ID}
        changes[UserFields.UPDATED_AT] = _utcnow()

        try:
            document = await self.user_collection.find_one_and_update(
                {UserFields.MONGO_ID: object_id},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            raise DuplicateField(duplicate_field_from_error(e))
        except PyMongoError as e:
            raise StoreUnavailable(f"Error updating user: {str(e)}")

        if document is None:
            raise NotFound("User")
        return self._document_to_user(document)

    async def _find_one(self, query: Dict[str, Any], label: str) -> Optional[User]:
        try:
            document = await self.user_collection.find_one(query)
        except PyMongoError as e:
            raise StoreUnavailable(f"Error finding user by {label}: {str(e)}")
        if document is None:
            return None
        return self._document_to_user(document)

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            first_name=document.get(UserFields.FIRST_NAME, ""),
            last_name=document.get(UserFields.LAST_NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            mobile=document.get(UserFields.MOBILE, ""),
            age=document.get(UserFields.AGE, 0),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
            terms_accepted=document.get(UserFields.TERMS_ACCEPTED, True),
            profile_picture=document.get(UserFields.PROFILE_PICTURE),
            status=AccountStatus(document.get(UserFields.STATUS, AccountStatus.ACTIVE.value)),
            is_verified=document.get(UserFields.IS_VERIFIED, False),
            last_login=document.get(UserFields.LAST_LOGIN),
            created_at=document.get(UserFields.CREATED_AT),
            updated_at=document.get(UserFields.UPDATED_AT),
        )

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        if not user:
            raise ValueError("User cannot be None")

        user_dict = {
            UserFields.FIRST_NAME: user.first_name,
            UserFields.LAST_NAME: user.last_name,
            UserFields.EMAIL: normalize_email(user.email),
            UserFields.MOBILE: normalize_mobile(user.mobile),
            UserFields.AGE: user.age,
            UserFields.HASHED_PASSWORD: user.hashed_password,
            UserFields.TERMS_ACCEPTED: True,
            UserFields.PROFILE_PICTURE: user.profile_picture,
            UserFields.STATUS: user.status.value,
            UserFields.IS_VERIFIED: user.is_verified,
            UserFields.LAST_LOGIN: user.last_login,
        }

        # Only include _id if user.id is valid
        if user.id:
            try:
                user_dict[UserFields.MONGO_ID] = ObjectId(user.id)
            except (InvalidId, ValueError, TypeError):
                pass

        return user_dict
