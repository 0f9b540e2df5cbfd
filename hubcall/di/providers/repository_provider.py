from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Binds the UserRepository interface to its Motor-backed store"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the user store as a singleton.

        Every use case shares this instance, so the unique email and mobile
        indexes created by the application lifespan guard all writes.
        """
        container.register_singleton(
            UserRepository,
            MongoUserRepository(user_collection=container.get("user_collection")),
        )
