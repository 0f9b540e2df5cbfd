from .user import AccountStatus, User

__all__ = [
    "AccountStatus",
    "User",
]
