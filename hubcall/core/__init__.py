from .config import Settings, get_settings
from .security import PasswordHasher, TokenPurpose, TokenService

__all__ = [
    "Settings",
    "get_settings",
    "PasswordHasher",
    "TokenPurpose",
    "TokenService",
]
