# Standard library imports
import os
from typing import Final, List, Optional

# Local application imports
from .exceptions import ConfigurationError


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Application settings loaded from environment variables.

    Built once at startup and treated as read-only afterwards. The hasher,
    token service and use cases receive the values they need at construction
    time instead of looking them up.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "hubcall")

        # JWT Configuration
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET", "")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.access_token_expire_days: Final[int] = int(
            os.getenv("JWT_EXPIRES_IN_DAYS", "7")
        )
        self.reset_token_expire_minutes: Final[int] = int(
            os.getenv("RESET_TOKEN_EXPIRE_MINUTES", "60")
        )

        # Credential policy
        self.bcrypt_rounds: Final[int] = int(os.getenv("BCRYPT_ROUNDS", "10"))
        self.allowed_email_domain: Final[str] = (
            os.getenv("ALLOWED_EMAIL_DOMAIN", "gmail.com").strip().lower()
        )
        self.strict_password_policy: Final[bool] = _env_flag("STRICT_PASSWORD_POLICY", "true")

        # Server Configuration
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv(
                "CORS_ORIGINS",
                "https://hubcall.netlify.app,http://localhost:3000",
            ).split(",")
            if origin.strip()
        ]
        self.port: Final[int] = int(os.getenv("PORT", "5000"))
        self.environment: Final[str] = os.getenv("ENVIRONMENT", "production").lower()
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    def validate(self) -> None:
        """
        Fail fast when a required setting is absent

        Raises:
            ConfigurationError: If the connection string or signing secret is missing
        """
        missing = []
        if not self.mongo_uri:
            missing.append("MONGO_URI")
        if not self.jwt_secret_key:
            missing.append("JWT_SECRET")
        if missing:
            raise ConfigurationError(missing)


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
