from datetime import timedelta
from typing import TYPE_CHECKING
from ...core.config import Settings
from ...core.security import PasswordHasher, TokenService
from ...domain.validation import PasswordPolicy, ValidationPolicy

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class SecurityProvider:
    """Registers the hasher, token service and validation policy built from Settings"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings = container.get(Settings)

        container.register_singleton(
            PasswordHasher,
            PasswordHasher(rounds=settings.bcrypt_rounds)
        )

        container.register_singleton(
            TokenService,
            TokenService(
                secret_key=settings.jwt_secret_key,
                algorithm=settings.jwt_algorithm,
                access_ttl=timedelta(days=settings.access_token_expire_days),
                reset_ttl=timedelta(minutes=settings.reset_token_expire_minutes),
            )
        )

        container.register_singleton(
            ValidationPolicy,
            ValidationPolicy(
                password=PasswordPolicy(require_composition=settings.strict_password_policy),
                allowed_email_domain=settings.allowed_email_domain or None,
            )
        )
