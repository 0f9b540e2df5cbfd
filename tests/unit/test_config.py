"""
Unit tests for hubcall.core.config and the DI container wiring
"""
import os
from datetime import timedelta
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from hubcall.core.config import Settings
from hubcall.core.exceptions import ConfigurationError
from hubcall.core.security import PasswordHasher, TokenService
from hubcall.application.use_cases.auth import RegisterUserUseCase, VerifyTokenUseCase
from hubcall.di.container import DIContainer
from hubcall.domain.repositories.user_repository import UserRepository
from hubcall.domain.validation import ValidationPolicy


class TestSettings:

    def test_defaults(self, mock_env):
        settings = Settings()
        assert settings.mongo_uri == "mongodb://localhost:27017"
        assert settings.access_token_expire_days == 7
        assert settings.reset_token_expire_minutes == 60
        assert settings.bcrypt_rounds == 10
        assert settings.port == 5000
        settings.validate()

    def test_missing_secret_and_uri_is_fatal(self):
        with patch.dict(os.environ, {"MONGO_URI": "", "JWT_SECRET": ""}):
            with pytest.raises(ConfigurationError) as exc_info:
                Settings().validate()
        assert exc_info.value.missing == ["MONGO_URI", "JWT_SECRET"]

    def test_policy_overrides(self, mock_env):
        with patch.dict(os.environ, {
            "ALLOWED_EMAIL_DOMAIN": "",
            "STRICT_PASSWORD_POLICY": "false",
            "CORS_ORIGINS": "http://a.test, http://b.test",
        }):
            settings = Settings()
        assert settings.allowed_email_domain == ""
        assert settings.strict_password_policy is False
        assert settings.cors_origins == ["http://a.test", "http://b.test"]


class TestContainer:

    @pytest.fixture
    def container(self, mock_env):
        with patch.dict(os.environ, {"BCRYPT_ROUNDS": "4", "JWT_EXPIRES_IN_DAYS": "3"}):
            settings = Settings()
        with patch(
            "hubcall.di.providers.database_provider.get_database", return_value=MagicMock()
        ), patch(
            "hubcall.di.providers.database_provider.get_user_collection", return_value=MagicMock()
        ):
            yield DIContainer(settings=settings)

    def test_security_built_from_settings(self, container):
        assert container.get(PasswordHasher).rounds == 4
        token_service = container.get(TokenService)
        assert token_service.access_ttl == timedelta(days=3)
        assert token_service.reset_ttl == timedelta(minutes=60)
        assert container.get(ValidationPolicy).allowed_email_domain == "gmail.com"

    def test_use_cases_are_fresh_instances_sharing_singletons(self, container):
        first = container.get(RegisterUserUseCase)
        second = container.get(RegisterUserUseCase)
        assert first is not second
        assert first.user_repository is second.user_repository is container.get(UserRepository)
        assert container.get(VerifyTokenUseCase).token_service is container.get(TokenService)

    def test_unknown_dependency_raises(self, container):
        with pytest.raises(ValueError):
            container.get("missing")


class TestEntryPoint:

    def test_run_loads_repo_env_before_caching_settings(self, mock_settings):
        import hubcall.__main__ as entry_point
        import hubcall.main

        calls = MagicMock()
        with patch.object(entry_point, "load_dotenv", calls.load_dotenv), patch.object(
            entry_point, "get_settings", calls.get_settings
        ), patch.object(entry_point.uvicorn, "run", calls.run):
            calls.get_settings.return_value = mock_settings
            mock_settings.port = 5000
            entry_point.run()

        assert [name for name, _, _ in calls.mock_calls][:2] == ["load_dotenv", "get_settings"]
        calls.load_dotenv.assert_called_once_with(entry_point.ENV_PATH)
        assert entry_point.ENV_PATH == Path(hubcall.main.__file__).resolve().parent.parent / ".env"
        assert calls.run.call_args.kwargs["port"] == 5000
