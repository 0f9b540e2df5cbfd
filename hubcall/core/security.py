# Standard library imports
import time
from datetime import timedelta
from typing import Any, Callable, Dict, Optional

# External package imports
import jwt
import bcrypt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError

# Local application imports
from .exceptions import ExpiredToken, HashingError, MalformedToken

# bcrypt only looks at the first 72 bytes of a password
_BCRYPT_MAX_BYTES = 72


class TokenPurpose:
    """Values of the ``purpose`` claim"""
    SESSION = "session"
    PASSWORD_RESET = "password_reset"


class PasswordHasher:
    """Salted bcrypt hashing with a configurable work factor"""

    def __init__(self, rounds: int = 10) -> None:
        self.rounds = rounds

    @staticmethod
    def _encode(plain_password: str) -> bytes:
        return plain_password.encode("utf-8")[:_BCRYPT_MAX_BYTES]

    def hash(self, plain_password: str) -> str:
        """
        Hash a plain password using bcrypt

        Args:
            plain_password: The plain text password to hash

        Returns:
            Hashed password string
        """
        salt = bcrypt.gensalt(rounds=self.rounds)
        hashed = bcrypt.hashpw(self._encode(plain_password), salt)
        return hashed.decode("utf-8")

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a plain password against a hashed password

        Args:
            plain_password: The plain text password to verify
            hashed_password: The hashed password to compare against

        Returns:
            True if passwords match, False otherwise

        Raises:
            HashingError: If the stored digest is not a bcrypt hash
        """
        if not hashed_password or not hashed_password.startswith("$2"):
            raise HashingError()
        try:
            return bcrypt.checkpw(
                self._encode(plain_password),
                hashed_password.encode("utf-8"),
            )
        except ValueError as exception:
            raise HashingError(f"Malformed password digest: {exception}")


class TokenService:
    """Issues and verifies signed, expiring JWT bearer tokens"""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        access_ttl: timedelta = timedelta(days=7),
        reset_ttl: timedelta = timedelta(hours=1),
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.access_ttl = access_ttl
        self.reset_ttl = reset_ttl
        self.clock = clock

    def issue(
        self,
        subject: str,
        purpose: str = TokenPurpose.SESSION,
        ttl: Optional[timedelta] = None,
        extra_claims: Optional[Dict[str, Any]] = None,
    ) -> str:
        """
        Create a JWT token with expiration

        Args:
            subject: User identifier the token is bound to
            purpose: Token purpose claim (session or password_reset)
            ttl: Validity window, defaults to the window of the purpose
            extra_claims: Additional claims (e.g., email)

        Returns:
            Encoded JWT token string
        """
        if ttl is None:
            ttl = self.reset_ttl if purpose == TokenPurpose.PASSWORD_RESET else self.access_ttl

        issued_at = int(self.clock())
        expires_at = issued_at + int(ttl.total_seconds())

        token_payload = {
            **(extra_claims or {}),
            "sub": str(subject),
            "userId": str(subject),
            "purpose": purpose,
            "iat": issued_at,
            "exp": expires_at,
        }
        return jwt.encode(token_payload, self.secret_key, algorithm=self.algorithm)

    def issue_access_token(self, user_id: str, email: str) -> str:
        return self.issue(user_id, TokenPurpose.SESSION, extra_claims={"email": email})

    def issue_reset_token(self, user_id: str) -> str:
        return self.issue(user_id, TokenPurpose.PASSWORD_RESET)

    def verify(self, token: str, purpose: Optional[str] = None) -> Dict[str, Any]:
        """
        Decode and validate a JWT token

        Args:
            token: The JWT token string to decode
            purpose: Required purpose claim, if any

        Returns:
            Dictionary containing decoded token claims

        Raises:
            ExpiredToken: If the token is past its expiry
            MalformedToken: If signature, structure or purpose is invalid
        """
        if not token:
            raise MalformedToken("Token is empty")
        try:
            decoded = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require": ["exp", "iat", "sub"]},
            )
        except ExpiredSignatureError:
            raise ExpiredToken()
        except InvalidTokenError as exception:
            raise MalformedToken(f"Invalid token: {exception}")

        # Tokens issued before the purpose claim existed are session tokens
        token_purpose = decoded.get("purpose", TokenPurpose.SESSION)
        if purpose is not None and token_purpose != purpose:
            raise MalformedToken(f"Token purpose {token_purpose!r} is not {purpose!r}")
        return decoded
