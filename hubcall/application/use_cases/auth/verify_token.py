# Local application imports
from ....core.security import TokenPurpose, TokenService


class VerifyTokenUseCase:
    """Use case for authorizing a request from its bearer token"""

    def __init__(self, token_service: TokenService) -> None:
        self.token_service = token_service

    async def execute(self, token: str) -> str:
        """
        Verify a session token

        Args:
            token: JWT access token

        Returns:
            The subject user ID

        Raises:
            ExpiredToken: If the token has expired
            InvalidToken: For any other token failure
        """
        claims = self.token_service.verify(token, purpose=TokenPurpose.SESSION)
        return claims["sub"]
