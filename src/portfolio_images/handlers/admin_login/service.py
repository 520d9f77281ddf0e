"""Single-credential admin check."""

import hmac
import os

from aws_lambda_powertools import Logger

from portfolio_images.core.models.errors import AuthenticationError
from portfolio_images.core.utils.constants import ENV_ADMIN_PASSWORD, ENV_ADMIN_USERNAME

logger = Logger(utc=True)


class AdminAuthService:
    """Compares submitted credentials with the configured admin credential."""

    def __init__(self, *, username: str | None = None, password: str | None = None) -> None:
        self.username = username or os.getenv(ENV_ADMIN_USERNAME)
        self.password = password or os.getenv(ENV_ADMIN_PASSWORD)

        if not self.username or not self.password:
            raise RuntimeError(
                f"{ENV_ADMIN_USERNAME} and {ENV_ADMIN_PASSWORD} environment variables must be set"
            )

    def authenticate(self, username: str, password: str) -> None:
        """
        Raises:
            AuthenticationError: If either value does not match
        """
        # Both compared unconditionally.
        username_ok = hmac.compare_digest(username.encode(), self.username.encode())
        password_ok = hmac.compare_digest(password.encode(), self.password.encode())

        if not (username_ok and password_ok):
            logger.warning("Admin login rejected")
            raise AuthenticationError(message="Invalid credentials")

        logger.info("Admin login succeeded")
