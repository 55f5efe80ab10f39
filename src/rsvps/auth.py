import logging
import secrets

from src.rsvps.dtos import AdminCredential
from src.rsvps.errors import AuthError, ConfigError

logger = logging.getLogger(__name__)


class AdminAuthGate:
    """Allows or denies the admin path against a single shared secret."""

    def __init__(self, secret: str, username: str = "admin"):
        self._secret = secret or ""
        self._username = username

    @property
    def configured(self) -> bool:
        return bool(self._secret)

    def authorize(self, credential: AdminCredential | None) -> None:
        """
        Return quietly when the credential matches, raise otherwise.

        ConfigError when no secret is configured (every request is denied),
        AuthError when the credential is missing or wrong.
        """
        if not self.configured:
            raise ConfigError("ADMIN_PASSWORD not set on server.")

        if credential is None:
            raise AuthError("Missing auth.")

        username_ok = secrets.compare_digest(
            credential.username.encode("utf-8"), self._username.encode("utf-8")
        )
        password_ok = secrets.compare_digest(
            credential.password.encode("utf-8"), self._secret.encode("utf-8")
        )
        if not (username_ok and password_ok):
            logger.warning("Rejected admin credential for user %r", credential.username)
            raise AuthError("Unauthorized.")
