import secrets
from abc import ABC, abstractmethod
from typing import Any

from app.utils import logger


class CredentialVerifier(ABC):
    """Checks a caller supplied username and password."""

    @abstractmethod
    def verify(self, username: Any, password: Any) -> bool: ...


class StaticCredentialVerifier(CredentialVerifier):
    """Matches against a single configured username and password pair.

    This is a placeholder: no token or session is issued and nothing is
    persisted. Anything other than two strings is a mismatch.
    """

    def __init__(self, username: str, password: str):
        self._username = self._encode(username)
        self._password = self._encode(password)

    @staticmethod
    def _encode(value: str) -> bytes:
        # lone surrogates are valid in JSON strings
        return value.encode("utf-8", errors="surrogatepass")

    def verify(self, username: Any, password: Any) -> bool:
        if not isinstance(username, str) or not isinstance(password, str):
            logger.info("Missing or non-string username or password")
            return False
        # both digests are always compared
        username_matches = secrets.compare_digest(
            self._encode(username), self._username
        )
        password_matches = secrets.compare_digest(
            self._encode(password), self._password
        )
        if not (username_matches and password_matches):
            logger.info(f"Invalid credentials {username=}")
            return False
        return True
