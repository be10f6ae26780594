from __future__ import annotations

import logging
from typing import Optional

from ..core.exceptions import AuthenticationError
from .model import Session
from .session import SessionManager
from .verifier import CredentialVerifier

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: log in / log out a principal."""

    def __init__(self, verifier: CredentialVerifier, sessions: SessionManager):
        self._verifier = verifier
        self._sessions = sessions

    def login(self, username: str, password: str) -> Session:
        principal = None
        if username and password:
            principal = self._verifier.verify(username, password)
        if principal is None:
            logger.info("Failed login for %r", username)
            raise AuthenticationError("Invalid username or password")

        logger.info("User %s logged in (%s)", principal.username, principal.role.value)
        return self._sessions.start(principal)

    def logout(self) -> None:
        self._sessions.end()

    def current_session(self) -> Optional[Session]:
        return self._sessions.current()
