from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Callable, Optional, Protocol

from flask import session as flask_session

from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_SESSION_DAYS
from .model import Principal, Session

logger = logging.getLogger(__name__)


class SessionStore(Protocol):
    def load(self) -> Optional[dict]:
        raise NotImplementedError

    def save(self, data: dict) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class FlaskSessionStore(SessionStore):
    """Keeps the session payload inside Flask's signed cookie session."""

    KEY = "auth"

    def load(self) -> Optional[dict]:
        return flask_session.get(self.KEY)

    def save(self, data: dict) -> None:
        flask_session[self.KEY] = data
        flask_session.permanent = True

    def clear(self) -> None:
        flask_session.pop(self.KEY, None)


class SessionManager:
    def __init__(
        self,
        store: SessionStore,
        *,
        clock: Callable[[], datetime] = now_local,
        lifetime: timedelta = timedelta(days=DEFAULT_SESSION_DAYS),
    ):
        self._store = store
        self._clock = clock
        self._lifetime = lifetime

    @property
    def lifetime(self) -> timedelta:
        return self._lifetime

    def start(self, principal: Principal) -> Session:
        now = self._clock()
        s = Session(principal=principal, issued_at=now, expires_at=now + self._lifetime)
        self._store.save(s.to_dict())
        return s

    def current(self) -> Optional[Session]:
        data = self._store.load()
        if not data:
            return None

        try:
            s = Session.from_dict(data)
        except (KeyError, TypeError, ValueError):
            logger.warning("Discarding malformed session payload")
            self._store.clear()
            return None

        if s.is_expired(self._clock()):
            self._store.clear()
            return None
        return s

    def end(self) -> None:
        self._store.clear()
