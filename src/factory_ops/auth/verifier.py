from __future__ import annotations

from typing import Mapping, Optional, Protocol

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.enums import Role
from .model import Principal


class CredentialVerifier(Protocol):
    """Maps a username/password pair to a Principal, or None."""

    def verify(self, username: str, password: str) -> Optional[Principal]:
        raise NotImplementedError


class StaticCredentialVerifier(CredentialVerifier):
    """Fixed set of accounts, passwords kept only as werkzeug hashes."""

    def __init__(self, accounts: Mapping[str, tuple[str, Role]]):
        # accounts: username -> (password_hash, role)
        self._accounts = dict(accounts)

    @classmethod
    def from_plain(cls, passwords: Mapping[str, tuple[str, Role]]) -> "StaticCredentialVerifier":
        return cls({u: (generate_password_hash(p), role) for u, (p, role) in passwords.items()})

    def verify(self, username: str, password: str) -> Optional[Principal]:
        account = self._accounts.get((username or "").strip())
        if not account:
            return None

        password_hash, role = account
        try:
            ok = check_password_hash(password_hash, password or "")
        except ValueError:
            # e.g. placeholder or corrupted hashes
            ok = False
        if not ok:
            return None
        return Principal(username=username.strip(), role=role)


def default_accounts(*, admin_password: str, guest_password: str) -> dict[str, tuple[str, Role]]:
    return {
        "admin": (admin_password, Role.ADMIN),
        "guest": (guest_password, Role.GUEST),
    }
