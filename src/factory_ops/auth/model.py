from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import Role


@dataclass(frozen=True)
class Principal:
    """The authenticated identity attached to a session."""

    username: str
    role: Role

    def to_dict(self) -> dict:
        return {"username": self.username, "role": self.role.value}


@dataclass(frozen=True)
class Session:
    principal: Principal
    issued_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at

    def to_dict(self) -> dict:
        return {
            **self.principal.to_dict(),
            "issued_at": self.issued_at.isoformat(),
            "expires_at": self.expires_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Session":
        return cls(
            principal=Principal(username=str(data["username"]), role=Role(data["role"])),
            issued_at=datetime.fromisoformat(data["issued_at"]),
            expires_at=datetime.fromisoformat(data["expires_at"]),
        )
