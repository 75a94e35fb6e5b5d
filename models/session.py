"""Access session consumed by the pipeline before a run starts."""

import os
from datetime import datetime, timezone
from typing import Callable, Optional, Protocol

from pydantic import BaseModel


class Session(BaseModel):
    """
    Access token and expiry handed to the pipeline by the caller.

    Issuing and refreshing tokens belongs to the authentication layer; the
    pipeline only asks a SessionValidator whether this value is still good.
    """

    token: Optional[str] = None
    expires_at: Optional[datetime] = None

    @classmethod
    def from_env(cls) -> "Session":
        """
        Build a session from SESSION_TOKEN and SESSION_EXPIRES_AT.

        SESSION_EXPIRES_AT must be an ISO 8601 timestamp. Missing values
        produce a session that no validator accepts.
        """
        expires_raw = os.getenv("SESSION_EXPIRES_AT")
        return cls(
            token=os.getenv("SESSION_TOKEN") or None,
            expires_at=datetime.fromisoformat(expires_raw) if expires_raw else None,
        )


class SessionValidator(Protocol):
    """Anything that can tell whether a token is usable at this moment."""

    def is_valid(self, token: Optional[str], expiry: Optional[datetime]) -> bool:
        ...


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenExpiryValidator:
    """Accepts tokens of the expected length whose expiry lies in the future."""

    def __init__(
        self,
        token_length: int = 64,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.token_length = token_length
        self.clock = clock

    def is_valid(self, token: Optional[str], expiry: Optional[datetime]) -> bool:
        if not token or expiry is None:
            return False
        if len(token) != self.token_length:
            return False

        now = self.clock()
        # Compare naive timestamps as UTC
        if expiry.tzinfo is None:
            expiry = expiry.replace(tzinfo=timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return expiry > now
