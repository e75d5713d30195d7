"""
Admin session tokens.

Tokens are random hex strings stored in a Django cache with a fixed
time-to-live. Expiry is left to the cache, so a token either resolves to
a live session or it does not exist.
"""

import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from django.conf import settings
from django.core.cache import caches
from django.utils import timezone

KEY_PREFIX = 'admin-session:'


@dataclass(frozen=True)
class AdminSession:
    token: str
    created_at: datetime
    expires_at: datetime


class AdminSessionStore:
    """Create, look up and revoke admin session tokens in ``cache``."""

    def __init__(self, cache, ttl: int):
        self.cache = cache
        self.ttl = ttl

    def _key(self, token: str) -> str:
        return f'{KEY_PREFIX}{token}'

    def create(self) -> AdminSession:
        now = timezone.now()
        session = AdminSession(
            token=secrets.token_hex(32),
            created_at=now,
            expires_at=now + timedelta(seconds=self.ttl),
        )
        self.cache.set(self._key(session.token), session, timeout=self.ttl)
        return session

    def get(self, token: str) -> Optional[AdminSession]:
        if not token:
            return None
        session = self.cache.get(self._key(token))
        if session is None or session.expires_at <= timezone.now():
            return None
        return session

    def revoke(self, token: str) -> None:
        self.cache.delete(self._key(token))


def get_session_store() -> AdminSessionStore:
    return AdminSessionStore(
        caches[settings.ADMIN_SESSION_CACHE],
        settings.ADMIN_SESSION_TTL,
    )
