"""
In-memory refresh token storage for tokenauth.

This module provides a refresh token repository kept in process memory,
suitable for development, tests and single-instance deployments. Tokens do
not survive a restart.
"""

import asyncio
import copy
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, Optional

from ..common.utils import generate_secure_token, get_current_time
from ..core.types import RefreshToken, ResetCallback, StringAnyMap

logger = logging.getLogger(__name__)


@dataclass
class StoredRefreshToken:
    """A refresh token entry."""
    payload: StringAnyMap
    expires_at: datetime

    def is_expired(self) -> bool:
        return get_current_time() >= self.expires_at


class MemoryRefreshTokenStore(RefreshToken):
    """
    In-memory refresh token store.

    Args:
        ttl: Lifetime of a refresh token
        payload_builder: Derives the stored payload from the data passed to
            ``create``; by default the data is stored as is
        cookie: Name of the refresh token cookie
        cookie_options: Cookie options or a function returning them
    """

    def __init__(self, ttl: timedelta = timedelta(days=30),
                 payload_builder: Optional[Callable[[Dict[str, Any]], StringAnyMap]] = None,
                 cookie: Optional[str] = None,
                 cookie_options=None):
        self.ttl = ttl
        self.payload_builder = payload_builder
        self.cookie = cookie
        self.cookie_options = cookie_options
        self._store: Dict[str, StoredRefreshToken] = {}
        self._lock = asyncio.Lock()

    async def create(self, data: StringAnyMap) -> str:
        """Create a refresh token for ``data``."""
        payload = self.payload_builder(data) if self.payload_builder else dict(data)
        token = generate_secure_token()

        async with self._lock:
            self._store[token] = StoredRefreshToken(
                payload=payload,
                expires_at=get_current_time() + self.ttl,
            )

        logger.debug("Stored refresh token")
        return token

    async def get_payload(self, refresh_token: str, reset: ResetCallback) -> Optional[StringAnyMap]:
        """Return the payload of a refresh token, calling ``reset`` first."""
        reset()

        async with self._lock:
            entry = self._store.get(refresh_token)

            if entry is None:
                return None

            if entry.is_expired():
                del self._store[refresh_token]
                logger.debug("Removed expired refresh token")
                return None

            return copy.deepcopy(entry.payload)

    async def remove(self, refresh_token: str) -> bool:
        """Remove a refresh token."""
        async with self._lock:
            return self._store.pop(refresh_token, None) is not None

    async def cleanup(self) -> int:
        """Remove expired refresh tokens, returning how many were dropped."""
        async with self._lock:
            expired = [token for token, entry in self._store.items() if entry.is_expired()]

            for token in expired:
                del self._store[token]

            if expired:
                logger.info(f"Cleaned up {len(expired)} expired refresh tokens")

            return len(expired)

    async def count(self) -> int:
        """Count stored refresh tokens."""
        async with self._lock:
            return len(self._store)

    async def clear(self) -> int:
        """Remove every refresh token."""
        async with self._lock:
            count = len(self._store)
            self._store.clear()
            logger.info(f"Cleared {count} refresh tokens from memory store")
            return count
