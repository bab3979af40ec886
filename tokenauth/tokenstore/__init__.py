"""
Token store package for tokenauth.

Refresh token repositories implementing the ``RefreshToken`` capability.
"""

from .memory import (
    MemoryRefreshTokenStore,
    StoredRefreshToken,
)

__all__ = [
    "MemoryRefreshTokenStore",
    "StoredRefreshToken",
]
