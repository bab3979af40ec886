"""
Core auth server, capability interfaces and configuration.
"""

from .types import (
    AccessToken,
    RefreshToken,
    AccessTokenResult,
    TokenPair,
    VerificationResult,
    CookieOptions,
)
from .config import Config, TokenConfig
from .auth import AuthServer, ACCESS_TOKEN_COOKIE, REFRESH_TOKEN_COOKIE

__all__ = [
    "AccessToken",
    "RefreshToken",
    "AccessTokenResult",
    "TokenPair",
    "VerificationResult",
    "CookieOptions",
    "Config",
    "TokenConfig",
    "AuthServer",
    "ACCESS_TOKEN_COOKIE",
    "REFRESH_TOKEN_COOKIE",
]
