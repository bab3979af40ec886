"""
tokenauth Python Package

Access and refresh token lifecycle engine, independent of any HTTP framework.
"""

__version__ = "0.1.0"

from .core.auth import AuthServer
from .core.config import Config, TokenConfig
from .core.types import (
    AccessToken,
    RefreshToken,
    AccessTokenResult,
    TokenPair,
    CookieOptions,
)
from .auth.payload import Payload
from .auth.scope import Scope
from .auth.verifier import Verifier, AuthKey
from .auth.errors import AuthError, ConfigurationError

__all__ = [
    "AuthServer",
    "Config",
    "TokenConfig",
    "AccessToken",
    "RefreshToken",
    "AccessTokenResult",
    "TokenPair",
    "CookieOptions",
    "Payload",
    "Scope",
    "Verifier",
    "AuthKey",
    "AuthError",
    "ConfigurationError",
]
