"""
Package auth provides the token building blocks used by the auth server.

This package implements:
- Payload claim name mapping
- Scope encoding and decoding
- Access token verification helpers
- JWT and PASETO access token capabilities
- Authentication errors
"""

from .errors import (
    AuthError,
    ConfigurationError,
    TokenError,
    ExpiredTokenError,
    InvalidTokenError,
)

from .payload import (
    Payload,
    is_empty,
)

from .scope import (
    Scope,
    DEFAULT_SCOPE,
)

from .verifier import (
    Verifier,
    AuthKey,
    verify_token,
)

from .jwt import (
    JWTAccessToken,
    JWTConfig,
)

from .paseto import (
    PasetoAccessToken,
    PasetoConfig,
)

__all__ = [
    # Errors
    'AuthError',
    'ConfigurationError',
    'TokenError',
    'ExpiredTokenError',
    'InvalidTokenError',

    # Codecs
    'Payload',
    'is_empty',
    'Scope',
    'DEFAULT_SCOPE',

    # Verification
    'Verifier',
    'AuthKey',
    'verify_token',

    # Capabilities
    'JWTAccessToken',
    'JWTConfig',
    'PasetoAccessToken',
    'PasetoConfig',
]
