"""
JWT access tokens for tokenauth.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional

import jwt

from ..core.config import TokenConfig
from ..core.types import AccessToken
from .errors import ExpiredTokenError, InvalidTokenError

logger = logging.getLogger(__name__)


@dataclass
class JWTConfig:
    """JWT-specific configuration."""
    secret_key: str
    algorithm: str = "HS256"
    issuer: Optional[str] = None
    audience: Optional[str] = None
    expiration_delta: timedelta = field(default_factory=lambda: timedelta(minutes=20))
    leeway: timedelta = field(default_factory=lambda: timedelta(0))


class JWTAccessToken(AccessToken):
    """
    Access token capability signing payloads as JWTs with PyJWT.

    Args:
        config: JWT settings
        payload_builder: Optional function deriving the payload from the
            data handed to ``AuthServer.create_access_token``
    """

    def __init__(self, config: JWTConfig,
                 payload_builder: Optional[Callable[[Dict[str, Any]], Dict[str, Any]]] = None):
        self.config = config
        if payload_builder is not None:
            self.get_payload = payload_builder

    @classmethod
    def from_config(cls, token_config: TokenConfig, **kwargs) -> "JWTAccessToken":
        """Build from the shared token configuration."""
        return cls(
            JWTConfig(
                secret_key=token_config.secret_key,
                algorithm=token_config.algorithm,
                issuer=token_config.issuer,
                audience=token_config.audience,
                expiration_delta=token_config.expires_in,
                leeway=token_config.leeway,
            ),
            **kwargs,
        )

    def create(self, payload: Dict[str, Any]) -> str:
        """Sign a compact payload."""
        now = datetime.now(timezone.utc)
        claims = dict(payload)
        claims['iat'] = now
        claims['exp'] = now + self.config.expiration_delta
        if self.config.issuer:
            claims['iss'] = self.config.issuer
        if self.config.audience:
            claims['aud'] = self.config.audience

        return jwt.encode(claims, self.config.secret_key, algorithm=self.config.algorithm)

    def verify(self, access_token: str) -> Dict[str, Any]:
        """
        Return the payload of a signed token.

        Raises:
            ExpiredTokenError: If the token has expired
            InvalidTokenError: If the token is malformed or its signature,
                issuer or audience do not match
        """
        try:
            return jwt.decode(
                access_token,
                self.config.secret_key,
                algorithms=[self.config.algorithm],
                audience=self.config.audience,
                issuer=self.config.issuer,
                leeway=self.config.leeway,
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}")
