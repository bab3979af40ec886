"""
PASETO access tokens for tokenauth.
"""

import json
import logging
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Callable, Dict, Optional

import pyseto
from pyseto import Key

from ..core.config import TokenConfig
from ..core.types import AccessToken
from .errors import ExpiredTokenError, InvalidTokenError

logger = logging.getLogger(__name__)


@dataclass
class PasetoConfig:
    """PASETO-specific configuration."""
    secret_key: str
    version: int = 4
    purpose: str = "local"
    expiration_delta: timedelta = field(default_factory=lambda: timedelta(minutes=20))


class PasetoAccessToken(AccessToken):
    """
    Access token capability encrypting payloads as local PASETO tokens.

    Args:
        config: PASETO settings
        payload_builder: Optional function deriving the payload from the
            data handed to ``AuthServer.create_access_token``
    """

    def __init__(self, config: PasetoConfig,
                 payload_builder: Optional[Callable[[Dict[str, Any]], Dict[str, Any]]] = None):
        if config.purpose != "local":
            raise ValueError(f"Unsupported PASETO purpose: {config.purpose}")

        self.config = config
        self._key = Key.new(version=config.version, purpose=config.purpose,
                            key=config.secret_key.encode('utf-8'))
        if payload_builder is not None:
            self.get_payload = payload_builder

    @classmethod
    def from_config(cls, token_config: TokenConfig, **kwargs) -> "PasetoAccessToken":
        """Build from the shared token configuration."""
        return cls(
            PasetoConfig(
                secret_key=token_config.secret_key,
                expiration_delta=token_config.expires_in,
            ),
            **kwargs,
        )

    def create(self, payload: Dict[str, Any]) -> str:
        """Encrypt a compact payload."""
        token = pyseto.encode(
            self._key,
            dict(payload),
            serializer=json,
            exp=int(self.config.expiration_delta.total_seconds()),
        )
        return token.decode('utf-8')

    def verify(self, access_token: str) -> Dict[str, Any]:
        """
        Return the payload of an encrypted token.

        Raises:
            ExpiredTokenError: If the token has expired
            InvalidTokenError: If the token cannot be decrypted
        """
        try:
            decoded = pyseto.decode(self._key, access_token, deserializer=json)
        except pyseto.VerifyError as e:
            if "expired" in str(e).lower():
                raise ExpiredTokenError()
            raise InvalidTokenError(f"Invalid token: {e}")
        except (pyseto.PysetoError, ValueError, TypeError) as e:
            raise InvalidTokenError(f"Invalid token: {e}")

        return decoded.payload
