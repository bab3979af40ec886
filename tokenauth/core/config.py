"""
Configuration module for tokenauth.
"""

import logging
import os
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Dict, Optional, Union

from ..util.config import (
    ENV_PREFIX,
    get_config_value,
    load_config_file,
    parse_duration_string,
)

DEFAULT_SECRET_KEY = "default-secret-key"

logger = logging.getLogger(__name__)


def _as_timedelta(value: Union[timedelta, int, float, str]) -> timedelta:
    if isinstance(value, timedelta):
        return value
    if isinstance(value, (int, float)):
        return timedelta(seconds=value)
    return parse_duration_string(value)


@dataclass
class TokenConfig:
    """Access token signing settings"""
    secret_key: str = ""
    algorithm: str = "HS256"
    issuer: Optional[str] = None
    audience: Optional[str] = None
    expires_in: timedelta = field(default_factory=lambda: timedelta(minutes=20))
    leeway: timedelta = field(default_factory=lambda: timedelta(0))

    def __post_init__(self):
        if not self.secret_key:
            self.secret_key = os.getenv(f"{ENV_PREFIX}SECRET_KEY", DEFAULT_SECRET_KEY)
        if self.secret_key == DEFAULT_SECRET_KEY:
            logger.warning("Using the default secret key, set TOKENAUTH_SECRET_KEY in production")
        self.expires_in = _as_timedelta(self.expires_in)
        self.leeway = _as_timedelta(self.leeway)


@dataclass
class Config:
    """Configuration for an auth server"""
    payload: Dict[str, str] = field(default_factory=dict)
    scope: Dict[str, str] = field(default_factory=dict)
    access_token_cookie: Optional[str] = None
    refresh_token_cookie: Optional[str] = None
    refresh_token_expiry: timedelta = field(default_factory=lambda: timedelta(days=30))
    token_config: Optional[TokenConfig] = None

    def __post_init__(self):
        if self.token_config is None:
            self.token_config = TokenConfig()
        elif isinstance(self.token_config, dict):
            self.token_config = TokenConfig(**self.token_config)
        self.refresh_token_expiry = _as_timedelta(self.refresh_token_expiry)

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> "Config":
        """Create configuration from environment variables"""
        return cls(
            payload=get_config_value("payload", {}, dict, prefix),
            scope=get_config_value("scope", {}, dict, prefix),
            access_token_cookie=get_config_value("access_token_cookie", None, env_prefix=prefix),
            refresh_token_cookie=get_config_value("refresh_token_cookie", None, env_prefix=prefix),
            refresh_token_expiry=get_config_value(
                "refresh_token_expiry", timedelta(days=30), timedelta, prefix
            ),
            token_config=TokenConfig(
                secret_key=get_config_value("secret_key", "", env_prefix=prefix),
                algorithm=get_config_value("algorithm", "HS256", env_prefix=prefix),
                issuer=get_config_value("issuer", None, env_prefix=prefix),
                audience=get_config_value("audience", None, env_prefix=prefix),
                expires_in=get_config_value(
                    "access_token_expiry", timedelta(minutes=20), timedelta, prefix
                ),
                leeway=get_config_value("leeway", timedelta(0), timedelta, prefix),
            ),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create configuration from a dictionary"""
        known = {f for f in cls.__dataclass_fields__}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
        return cls(**data)

    @classmethod
    def from_file(cls, file_path: str) -> "Config":
        """Create configuration from a JSON or YAML file"""
        return cls.from_dict(load_config_file(file_path))

    def validate(self) -> bool:
        """Validate the configuration"""
        for name in ("payload", "scope"):
            table = getattr(self, name)
            if not isinstance(table, dict):
                raise ValueError(f"{name} must be a mapping")
            for key, value in table.items():
                if not isinstance(key, str) or not isinstance(value, str):
                    raise ValueError(f"{name} entries must map strings to strings")

        if len(set(self.payload.values())) != len(self.payload):
            raise ValueError("payload maps two claims to the same key")
        if self.refresh_token_expiry <= timedelta(0):
            raise ValueError("refresh_token_expiry must be positive")
        if not self.token_config.secret_key:
            raise ValueError("secret_key is required")
        if self.token_config.expires_in <= timedelta(0):
            raise ValueError("access token expiry must be positive")
        return True
