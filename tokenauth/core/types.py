"""
Core types and capability interfaces for tokenauth.

The auth server never signs tokens or stores refresh tokens itself. It works
through two capabilities supplied by the integrator:

- ``AccessToken``: builds, signs and verifies short-lived access tokens.
  Every hook is optional and checked for presence at call time.
- ``RefreshToken``: creates, looks up and removes long-lived refresh tokens
  in whatever repository the integrator owns.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Awaitable, Callable, Dict, Optional, Union

StringAnyMap = Dict[str, Any]
ResetCallback = Callable[[], Any]


@dataclass
class CookieOptions:
    """Cookie attributes a transport layer applies to a token cookie."""
    max_age: Optional[int] = None
    expires: Optional[datetime] = None
    http_only: Optional[bool] = None
    path: Optional[str] = None
    domain: Optional[str] = None
    secure: Optional[Union[bool, str]] = None
    same_site: Optional[Union[bool, str]] = None
    signed: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, leaving out unset attributes."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


CookieOptionsResolver = Union[CookieOptions, Callable[[str], CookieOptions]]


def has_hook(capability: Any, name: str) -> bool:
    """Check whether a capability implements an optional hook."""
    return callable(getattr(capability, name, None))


class AccessToken(ABC):
    """
    Access token capability.

    Subclasses implement any of the hooks below; the auth server checks for
    each one before using it:

    - ``get_payload(data)``: derive the token payload from arbitrary data.
      When missing, the data itself is used as payload.
    - ``create(payload)``: sign a compact payload into a token string.
    - ``verify(access_token)``: return the compact payload of a token, raising
      on invalid or expired tokens.

    A hook can be disabled on an instance by setting it to ``None``.
    """

    cookie: Optional[str] = None
    cookie_options: Optional[CookieOptionsResolver] = None


class RefreshToken(ABC):
    """Refresh token capability backed by a repository the integrator owns."""

    cookie: Optional[str] = None
    cookie_options: Optional[CookieOptionsResolver] = None

    @abstractmethod
    async def create(self, data: StringAnyMap) -> str:
        """Create and persist a refresh token for ``data``."""
        pass

    @abstractmethod
    async def get_payload(self, refresh_token: str, reset: ResetCallback) -> Optional[StringAnyMap]:
        """
        Return the payload stored for a refresh token.

        Args:
            refresh_token: Refresh token identifier
            reset: Callback refreshing the token's cookie, called by the
                implementation as a side effect of the lookup

        Returns:
            The stored payload, or None when the token is unknown
        """
        pass

    @abstractmethod
    def remove(self, refresh_token: str) -> Union[bool, Awaitable[bool]]:
        """Remove a refresh token, returning whether it existed."""
        pass


@dataclass
class AccessTokenResult:
    """A signed access token and the canonical payload it carries."""
    access_token: str
    payload: StringAnyMap = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'access_token': self.access_token,
            'payload': self.payload,
        }


@dataclass
class TokenPair:
    """Result of a full issuance: both tokens plus the canonical payload."""
    access_token: str
    refresh_token: str
    payload: StringAnyMap = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'access_token': self.access_token,
            'refresh_token': self.refresh_token,
            'payload': self.payload,
        }


@dataclass
class VerificationResult:
    """Outcome of verifying an access token."""
    valid: bool
    payload: Optional[StringAnyMap] = None
    error: Optional[Exception] = None

    @property
    def error_type(self) -> Optional[str]:
        return type(self.error).__name__ if self.error is not None else None
