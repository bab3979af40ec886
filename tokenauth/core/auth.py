"""
Auth server: access and refresh token orchestration.

``AuthServer`` issues, verifies, refreshes and revokes tokens through the
``AccessToken`` and ``RefreshToken`` capabilities. It is framework agnostic;
HTTP adapters call into it and turn ``None``/``False`` results into
401/400 responses.

Missing collaborators raise ``ConfigurationError`` at the first call that
needs them. Bad tokens never raise.
"""

import dataclasses
import inspect
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..auth.errors import (
    ConfigurationError,
    MISSING_CREATE_MESSAGE,
    MISSING_REFRESH_TOKEN_MESSAGE,
    MISSING_VERIFY_MESSAGE,
)
from ..auth.payload import Payload
from ..auth.scope import Scope
from ..auth.verifier import verify_token
from .config import Config
from .types import (
    AccessToken,
    AccessTokenResult,
    CookieOptions,
    CookieOptionsResolver,
    RefreshToken,
    ResetCallback,
    StringAnyMap,
    TokenPair,
    has_hook,
)

REFRESH_TOKEN_COOKIE = "r_t"
ACCESS_TOKEN_COOKIE = "a_t"

# Expiry applied to a cookie that should be removed by the client
REMOVED_COOKIE_EXPIRES = datetime.fromtimestamp(0.001, tz=timezone.utc)

logger = logging.getLogger(__name__)


class AuthServer:
    """
    Token lifecycle engine.

    Args:
        access_token: Access token capability
        refresh_token: Refresh token capability, optional for deployments
            that only issue or verify access tokens
        payload: Claim name mapping (defaults to the identity mapping)
        scope: Scope codec (defaults to ``read``/``write`` abbreviations)
        access_token_cookie: Cookie name used when the access token
            capability does not set ``cookie``
        refresh_token_cookie: Cookie name used when the refresh token
            capability does not set ``cookie``
    """

    def __init__(
        self,
        access_token: AccessToken,
        refresh_token: Optional[RefreshToken] = None,
        payload: Optional[Payload] = None,
        scope: Optional[Scope] = None,
        access_token_cookie: Optional[str] = None,
        refresh_token_cookie: Optional[str] = None,
    ):
        self.access_token = access_token
        self.refresh_token = refresh_token
        self.payload = payload if payload is not None else Payload()
        self.scope = scope if scope is not None else Scope()
        self.access_token_cookie = access_token_cookie or ACCESS_TOKEN_COOKIE
        self.refresh_token_cookie = refresh_token_cookie or REFRESH_TOKEN_COOKIE

    @classmethod
    def new(
        cls,
        config: Config,
        access_token: AccessToken,
        refresh_token: Optional[RefreshToken] = None,
    ) -> "AuthServer":
        """
        Create an auth server whose payload and scope tables come from config.

        Cookie names from the config are used for capabilities that do not
        set their own.

        Raises:
            ValueError: If configuration is invalid
        """
        config.validate()

        return cls(
            access_token,
            refresh_token,
            payload=Payload(config.payload),
            scope=Scope(config.scope),
            access_token_cookie=config.access_token_cookie,
            refresh_token_cookie=config.refresh_token_cookie,
        )

    def _require_refresh_token(self) -> RefreshToken:
        if self.refresh_token is None:
            raise ConfigurationError(MISSING_REFRESH_TOKEN_MESSAGE)
        return self.refresh_token

    def create_access_token(self, data: StringAnyMap) -> AccessTokenResult:
        """
        Create a new access token.

        Returns:
            The signed token and its canonical (uncompacted) payload

        Raises:
            ConfigurationError: If the access token capability cannot create tokens
        """
        if not has_hook(self.access_token, "create"):
            raise ConfigurationError(MISSING_CREATE_MESSAGE)

        if has_hook(self.access_token, "get_payload"):
            payload = self.access_token.get_payload(data)
        else:
            payload = data

        access_token = self.access_token.create(self.payload.create(payload))

        return AccessTokenResult(access_token=access_token, payload=payload)

    async def create_refresh_token(self, data: StringAnyMap) -> str:
        """
        Create a new refresh token.

        Raises:
            ConfigurationError: If no refresh token capability was supplied
        """
        refresh_token = self._require_refresh_token()
        return await refresh_token.create(data)

    async def create_tokens(self, data: StringAnyMap) -> TokenPair:
        """Create both an access token and a refresh token."""
        refresh_token = await self.create_refresh_token(data)
        result = self.create_access_token(data)

        return TokenPair(
            access_token=result.access_token,
            refresh_token=refresh_token,
            payload=result.payload,
        )

    def verify(self, access_token: str) -> Optional[StringAnyMap]:
        """
        Decode and return the canonical payload of an access token.

        Returns:
            The payload, or None for an empty, invalid or expired token

        Raises:
            ConfigurationError: If the access token capability cannot verify tokens
        """
        if not has_hook(self.access_token, "verify"):
            raise ConfigurationError(MISSING_VERIFY_MESSAGE)

        return verify_token(self.access_token.verify, self.payload, access_token).payload

    async def get_payload(self, refresh_token: str, reset: ResetCallback) -> Optional[StringAnyMap]:
        """
        Return the payload stored for a refresh token.

        Args:
            refresh_token: Refresh token identifier
            reset: Refreshes the cookie of the refresh token

        Returns:
            Whatever the repository returns; None means the token is unknown
        """
        store = self._require_refresh_token()
        return await store.get_payload(refresh_token, reset)

    async def remove_refresh_token(self, refresh_token: str) -> bool:
        """
        Remove an active refresh token.

        Returns:
            True if the repository removed it, False otherwise or for an empty token
        """
        store = self._require_refresh_token()

        if not refresh_token:
            return False

        removed = store.remove(refresh_token)
        if inspect.isawaitable(removed):
            removed = await removed

        if removed:
            logger.info("Refresh token removed")
        return bool(removed)

    async def refresh_access_token(self, refresh_token: str, reset: ResetCallback) -> Optional[AccessTokenResult]:
        """
        Create a new access token from the payload of a refresh token.

        Returns:
            The new access token, or None if the refresh token is empty or unknown
        """
        self._require_refresh_token()

        if not refresh_token:
            return None

        payload = await self.get_payload(refresh_token, reset)
        if payload is None:
            logger.debug("Refresh token lookup missed")
            return None

        return self.create_access_token(payload)

    async def logout(self, refresh_token: str) -> bool:
        """Revoke the refresh token of a session."""
        if not refresh_token:
            return False

        return await self.remove_refresh_token(refresh_token)

    def get_refresh_token_name(self) -> str:
        """Return the name of the cookie used for the refresh token."""
        store = self._require_refresh_token()
        return getattr(store, "cookie", None) or self.refresh_token_cookie

    def get_access_token_name(self) -> str:
        """Return the name of the cookie used for the access token."""
        return getattr(self.access_token, "cookie", None) or self.access_token_cookie

    def get_refresh_token_options(self, refresh_token: str) -> Dict[str, Any]:
        """
        Return the cookie options used to save a refresh token.

        An empty token returns options that remove the cookie.
        """
        store = self._require_refresh_token()
        options = _resolve_cookie_options(getattr(store, "cookie_options", None), refresh_token)

        return {"http_only": True, "path": "/", **options}

    def get_access_token_options(self, access_token: str) -> Dict[str, Any]:
        """
        Return the cookie options used to save an access token.

        An empty token returns options that remove the cookie.
        """
        options = _resolve_cookie_options(getattr(self.access_token, "cookie_options", None), access_token)

        return {"path": "/", **options}


def _resolve_cookie_options(resolver: Optional[CookieOptionsResolver], token: str) -> Dict[str, Any]:
    if resolver is None:
        options = {}
    elif callable(resolver):
        options = _as_dict(resolver(token))
    else:
        options = _as_dict(resolver)

    if not token:
        options.pop("max_age", None)
        options["expires"] = REMOVED_COOKIE_EXPIRES

    return options


def _as_dict(options: Any) -> Dict[str, Any]:
    if isinstance(options, CookieOptions):
        return options.to_dict()
    if dataclasses.is_dataclass(options):
        return dataclasses.asdict(options)
    return dict(options or {})
