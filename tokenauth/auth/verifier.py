"""
Access token verification helpers.

Verification never raises for a bad token: an empty, malformed, forged or
expired token all produce ``None`` so callers can branch on
"not authenticated" uniformly.
"""

import logging
from typing import Any, Callable, Dict, Optional

from ..core.types import VerificationResult
from .payload import Payload

logger = logging.getLogger(__name__)

VerifyFunction = Callable[[str], Dict[str, Any]]


def verify_token(verify: VerifyFunction, payload: Payload, access_token: str) -> VerificationResult:
    """
    Run a verification delegate and parse its payload.

    Any exception raised by the delegate, or while parsing what it returned,
    is captured in the result.
    """
    if not access_token:
        return VerificationResult(valid=False)

    try:
        token_payload = payload.parse(verify(access_token))
    except Exception as e:
        logger.debug(f"Access token rejected: {type(e).__name__}")
        return VerificationResult(valid=False, error=e)

    return VerificationResult(valid=True, payload=token_payload)


def Verifier(verify: VerifyFunction, payload: Optional[Payload] = None) -> Callable[[str], Optional[Dict[str, Any]]]:
    """
    Return a function that verifies an access token.

    Args:
        verify: Function returning the compact payload of a token, raising
            when the token is invalid
        payload: Payload mapping applied to verified tokens

    Returns:
        Function mapping a token to its canonical payload or None
    """
    payload = payload or Payload()

    def verify_access_token(access_token: str) -> Optional[Dict[str, Any]]:
        return verify_token(verify, payload, access_token).payload

    return verify_access_token


class AuthKey:
    """Verifier for services that consume access tokens without issuing them."""

    def __init__(self, verify: VerifyFunction, payload: Optional[Payload] = None):
        self.payload = payload or Payload()
        self.verify_fn = verify

    def verify(self, access_token: str) -> Optional[Dict[str, Any]]:
        """Decode and return the payload of an access token."""
        return verify_token(self.verify_fn, self.payload, access_token).payload
