"""
tokenauth Demo Application

This demo walks through the token lifecycle:
- Issuing an access token and a refresh token
- Verifying the access token
- Refreshing the access token from the refresh token
- Logging out
"""

import asyncio
import logging
import sys

from tokenauth.auth.jwt import JWTAccessToken
from tokenauth.core.auth import AuthServer
from tokenauth.core.config import Config, TokenConfig
from tokenauth.tokenstore.memory import MemoryRefreshTokenStore

logger = logging.getLogger("tokenauth.demo")


async def run_demo() -> int:
    """Run the demo flow, returning a process exit code."""
    config = Config(
        payload={"uId": "id", "cId": "companyId", "scope": "scope"},
        scope={"admin": "a"},
        token_config=TokenConfig(secret_key="demo-secret-key-change-me-0123456789"),
    )

    def build_payload(user):
        scope = auth.scope.create(["admin:read", "admin:write"]) if user.get("admin") else ""
        return {"id": user["id"], "companyId": user["companyId"], "scope": scope}

    access_token = JWTAccessToken.from_config(config.token_config, payload_builder=build_payload)
    refresh_token = MemoryRefreshTokenStore(ttl=config.refresh_token_expiry)
    auth = AuthServer.new(config, access_token, refresh_token)

    print("tokenauth Demo Application")
    print("=" * 50)

    user = {"id": "user_123", "companyId": "company_123", "admin": True}
    tokens = await auth.create_tokens(user)
    print("✓ Issued tokens")
    print(f"  - Payload: {tokens.payload}")

    payload = auth.verify(tokens.access_token)
    if payload is None:
        print("✗ Access token was rejected")
        return 1
    print("✓ Access token verified")
    print(f"  - Permissions: {auth.scope.parse(payload['scope'])}")
    print(f"  - admin:write granted: {auth.scope.has(auth.scope.parse(payload['scope']), 'admin:write')}")

    def reset():
        logger.info(f"Cookie {auth.get_refresh_token_name()} refreshed")

    refreshed = await auth.refresh_access_token(tokens.refresh_token, reset)
    if refreshed is None:
        print("✗ Refresh token was rejected")
        return 1
    print("✓ Access token refreshed from refresh token")

    print(f"✓ Logged out: {await auth.logout(tokens.refresh_token)}")
    print(f"  - Refresh token still valid: {await auth.refresh_access_token(tokens.refresh_token, reset) is not None}")
    print(f"  - Forged token accepted: {auth.verify(tokens.access_token + 'x') is not None}")

    return 0


def main() -> int:
    """Console script entry point."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    return asyncio.run(run_demo())


if __name__ == "__main__":
    sys.exit(main())
