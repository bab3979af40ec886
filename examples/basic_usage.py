"""
Basic tokenauth usage example.

This example demonstrates:
- Writing a refresh token capability over your own storage
- Issuing PASETO access tokens with compact claim names
- Checking permissions from the token scope
"""

import asyncio
import uuid

from tokenauth import AuthServer, Payload, RefreshToken, Scope
from tokenauth.auth.paseto import PasetoAccessToken, PasetoConfig


class SessionTable(RefreshToken):
    """Refresh tokens kept in a dict standing in for a database table."""

    cookie = "session"

    def __init__(self):
        self.rows = {}

    async def create(self, data):
        token = uuid.uuid4().hex
        self.rows[token] = {"id": data["id"], "admin": data.get("admin", False)}
        return token

    async def get_payload(self, refresh_token, reset):
        row = self.rows.get(refresh_token)
        if row is not None:
            reset()
        return row

    def remove(self, refresh_token):
        return self.rows.pop(refresh_token, None) is not None


async def basic_example():
    """Demonstrate basic tokenauth usage"""
    print("Basic tokenauth Example")
    print("=" * 30)

    scope = Scope({"admin": "a", "posts": "p"})

    def build_payload(user):
        rules = ["posts:read"]
        if user.get("admin"):
            rules += ["admin:read", "admin:write"]
        return {"id": user["id"], "scope": scope.create(rules)}

    auth = AuthServer(
        access_token=PasetoAccessToken(PasetoConfig(secret_key="example-secret"),
                                       payload_builder=build_payload),
        refresh_token=SessionTable(),
        payload=Payload({"uId": "id", "s": "scope"}),
        scope=scope,
    )

    tokens = await auth.create_tokens({"id": "user_42", "admin": True})
    print(f"✓ Tokens issued, scope: {tokens.payload['scope']}")

    user = auth.verify(tokens.access_token)
    permissions = scope.parse(user["scope"])
    print(f"✓ Token verified for {user['id']}: {permissions}")
    print(f"  - Can write posts: {scope.has(permissions, 'posts:write')}")
    print(f"  - Can administer: {scope.has(permissions, ['admin:write', 'admin:delete'])}")

    refreshed = await auth.refresh_access_token(
        tokens.refresh_token,
        lambda: print(f"  - Cookie '{auth.get_refresh_token_name()}' extended"),
    )
    print(f"✓ Access token refreshed: {refreshed is not None}")

    await auth.logout(tokens.refresh_token)
    print(f"✓ Logged out, refresh rejected: {await auth.refresh_access_token(tokens.refresh_token, lambda: None) is None}")


if __name__ == "__main__":
    asyncio.run(basic_example())
