"""
Authentication error classes for tokenauth.
"""

MISSING_REFRESH_TOKEN_MESSAGE = "options.refreshToken is required to use this method"
MISSING_CREATE_MESSAGE = "accessToken.create should be a function"
MISSING_VERIFY_MESSAGE = "accessToken.verify should be a function"


class AuthError(Exception):
    """Base authentication error."""

    def __init__(self, message: str, error_code: str = None, details: dict = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "AUTH_ERROR"
        self.details = details or {}


class ConfigurationError(AuthError):
    """A required collaborator was not supplied to the auth server."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, "CONFIGURATION_ERROR", details)


class TokenError(AuthError):
    """Token-related error."""

    def __init__(self, message: str, error_code: str = None, details: dict = None):
        super().__init__(message, error_code or "TOKEN_ERROR", details)


class ExpiredTokenError(TokenError):
    """Token has expired."""

    def __init__(self, message: str = "Token has expired", details: dict = None):
        super().__init__(message, "EXPIRED_TOKEN", details)


class InvalidTokenError(TokenError):
    """Token is invalid."""

    def __init__(self, message: str = "Token is invalid", details: dict = None):
        super().__init__(message, "INVALID_TOKEN", details)
