"""Authentication exceptions.

Token verification and request authentication report failures as typed
result values (see ``dockeriq_auth.schemas``). Exceptions are reserved for
programming or input errors that callers are not expected to branch on.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class WeakPasswordError(AuthError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message)
