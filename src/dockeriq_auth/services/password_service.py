"""bcrypt password encoding for stored user credentials."""

import bcrypt

from dockeriq_auth.exceptions import WeakPasswordError

# Version markers of the bcrypt modular crypt format
BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")


class PasswordHashingService:
    """Encode and check user passwords with bcrypt.

    Stored credentials are recognised by their bcrypt prefix, which lets
    callers encode a password only once no matter how often they save.

    Examples
    --------
    >>> passwords = PasswordHashingService(rounds=4)
    >>> encoded = passwords.hash("warehouse-key-01")
    >>> passwords.is_hashed(encoded)
    True
    >>> passwords.verify("warehouse-key-01", encoded)
    True
    """

    MIN_LENGTH = 8
    MAX_LENGTH = 72  # bcrypt ignores everything past 72 bytes

    def __init__(self, rounds: int = 12):
        self._rounds = rounds

    def hash(self, password: str) -> str:
        """Encode a plaintext password.

        Raises
        ------
        WeakPasswordError
            If the password is empty, too short or too long for bcrypt
        """
        self.validate_strength(password)
        encoded = bcrypt.hashpw(
            password.encode("utf-8"),
            bcrypt.gensalt(rounds=self._rounds),
        )
        return encoded.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        # A stored value that is not a bcrypt hash never matches
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError):
            return False

    @staticmethod
    def is_hashed(value: str | None) -> bool:
        return bool(value) and value.startswith(BCRYPT_PREFIXES)

    def validate_strength(self, password: str) -> None:
        if not password:
            raise WeakPasswordError("Password cannot be empty")
        if len(password) < self.MIN_LENGTH:
            msg = f"Password must be at least {self.MIN_LENGTH} characters"
            raise WeakPasswordError(msg)
        if len(password.encode("utf-8")) > self.MAX_LENGTH:
            msg = f"Password cannot exceed {self.MAX_LENGTH} bytes"
            raise WeakPasswordError(msg)
