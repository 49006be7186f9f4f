"""
Password verifiers backed by bcrypt.

Raw passwords never leave this module in any form other than a one-way
bcrypt hash.

Dependencies: bcrypt
System role: Credential hashing for the credential store
"""

import bcrypt

from docvault.core.exceptions import ValidationError

# bcrypt only consumes the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """Hash and verify passwords with a fixed bcrypt cost factor."""

    def __init__(self, rounds: int = 12) -> None:
        """
        Initialize hasher.

        Args:
            rounds: bcrypt cost factor (4-31)
        """
        self.rounds = rounds
        # Checked against when the username is unknown so both login
        # failure paths do the same amount of work.
        self._dummy_hash = bcrypt.hashpw(b"docvault-dummy", bcrypt.gensalt(rounds=rounds))

    def hash(self, password: str) -> str:
        """
        Hash password using bcrypt.

        Args:
            password: Plain text password

        Returns:
            Bcrypt hash string

        Raises:
            ValidationError: If the password is empty or longer than 72 bytes
        """
        encoded = password.encode("utf-8")
        if not encoded:
            raise ValidationError("Password must not be empty", field="password")
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes", field="password"
            )
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(encoded, salt).decode("utf-8")

    def verify(self, password: str, hashed_password: str) -> bool:
        """
        Verify password against hash.

        Args:
            password: Plain text password
            hashed_password: Bcrypt hash

        Returns:
            True if password matches, False otherwise
        """
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))
        except ValueError:
            # Malformed stored hash or over-long candidate
            return False

    def verify_dummy(self, password: str) -> bool:
        """Burn one verification against a throwaway hash; always False."""
        try:
            bcrypt.checkpw(password.encode("utf-8"), self._dummy_hash)
        except ValueError:
            pass
        return False
