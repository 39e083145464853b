"""
Password hashing.

One-way bcrypt hashing of account passwords. Hashing is deliberately slow,
so the work runs in a worker thread to keep the event loop responsive.

Dependencies: bcrypt
System role: Credential hasher
"""

import asyncio
import logging

import bcrypt

logger = logging.getLogger(__name__)

# bcrypt only uses the first 72 bytes of the secret
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class PasswordHasher:
    """bcrypt password hasher with a fixed cost factor."""

    def __init__(self, rounds: int = 12) -> None:
        """
        Args:
            rounds: bcrypt cost factor (log2 of iterations)
        """
        self.rounds = rounds

    def hash_sync(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_encode(password), salt).decode("utf-8")

    def verify_sync(self, password: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(_encode(password), hashed.encode("utf-8"))
        except ValueError:
            logger.warning("Stored password hash is malformed")
            return False

    async def hash(self, password: str) -> str:
        """
        Hash a plaintext password.

        Args:
            password: Plaintext password

        Returns:
            str: bcrypt hash including salt and cost ($2b$12$...)
        """
        return await asyncio.to_thread(self.hash_sync, password)

    async def verify(self, password: str, hashed: str) -> bool:
        """
        Check a plaintext password against a stored hash.

        Returns:
            bool: True on match, False on mismatch or malformed hash
        """
        return await asyncio.to_thread(self.verify_sync, password, hashed)
