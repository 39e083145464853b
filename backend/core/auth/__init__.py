"""
Credential hashing and session token primitives.

Exports:
  - PasswordHasher: bcrypt hashing and verification
  - TokenService: signed, time-limited session tokens
"""

from backend.core.auth.passwords import PasswordHasher
from backend.core.auth.tokens import TokenService

__all__ = ["PasswordHasher", "TokenService"]
