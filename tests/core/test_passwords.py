"""
Tests for bcrypt password hashing.
"""

import pytest

from backend.core.auth.passwords import PasswordHasher


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


class TestPasswordHasher:
    """Tests for PasswordHasher hashing and verification."""

    @pytest.mark.asyncio
    async def test_hash_uses_configured_cost(self, hasher: PasswordHasher) -> None:
        hashed = await hasher.hash("MySecurePassword123!")

        assert hashed.startswith("$2b$04$")

    def test_default_cost_is_twelve(self) -> None:
        assert PasswordHasher().rounds == 12

    @pytest.mark.asyncio
    async def test_hash_uses_unique_salt(self, hasher: PasswordHasher) -> None:
        first = await hasher.hash("same")
        second = await hasher.hash("same")

        assert first != second
        assert await hasher.verify("same", first)
        assert await hasher.verify("same", second)

    @pytest.mark.asyncio
    async def test_verify_rejects_wrong_password(self, hasher: PasswordHasher) -> None:
        hashed = await hasher.hash("MyPassword123!")

        assert await hasher.verify("mypassword123!", hashed) is False
        assert await hasher.verify("", hashed) is False

    @pytest.mark.asyncio
    async def test_verify_malformed_hash_returns_false(self, hasher: PasswordHasher) -> None:
        assert await hasher.verify("anything", "not-a-bcrypt-hash") is False

    def test_long_passwords_are_accepted(self, hasher: PasswordHasher) -> None:
        password = "x" * 100
        hashed = hasher.hash_sync(password)

        assert hasher.verify_sync(password, hashed)
