"""
Account service orchestrator.

Registers student accounts and exchanges credentials for session tokens.

Dependencies: backend.boundary.db, backend.core.auth
System role: Account and session use case orchestration
"""

import logging

from pymongo.results import InsertOneResult

from backend.boundary.db.connection import MongoGateway
from backend.boundary.db.CRUD.student_crud import student_crud
from backend.core.auth.passwords import PasswordHasher
from backend.core.auth.tokens import TokenService
from backend.core.exceptions import InvalidCredentialsError

logger = logging.getLogger(__name__)


class AccountService:
    """Account service orchestrator."""

    def __init__(
        self,
        db: MongoGateway,
        hasher: PasswordHasher,
        tokens: TokenService,
    ) -> None:
        """
        Args:
            db: Shared MongoDB gateway
            hasher: Password hasher
            tokens: Session token issuer
        """
        self.db = db
        self.hasher = hasher
        self.tokens = tokens

    async def register(self, email: str, password: str) -> InsertOneResult:
        """
        Store a new account with a hashed password.

        Email is neither format-checked nor required to be unique.

        Args:
            email: Account email
            password: Plaintext password (never persisted)

        Returns:
            InsertOneResult: Insert outcome including the new _id
        """
        password_hash = await self.hasher.hash(password)
        result = await student_crud.create(
            self.db,
            {"email": email, "password": password_hash},
        )
        logger.info("Account registered", extra={"user_id": str(result.inserted_id)})
        return result

    async def login(self, email: str, password: str) -> str:
        """
        Verify credentials and issue a session token.

        Args:
            email: Account email (exact match)
            password: Plaintext password

        Returns:
            str: Signed session token

        Raises:
            InvalidCredentialsError: Unknown email or wrong password
        """
        user = await student_crud.get_by_email(self.db, email)
        if not user:
            logger.info("Login rejected: unknown account")
            raise InvalidCredentialsError()

        stored_hash = user.get("password")
        if not isinstance(stored_hash, str) or not await self.hasher.verify(password, stored_hash):
            logger.info("Login rejected: password mismatch", extra={"user_id": str(user["_id"])})
            raise InvalidCredentialsError()

        token = self.tokens.issue(str(user["_id"]), user["email"])
        logger.info("Login succeeded", extra={"user_id": str(user["_id"])})
        return token
