"""User domain service."""

from typing import Optional

from tuimoney.database.base import UserRepository
from tuimoney.domain.entities import User
from tuimoney.domain.errors import InvalidDataError


class UserService:
    """Service for creating and authenticating users."""

    def __init__(self, db: UserRepository):
        """Initialize user service.

        Args:
            db: User repository
        """
        self.db = db

    def create_user(self, username: str, password: str) -> User:
        """Create a user.

        Args:
            username: Username, surrounding whitespace is trimmed
            password: Plaintext password; only its hash is stored

        Returns:
            Created user

        Raises:
            InvalidDataError: If the username is blank or the password is empty
            StorageError: If the username is already taken
        """
        username = (username or "").strip()
        if not username:
            raise InvalidDataError("Username cannot be empty")
        if not password:
            raise InvalidDataError("Password cannot be empty")
        return self.db.create_user(username, password)

    def verify_user(self, username: str, password: str) -> Optional[User]:
        """Authenticate a user.

        Returns:
            The user when the password matches, otherwise None. Unknown
            usernames are not distinguished from wrong passwords.
        """
        username = (username or "").strip()
        if not username:
            return None
        return self.db.verify_user(username, password)

    def list_users(self) -> list[str]:
        """List all usernames in lexicographic order."""
        return self.db.list_users()
