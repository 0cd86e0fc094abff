"""
User repository.

Handles database operations for User model.
"""

from typing import Optional

from sqlmodel import Session

from app.models.user import User


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def create(self, user: User) -> User:
        """
        Create a new user profile.

        Args:
            user: User instance to create

        Returns:
            Created user
        """
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def get_by_id(self, user_id: str) -> Optional[User]:
        """
        Get user by identity ID.

        Args:
            user_id: Opaque identity ID

        Returns:
            User instance if found, None otherwise
        """
        return self.session.get(User, user_id)

    def update(self, user: User) -> User:
        """
        Update an existing user.

        Args:
            user: User instance with updated data

        Returns:
            Updated user
        """
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user
