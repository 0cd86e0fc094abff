"""
User service.

Business logic for profiles: creation on first sign-in, reads and
edits of the user-editable fields.  The streak columns are never
written here.
"""

import datetime

from sqlmodel import Session

from app.db.repositories.user import UserRepository
from app.models.user import User
from app.schemas.user import Identity, UnitPreference, UserUpdate


class UserService:
    """Service for user-related business logic."""

    def __init__(self, session: Session):
        """
        Initialize service with database session.

        Args:
            session: SQLModel database session
        """
        self.repository = UserRepository(session)

    def ensure_profile(self, identity: Identity) -> User:
        """
        Return the profile of an identity, creating it on first sight.

        Args:
            identity: Signed-in identity

        Returns:
            Existing or newly created profile
        """
        user = self.repository.get_by_id(identity.id)
        if user:
            return user

        user = User(id=identity.id, email=identity.email or "", display_name=identity.display_name or "User",
                    photo_url=identity.photo_url, unit_preference=UnitPreference.KG.value, weekly_goal=4, )
        return self.repository.create(user)

    def update_profile(self, user: User, data: UserUpdate) -> User:
        """
        Update body metrics and preferences.

        Args:
            user: Profile to update
            data: Fields to change; unset fields are left alone

        Returns:
            Updated profile
        """
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        if "unit_preference" in changes:
            changes["unit_preference"] = UnitPreference(changes["unit_preference"]).value
        for field, value in changes.items():
            setattr(user, field, value)
        user.updated_at = datetime.datetime.utcnow()
        return self.repository.update(user)
