"""User directory.

This module owns the user records: login checks, registration with a
username uniqueness check, and profile reads and updates.

Passwords are stored and compared as plain strings, exactly as supplied.
Nothing here hashes them; callers that need hashed credentials must add
that deliberately rather than assume it happens.
"""

import logging
from datetime import datetime

import pytz
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from user_directory.core.exceptions import (
    AuthenticationError,
    UsernameTakenError,
    UserNotFoundError,
)
from user_directory.models.user import UserModel
from user_directory.schemas.user import RegisterRequest, UpdateProfileRequest, UserRecord
from user_directory.utils.converters import candidate_to_model, model_to_user

logger = logging.getLogger(__name__)

# Bounds of a signed 64-bit INTEGER column
MIN_USER_ID = -(2**63)
MAX_USER_ID = 2**63 - 1


class UserDirectory:
    """Manages user records using SQLAlchemy."""

    def __init__(self, db: Session):
        """Initialize UserDirectory.

        Args:
            db: SQLAlchemy Session used as the record store.
        """
        self.db = db

    def authenticate(self, username: str, password: str) -> UserRecord:
        """Find the user whose username and password both match exactly.

        Args:
            username: Login name, compared case-sensitively.
            password: Credential string, compared verbatim.

        Returns:
            The matching UserRecord.

        Raises:
            AuthenticationError: If no user matches both values.
        """
        model = (
            self.db.query(UserModel)
            .filter(UserModel.username == username, UserModel.password == password)
            .first()
        )
        if model is None:
            logger.warning("Failed login for username: %s", username)
            raise AuthenticationError()
        return model_to_user(model)

    def register(self, candidate: RegisterRequest) -> UserRecord:
        """Create a new user.

        Args:
            candidate: Username, password, email and names of the new user.

        Returns:
            The persisted UserRecord, including its assigned id.

        Raises:
            UsernameTakenError: If the username already exists.
        """
        if self.count_username(candidate.username):
            logger.warning("Registration rejected, username taken: %s", candidate.username)
            raise UsernameTakenError(candidate.username)

        model = candidate_to_model(candidate, created_at=datetime.now(pytz.utc).isoformat())

        # Two requests can both pass the check above; the unique index on
        # username rejects the second insert.
        try:
            self.db.add(model)
            self.db.commit()
            self.db.refresh(model)
        except IntegrityError as e:
            self.db.rollback()
            if self.count_username(candidate.username):
                raise UsernameTakenError(candidate.username) from e
            raise

        logger.info("Registered user %s with id %s", model.username, model.id)
        return model_to_user(model)

    def fetch_profile(self, user_id: int) -> UserRecord:
        """Get a user by id.

        Args:
            user_id: User id to look up.

        Returns:
            The UserRecord with that id.

        Raises:
            UserNotFoundError: If no user has that id.
        """
        return model_to_user(self._get_model(user_id))

    def update_profile(self, user_id: int, patch: UpdateProfileRequest) -> UserRecord:
        """Overwrite a user's email, first name and last name.

        Username, password and id are never touched.

        Args:
            user_id: Id of the user to update.
            patch: New email, first name and last name.

        Returns:
            The updated UserRecord.

        Raises:
            UserNotFoundError: If no user has that id.
        """
        model = self._get_model(user_id)
        model.email = patch.email
        model.first_name = patch.first_name
        model.last_name = patch.last_name
        self.db.commit()
        self.db.refresh(model)
        logger.info("Updated profile of user %s", user_id)
        return model_to_user(model)

    def count_username(self, username: str) -> int:
        """Count users holding exactly this username (0 or 1)."""
        return self.db.query(UserModel).filter(UserModel.username == username).count()

    def _get_model(self, user_id: int) -> UserModel:
        # Ids outside the 64-bit INTEGER range cannot exist in the table
        if not MIN_USER_ID <= user_id <= MAX_USER_ID:
            raise UserNotFoundError(user_id)
        model = self.db.get(UserModel, user_id)
        if model is None:
            raise UserNotFoundError(user_id)
        return model
