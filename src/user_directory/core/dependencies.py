"""Dependency injection module for FastAPI.

This module provides dependency injection functions for FastAPI routes.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from user_directory.core.database import get_db
from user_directory.utils.user_directory import UserDirectory


def get_user_directory(db: Session = Depends(get_db)) -> UserDirectory:
    """Get UserDirectory instance with request-scoped DB session.

    Args:
        db: Database session.

    Returns:
        UserDirectory instance.
    """
    return UserDirectory(db)


# Type aliases for dependency injection
UserDirectoryDep = Annotated[UserDirectory, Depends(get_user_directory)]
