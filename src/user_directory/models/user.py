"""User database model.

This module defines the User database model using SQLAlchemy.
"""

from sqlalchemy import Column, Integer, String
from .base import Base


class UserModel(Base):
    """User database model."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    username = Column(String, unique=True, index=True, nullable=False)
    # Stored as given; login compares it verbatim.
    password = Column(String, nullable=False)
    email = Column(String, nullable=True)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    created_at = Column(String, nullable=False)  # ISO format string
