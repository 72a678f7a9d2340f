"""Custom exception classes for the User Directory API.

This module defines application-specific exceptions following Google Python
Style Guide. Route handlers translate them into HTTP status codes.
"""


class UserDirectoryError(Exception):
    """Base exception for all User Directory errors."""

    pass


class AuthenticationError(UserDirectoryError):
    """Raised when a username/password pair matches no user."""

    def __init__(self, message: str = "Invalid username or password"):
        super().__init__(message)


class UsernameTakenError(UserDirectoryError):
    """Raised when registering a username that is already in use."""

    def __init__(self, username: str):
        """Initialize the exception.

        Args:
            username: The username that is already registered.
        """
        self.username = username
        super().__init__(f"User '{username}' already exists")


class UserNotFoundError(UserDirectoryError):
    """Raised when a requested user cannot be found."""

    def __init__(self, user_id: int):
        """Initialize the exception.

        Args:
            user_id: The ID of the user that was not found.
        """
        self.user_id = user_id
        super().__init__(f"User with id '{user_id}' not found")


class ConfigurationError(UserDirectoryError):
    """Raised when there is a configuration error."""

    pass
