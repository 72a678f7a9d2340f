"""Authentication routes.

This module handles HTTP endpoints for user login and registration.
"""

from fastapi import APIRouter, HTTPException, status

from user_directory.core.dependencies import UserDirectoryDep
from user_directory.core.exceptions import AuthenticationError, UsernameTakenError
from user_directory.schemas.user import LoginRequest, RegisterRequest, UserResponse
from user_directory.utils.converters import user_to_response

router = APIRouter(tags=["Auth"])


@router.post("/login", response_model=UserResponse, summary="Log in")
def login(req: LoginRequest, user_directory: UserDirectoryDep) -> UserResponse:
    """Login with username and password.

    Args:
        req: Login request with username and password.
        user_directory: Injected UserDirectory instance.

    Returns:
        The matching user, without the password.

    Raises:
        HTTPException: 401 if the credentials match no user.
    """
    try:
        user = user_directory.authenticate(req.username, req.password)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    return user_to_response(user)


@router.post("/register", response_model=UserResponse, summary="Register a user")
def register(req: RegisterRequest, user_directory: UserDirectoryDep) -> UserResponse:
    """Register a new user.

    Args:
        req: Registration request with username, password, email and names.
        user_directory: Injected UserDirectory instance.

    Returns:
        The created user, including its assigned id.

    Raises:
        HTTPException: 409 if the username is already taken.
    """
    try:
        user = user_directory.register(req)
    except UsernameTakenError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
    return user_to_response(user)
