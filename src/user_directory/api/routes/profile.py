"""Profile routes.

This module handles HTTP endpoints for reading and updating a user's profile.
"""

from fastapi import APIRouter, HTTPException, status

from user_directory.core.dependencies import UserDirectoryDep
from user_directory.core.exceptions import UserNotFoundError
from user_directory.schemas.user import UpdateProfileRequest, UserResponse
from user_directory.utils.converters import user_to_response

router = APIRouter(prefix="/profile", tags=["Profile"])


@router.get("/{user_id}", response_model=UserResponse, summary="Get a user's profile")
def get_profile(user_id: int, user_directory: UserDirectoryDep) -> UserResponse:
    try:
        user = user_directory.fetch_profile(user_id)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return user_to_response(user)


@router.put("/{user_id}", response_model=UserResponse, summary="Update a user's profile")
def update_profile(
    user_id: int,
    req: UpdateProfileRequest,
    user_directory: UserDirectoryDep,
) -> UserResponse:
    """Replace the email, first name and last name of a user.

    Args:
        user_id: Id of the user to update.
        req: New email, first name and last name.
        user_directory: Injected UserDirectory instance.

    Returns:
        The updated user.

    Raises:
        HTTPException: 404 if no user has that id.
    """
    try:
        user = user_directory.update_profile(user_id, req)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return user_to_response(user)
