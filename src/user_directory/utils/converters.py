"""Conversions between ORM rows, records and API bodies."""

from user_directory.models.user import UserModel
from user_directory.schemas.user import RegisterRequest, UserRecord, UserResponse


def candidate_to_model(candidate: RegisterRequest, created_at: str) -> UserModel:
    """Build an unsaved row from a registration candidate.

    The id is left unset so the store assigns it on insert.
    """
    return UserModel(
        username=candidate.username,
        password=candidate.password,
        email=candidate.email,
        first_name=candidate.first_name,
        last_name=candidate.last_name,
        created_at=created_at,
    )


def model_to_user(model: UserModel) -> UserRecord:
    return UserRecord.model_validate(model)


def user_to_response(user: UserRecord) -> UserResponse:
    return UserResponse(
        id=user.id,
        username=user.username,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        created_at=user.created_at,
    )
