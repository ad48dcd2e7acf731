"""Users router for the authenticated user's own profile and account."""

import logging

from fastapi import APIRouter, status

from seedvault.application.commands.account import DeleteAccountCommand
from seedvault.domain.shared.exceptions import ErrorCode
from seedvault.presentation.api.dependencies import (
    DBSession,
    ProfileServiceDep,
    RepoFactory,
)
from seedvault.presentation.api.exception_handlers import APIError
from seedvault.presentation.api.schemas.auth import (
    DeleteAccountResponse,
    UpdateProfileRequest,
    UserResponse,
)
from seedvault_identity import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _user_not_found() -> APIError:
    return APIError(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="User not found",
        code=ErrorCode.USER_NOT_FOUND,
    )


@router.get(
    "/me",
    summary="Get current user profile",
    responses={
        200: {"description": "Profile of the authenticated user"},
        401: {"description": "Not authenticated"},
        404: {"description": "Account no longer exists"},
    },
)
async def get_me(profile_service: ProfileServiceDep) -> UserResponse:
    """Return the profile of the authenticated user."""
    try:
        user = await profile_service.get_profile()
    except UserNotFoundError as e:
        raise _user_not_found() from e

    return UserResponse.model_validate(user)


@router.patch(
    "/me",
    summary="Update current user profile",
    responses={
        200: {"description": "Profile updated"},
        400: {"description": "Invalid email"},
        409: {"description": "Email already in use"},
    },
)
async def update_me(
    request: UpdateProfileRequest,
    profile_service: ProfileServiceDep,
    session: DBSession,
) -> UserResponse:
    try:
        user = await profile_service.update_email(request.email)
        await session.commit()
    except EmailAlreadyExistsError as e:
        await session.rollback()
        raise APIError(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email address is already in use by another account.",
            code=ErrorCode.EMAIL_EXISTS,
        ) from e
    except InvalidEmailError as e:
        await session.rollback()
        raise APIError(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
            code=ErrorCode.INVALID_EMAIL,
        ) from e
    except UserNotFoundError as e:
        await session.rollback()
        raise _user_not_found() from e
    except Exception:
        await session.rollback()
        raise

    return UserResponse.model_validate(user)


@router.delete(
    "/me",
    summary="Delete current user account",
    responses={
        200: {"description": "Account and all stored secrets deleted"},
        401: {"description": "Not authenticated"},
    },
)
async def delete_me(
    factory: RepoFactory,
    session: DBSession,
) -> DeleteAccountResponse:
    """
    Permanently delete the account and every stored seed phrase.

    Secrets and the user record are removed in one transaction; on any
    failure nothing is deleted.
    """
    command = DeleteAccountCommand.from_factory(factory)

    try:
        deleted_secrets = await command.execute()
        await session.commit()
    except UserNotFoundError as e:
        await session.rollback()
        raise _user_not_found() from e
    except Exception:
        await session.rollback()
        logger.exception(
            "Account deletion failed for user %s",
            factory.current_user.user_id,
        )
        raise

    return DeleteAccountResponse(
        message="Account and all associated data deleted successfully.",
        deleted_secrets=deleted_secrets,
    )
