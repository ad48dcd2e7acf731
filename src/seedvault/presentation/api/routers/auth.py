"""Authentication router for user registration and login."""

import logging

from fastapi import APIRouter, status

from seedvault.domain.shared.exceptions import ErrorCode
from seedvault.presentation.api.dependencies import AuthService, DBSession
from seedvault.presentation.api.exception_handlers import APIError
from seedvault.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    SignupRequest,
    UserResponse,
)
from seedvault_auth import InvalidCredentialsError, WeakPasswordError
from seedvault_identity import EmailAlreadyExistsError, InvalidEmailError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"description": "Invalid email or weak password"},
        409: {"description": "Email already registered"},
    },
)
async def signup(
    request: SignupRequest,
    auth_service: AuthService,
    session: DBSession,
) -> UserResponse:
    """
    Create a new account.

    No token is issued; clients log in afterwards.
    """
    try:
        user = await auth_service.register(
            email=request.email,
            password=request.password,
        )
        await session.commit()
    except EmailAlreadyExistsError as e:
        await session.rollback()
        raise APIError(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email address is already registered",
            code=ErrorCode.EMAIL_EXISTS,
        ) from e
    except InvalidEmailError as e:
        await session.rollback()
        raise APIError(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
            code=ErrorCode.INVALID_EMAIL,
        ) from e
    except WeakPasswordError as e:
        await session.rollback()
        raise APIError(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
            code=ErrorCode.WEAK_PASSWORD,
        ) from e
    except Exception:
        await session.rollback()
        raise

    logger.info("New user registered: %s", user.id)
    return UserResponse.model_validate(user)


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    session: DBSession,
) -> AuthResponse:
    """
    Authenticate with email and password.

    Unknown emails and wrong passwords produce the same response. A stored
    digest made with an older bcrypt cost is replaced on success.
    """
    try:
        user, access_token = await auth_service.login(
            email=request.email,
            password=request.password,
        )
        await session.commit()
    except InvalidCredentialsError as e:
        await session.rollback()
        raise APIError(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            code=ErrorCode.INVALID_CREDENTIALS,
        ) from e
    except Exception:
        await session.rollback()
        raise

    return AuthResponse(
        access_token=access_token,
        expires_in=auth_service.access_token_expire_seconds,
        user=UserResponse.model_validate(user),
    )
