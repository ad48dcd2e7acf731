"""Secrets router for storing, listing, revealing and deleting seed phrases."""

import logging

from fastapi import APIRouter, Response, status

from seedvault.application.commands import CreateSecretCommand, DeleteSecretCommand
from seedvault.application.queries import ListSecretMetadataQuery, RevealSecretQuery
from seedvault.domain.secrets import WALLET_TYPES
from seedvault.presentation.api.dependencies import DBSession, RepoFactory
from seedvault.presentation.api.schemas.secrets import (
    SecretCreatedResponse,
    SecretCreateRequest,
    SecretListResponse,
    SecretMetadataResponse,
    SecretRevealResponse,
    WalletTypesResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/wallet-types",
    summary="List supported wallet types",
    responses={200: {"description": "The wallet type catalogue"}},
)
async def list_wallet_types() -> WalletTypesResponse:
    """Return the closed catalogue of wallet types. No authentication."""
    return WalletTypesResponse(wallet_types=list(WALLET_TYPES))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Store a seed phrase",
    responses={
        201: {"description": "Seed phrase stored"},
        400: {"description": "Invalid phrase, wallet name, wallet type or email"},
        401: {"description": "Not authenticated"},
    },
)
async def create_secret(
    request: SecretCreateRequest,
    factory: RepoFactory,
    session: DBSession,
) -> SecretCreatedResponse:
    """
    Store a recovery phrase for the authenticated user.

    The phrase is normalized (trimmed, lowercased, single-spaced) before
    storage. The owner is always the caller.
    """
    command = CreateSecretCommand.from_factory(factory)

    try:
        secret_id = await command.execute(
            wallet_name=request.wallet_name,
            wallet_type=request.wallet_type,
            secret_phrase=request.secret_phrase,
            associated_email=request.associated_email,
            associated_email_password=request.associated_email_password,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return SecretCreatedResponse(id=secret_id)


@router.get(
    "",
    summary="List stored seed phrases",
    responses={
        200: {"description": "Metadata of the caller's secrets, newest first"},
        401: {"description": "Not authenticated"},
    },
)
async def list_secrets(factory: RepoFactory) -> SecretListResponse:
    """List metadata only. Phrases and passwords never appear here."""
    result = await ListSecretMetadataQuery.from_factory(factory).execute()

    return SecretListResponse(
        secrets=[SecretMetadataResponse.model_validate(s) for s in result.secrets],
        total=result.total_count,
    )


@router.get(
    "/{secret_id}/reveal",
    summary="Reveal a stored seed phrase",
    responses={
        200: {"description": "Full record including the phrase"},
        400: {"description": "Malformed id"},
        404: {"description": "No such secret for this user"},
    },
)
async def reveal_secret(secret_id: str, factory: RepoFactory) -> SecretRevealResponse:
    """
    Return the full record of one secret.

    Secrets of other users are reported exactly like missing ones.
    """
    revealed = await RevealSecretQuery.from_factory(factory).execute(secret_id)
    logger.info(
        "Secret %s revealed by user %s",
        revealed.id,
        factory.current_user.user_id,
    )
    return SecretRevealResponse.model_validate(revealed)


@router.delete(
    "/{secret_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a stored seed phrase",
    responses={
        204: {"description": "Deleted"},
        400: {"description": "Malformed id"},
        404: {"description": "No such secret for this user"},
    },
)
async def delete_secret(
    secret_id: str,
    factory: RepoFactory,
    session: DBSession,
) -> Response:
    command = DeleteSecretCommand.from_factory(factory)

    try:
        await command.execute(secret_id)
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return Response(status_code=status.HTTP_204_NO_CONTENT)
