"""Credential check and token issuance."""
import logging

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import AsyncSession

from pressroom.schemas import LoginRequest
from pressroom.security import create_access_token, verify_password
from pressroom.services.user_service import get_user_by_email

logger = logging.getLogger(__name__)


async def authenticate(db: AsyncSession, data: LoginRequest) -> str | None:
    """
    Return a bearer token for valid credentials, None otherwise.

    An unknown email and a wrong password both return None so callers
    cannot tell them apart.
    """
    user = await get_user_by_email(db, data.email)
    if user is None:
        logger.info("Login failed: unknown email")
        return None

    if not await run_in_threadpool(verify_password, data.password, user.password):
        logger.info("Login failed: bad password for user id=%s", user.id)
        return None

    return create_access_token(user.id)
