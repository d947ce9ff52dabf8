"""
User service — signup and profile update for the User aggregate.

Email uniqueness is checked with a lookup before insert and enforced by
the unique index on ``users.email``; the router translates both outcomes
into the same 400 response.
"""
import logging

from fastapi.concurrency import run_in_threadpool
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pressroom.models import User
from pressroom.schemas import SignupRequest, SignupUserResponse, UserResponse, UserUpdate
from pressroom.security import hash_password

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Serialisation helpers
# ---------------------------------------------------------------------------

def _user_to_dict(user: User) -> dict:
    """Serialise a User without its password hash."""
    return UserResponse.model_validate(user).model_dump(mode="json")


def _new_user_to_dict(user: User) -> dict:
    """Serialise a freshly created User, password hash included."""
    return SignupUserResponse.model_validate(user).model_dump(mode="json")


# ---------------------------------------------------------------------------
# Public service functions
# ---------------------------------------------------------------------------

async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def create_user(db: AsyncSession, data: SignupRequest) -> dict | None:
    """
    Register a new user and return the stored record.

    Returns None when *data.email* is already taken.  A concurrent signup
    that slips past the lookup surfaces as ``IntegrityError`` from the
    flush and is left to the caller.
    """
    if await get_user_by_email(db, data.email) is not None:
        logger.info("Signup rejected, email already registered: %s", data.email)
        return None

    # bcrypt blocks; run it in the threadpool.
    hashed = await run_in_threadpool(hash_password, data.password)

    user = User(
        email=data.email,
        password=hashed,
        name=data.name,
        age=data.age,
    )
    db.add(user)
    await db.flush()
    await db.refresh(user)

    logger.info("Created user id=%s", user.id)
    return _new_user_to_dict(user)


async def update_user(db: AsyncSession, user_id: int, data: UserUpdate) -> dict | None:
    """
    Apply the profile fields present in *data* to *user_id*.

    Only ``name`` and ``age`` can change, and only when explicitly sent
    (``model_dump(exclude_unset=True)``).  Returns None when the user does
    not exist.
    """
    user = await db.get(User, user_id)
    if user is None:
        return None

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(user, field, value)

    await db.flush()
    return _user_to_dict(user)
