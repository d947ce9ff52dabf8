import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pressroom.database import get_db
from pressroom.errors import ApiError, InternalServerError, NotFoundError
from pressroom.responses import success
from pressroom.schemas import ArticleCreate, Envelope, ErrorEnvelope, UserUpdate
from pressroom.services import article_service, user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])

USER_NOT_FOUND = "User not found"


@router.patch(
    "/{user_id}",
    response_model=Envelope,
    responses={404: {"model": ErrorEnvelope}, 500: {"model": ErrorEnvelope}},
)
async def update_user(user_id: int, data: UserUpdate, db: AsyncSession = Depends(get_db)):
    try:
        user = await user_service.update_user(db, user_id, data)
    except ApiError:
        raise
    except Exception:
        logger.exception("Updating user id=%s failed", user_id)
        raise InternalServerError("An error occurred while updating the user")

    if user is None:
        raise NotFoundError(USER_NOT_FOUND)
    return success(200, user, "User updated successfully")


@router.post(
    "/{user_id}/articles",
    status_code=201,
    response_model=Envelope,
    responses={404: {"model": ErrorEnvelope}, 500: {"model": ErrorEnvelope}},
)
async def create_article(user_id: int, data: ArticleCreate, db: AsyncSession = Depends(get_db)):
    try:
        article = await article_service.create_article(db, user_id, data)
    except ApiError:
        raise
    except Exception:
        logger.exception("Creating article for user id=%s failed", user_id)
        raise InternalServerError("An error occurred while creating the article")

    if article is None:
        raise NotFoundError(USER_NOT_FOUND)
    return success(201, article, "Article created successfully")
