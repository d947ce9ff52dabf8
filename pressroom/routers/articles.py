import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pressroom.database import get_db
from pressroom.errors import InternalServerError
from pressroom.responses import success
from pressroom.schemas import Envelope, ErrorEnvelope
from pressroom.services import article_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/articles", tags=["articles"])


@router.get("", response_model=Envelope, responses={500: {"model": ErrorEnvelope}})
async def list_articles(db: AsyncSession = Depends(get_db)):
    try:
        articles = await article_service.get_articles(db)
    except Exception:
        logger.exception("Listing articles failed")
        raise InternalServerError("An error occurred while fetching articles")
    return success(200, articles, "Articles fetched successfully")
