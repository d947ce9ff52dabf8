"""
Article service — creation and listing for the Article aggregate.

Design notes
------------
- Authors are loaded with ``joinedload`` on the listing query so the
  whole list costs one SQL statement regardless of its length.
- Rows come back in insertion order (``Article.id``); there is no
  pagination.
- Service functions flush but do not commit; the transaction boundary
  is owned by the ``get_db`` dependency in the router layer.
"""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from pressroom.models import Article, User
from pressroom.schemas import ArticleCreate, ArticleListItem, ArticleResponse, AuthorSummary

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Serialisation helpers
# ---------------------------------------------------------------------------

def _article_to_dict(article: Article) -> dict:
    """Serialise a new Article; ``author`` is the owning user's id."""
    return ArticleResponse(
        id=article.id,
        title=article.title,
        description=article.description,
        author=article.author_id,
        created_at=article.created_at,
    ).model_dump(mode="json")


def _article_list_item_to_dict(article: Article) -> dict:
    """Serialise an Article with its author resolved to ``{id, name}``."""
    author = article.author
    return ArticleListItem(
        id=article.id,
        title=article.title,
        description=article.description,
        author=AuthorSummary(id=author.id, name=author.name) if author else None,
        created_at=article.created_at,
    ).model_dump(mode="json")


# ---------------------------------------------------------------------------
# Public service functions
# ---------------------------------------------------------------------------

async def create_article(db: AsyncSession, user_id: int, data: ArticleCreate) -> dict | None:
    """
    Create an article owned by *user_id* and return it.

    Returns None, persisting nothing, when the user does not exist.
    """
    user = await db.get(User, user_id)
    if user is None:
        return None

    article = Article(
        title=data.title,
        description=data.description,
        author_id=user.id,
    )
    db.add(article)
    await db.flush()
    await db.refresh(article)

    logger.info("Created article id=%s for user id=%s", article.id, user.id)
    return _article_to_dict(article)


async def get_articles(db: AsyncSession) -> list[dict]:
    """Return every article with its author's name, in insertion order."""
    q = (
        select(Article)
        .options(joinedload(Article.author))
        .order_by(Article.id)
    )
    result = await db.execute(q)
    return [_article_list_item_to_dict(a) for a in result.scalars().all()]
