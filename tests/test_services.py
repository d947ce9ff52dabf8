"""
Direct service-layer tests — exercises business logic without HTTP overhead.
"""
import pytest
from sqlalchemy.exc import InvalidRequestError
from sqlalchemy.ext.asyncio import AsyncSession

from pressroom.models import User
from pressroom.schemas import ArticleCreate, LoginRequest, SignupRequest, UserUpdate
from pressroom.security import decode_access_token, hash_password
from pressroom.services import article_service, auth_service, user_service


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

async def _create_user(db: AsyncSession, email: str = "svc@example.com", name: str = "Service User") -> User:
    user = User(email=email, password=hash_password("pw"), name=name, age=25)
    db.add(user)
    await db.flush()
    await db.refresh(user)
    return user


# ---------------------------------------------------------------------------
# user_service
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_create_user_via_service(db_session: AsyncSession):
    result = await user_service.create_user(
        db_session, SignupRequest(email="new@example.com", password="pw", name="New", age=20)
    )
    assert result is not None
    assert result["email"] == "new@example.com"
    assert result["password"] != "pw"
    assert result["created_at"] is not None


@pytest.mark.asyncio
async def test_create_user_duplicate_returns_none(db_session: AsyncSession):
    await _create_user(db_session, email="taken@example.com")
    result = await user_service.create_user(
        db_session, SignupRequest(email="taken@example.com", password="pw")
    )
    assert result is None


@pytest.mark.asyncio
async def test_get_user_by_email(db_session: AsyncSession):
    user = await _create_user(db_session)
    found = await user_service.get_user_by_email(db_session, "svc@example.com")
    assert found is not None
    assert found.id == user.id
    assert await user_service.get_user_by_email(db_session, "missing@example.com") is None


@pytest.mark.asyncio
async def test_update_user_via_service(db_session: AsyncSession):
    user = await _create_user(db_session)
    result = await user_service.update_user(db_session, user.id, UserUpdate(name="Changed"))
    assert result["name"] == "Changed"
    assert result["age"] == 25
    assert "password" not in result


@pytest.mark.asyncio
async def test_update_nonexistent_user_via_service(db_session: AsyncSession):
    assert await user_service.update_user(db_session, 99999, UserUpdate(name="x")) is None


# ---------------------------------------------------------------------------
# auth_service
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_authenticate_success(db_session: AsyncSession):
    user = await _create_user(db_session)
    token = await auth_service.authenticate(
        db_session, LoginRequest(email="svc@example.com", password="pw")
    )
    assert token is not None
    assert decode_access_token(token)["userId"] == user.id


@pytest.mark.asyncio
async def test_authenticate_failures_return_none(db_session: AsyncSession):
    await _create_user(db_session)
    assert await auth_service.authenticate(
        db_session, LoginRequest(email="svc@example.com", password="wrong")
    ) is None
    assert await auth_service.authenticate(
        db_session, LoginRequest(email="nobody@example.com", password="pw")
    ) is None


# ---------------------------------------------------------------------------
# article_service
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_get_articles_empty(db_session: AsyncSession):
    assert await article_service.get_articles(db_session) == []


@pytest.mark.asyncio
async def test_create_article_via_service(db_session: AsyncSession):
    user = await _create_user(db_session)
    result = await article_service.create_article(
        db_session, user.id, ArticleCreate(title="Service Article", description="Body")
    )
    assert result["title"] == "Service Article"
    assert result["author"] == user.id


@pytest.mark.asyncio
async def test_create_article_unknown_user_via_service(db_session: AsyncSession):
    result = await article_service.create_article(
        db_session, 12345, ArticleCreate(title="Nope", description="Body")
    )
    assert result is None
    assert await article_service.get_articles(db_session) == []


@pytest.mark.asyncio
async def test_get_articles_via_service(db_session: AsyncSession):
    alice = await _create_user(db_session, email="alice@example.com", name="Alice")
    bob = await _create_user(db_session, email="bob@example.com", name="Bob")
    await article_service.create_article(db_session, alice.id, ArticleCreate(title="A", description="a"))
    await article_service.create_article(db_session, bob.id, ArticleCreate(title="B", description="b"))

    items = await article_service.get_articles(db_session)
    assert [(a["title"], a["author"]["name"]) for a in items] == [("A", "Alice"), ("B", "Bob")]


@pytest.mark.asyncio
async def test_relationships_must_be_loaded_explicitly(db_session: AsyncSession):
    """Touching an unloaded relationship raises instead of issuing a hidden query."""
    user = await _create_user(db_session)
    with pytest.raises(InvalidRequestError):
        user.articles
