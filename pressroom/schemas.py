from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


# --- Auth ---

class SignupRequest(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)
    name: str | None = None
    age: float | None = None


class LoginRequest(BaseModel):
    email: str
    password: str


class TokenData(BaseModel):
    token: str


# --- User ---

class UserUpdate(BaseModel):
    """Profile fields a user may change. Omitted fields are left untouched."""

    name: str | None = None
    age: float | None = None


class UserResponse(BaseModel):
    id: int
    email: str
    name: str | None
    age: float | None
    created_at: datetime | None
    model_config = ConfigDict(from_attributes=True)


class SignupUserResponse(UserResponse):
    # The stored hash is echoed back on signup.
    password: str


# --- Article ---

class ArticleCreate(BaseModel):
    title: str
    description: str


class AuthorSummary(BaseModel):
    id: int
    name: str | None


class ArticleResponse(BaseModel):
    id: int
    title: str
    description: str
    author: int
    created_at: datetime | None


class ArticleListItem(BaseModel):
    id: int
    title: str
    description: str
    author: AuthorSummary | None
    created_at: datetime | None


# --- Envelope ---

class Envelope(BaseModel):
    """Uniform body of every API response."""

    statusCode: int
    data: dict | list | None = None
    message: str


class ErrorEnvelope(BaseModel):
    statusCode: int
    error: str
    message: str
