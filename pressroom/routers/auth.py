import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pressroom.database import get_db
from pressroom.errors import ApiError, BadRequestError, InternalServerError, UnauthorizedError
from pressroom.responses import success
from pressroom.schemas import Envelope, ErrorEnvelope, LoginRequest, SignupRequest, TokenData
from pressroom.services import auth_service, user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])

EMAIL_TAKEN = "Email already exists"
BAD_CREDENTIALS = "Invalid email or password"


@router.post(
    "/signup",
    status_code=201,
    response_model=Envelope,
    responses={400: {"model": ErrorEnvelope}, 500: {"model": ErrorEnvelope}},
)
async def signup(data: SignupRequest, db: AsyncSession = Depends(get_db)):
    try:
        user = await user_service.create_user(db, data)
    except IntegrityError:
        # Lost a race against a concurrent signup for the same email.
        raise BadRequestError(EMAIL_TAKEN)
    except ApiError:
        raise
    except Exception:
        logger.exception("Signup failed")
        raise InternalServerError("An error occurred while signing up")

    if user is None:
        raise BadRequestError(EMAIL_TAKEN)
    return success(201, {"data": user}, "User created successfully")


@router.post(
    "/login",
    response_model=Envelope,
    responses={401: {"model": ErrorEnvelope}, 500: {"model": ErrorEnvelope}},
)
async def login(data: LoginRequest, db: AsyncSession = Depends(get_db)):
    try:
        token = await auth_service.authenticate(db, data)
    except ApiError:
        raise
    except Exception:
        logger.exception("Login failed")
        raise InternalServerError("An error occurred while logging in")

    if token is None:
        raise UnauthorizedError(BAD_CREDENTIALS)
    return success(200, TokenData(token=token).model_dump(), "Logged in successfully")
