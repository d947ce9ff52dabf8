import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pressroom import __version__
from pressroom.config import settings
from pressroom.database import close_db, init_db
from pressroom.errors import install_error_handlers
from pressroom.middleware import TimingMiddleware
from pressroom.responses import success
from pressroom.routers import articles, auth, users
from pressroom.schemas import Envelope

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    await init_db()
    yield
    # Shutdown
    await close_db()


app = FastAPI(
    title="Pressroom API",
    description="User signup/login and article publishing",
    version=__version__,
    lifespan=lifespan,
)

install_error_handlers(app)

# Middleware
app.add_middleware(TimingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(articles.router)


@app.get("/", response_model=Envelope)
async def root():
    return success(200, None, "Welcome to the Pressroom API")


@app.get("/health")
async def health():
    return {"status": "healthy", "version": __version__}


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    configure_logging()
    logger.info("Starting server on %s:%d", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
