"""FastAPI main application."""

import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mindi.api.routes import router
from mindi.api.session import session_manager
from mindi.config import settings

# Configure logging for the app (must be after imports but before app usage)
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stdout,
)
logging.getLogger("mindi").setLevel(settings.log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Lifespan context manager for startup and shutdown events.

    On shutdown every session is closed so no deferred bot move or trick
    resolution outlives the event loop.
    """
    logger.info("Mindi engine starting (%s)", settings.environment)
    yield
    await session_manager.clear()
    logger.info("Mindi engine stopped")


app = FastAPI(
    title="Mindi",
    description="Mindi (Mindi Coat) trick-taking game engine",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


def main() -> None:
    """Run the server with uvicorn."""
    uvicorn.run(
        "mindi.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
