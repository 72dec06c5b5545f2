"""FastAPI main application."""

import logging
import uuid
from contextlib import asynccontextmanager
from typing import Callable

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from apps.api.dependencies import engine
from packages.core.database import init_db
from packages.ops.logging import setup_logging

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager."""
    # Startup
    init_db(engine)
    logger.info("Proposal API started")
    yield
    # Shutdown
    logger.info("Proposal API stopped")


app = FastAPI(
    title="Proposal Board API",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Middleware: request_id
@app.middleware("http")
async def add_request_id(request: Request, call_next: Callable) -> Response:
    """Add request_id to request."""
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id

    response = await call_next(request)

    response.headers["X-Request-ID"] = request_id
    return response


# Import routers
from apps.api.routers import health, proposals

app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(proposals.router, prefix="/proposals", tags=["proposals"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
