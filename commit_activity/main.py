import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from commit_activity.api.router import api_router
from commit_activity.api.v1.activity import get_commit_activity
from commit_activity.config import settings
from commit_activity.core.encryption import TokenDecryptor
from commit_activity.schemas.activity import DailyCount
from commit_activity.services.github import close_github_client


def setup_logging() -> None:
    """Configure application logging."""
    # Format: timestamp - level - logger name - message
    log_format = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
    date_format = "%H:%M:%S"

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("hpack").setLevel(logging.WARNING)

    # Quieten uvicorn access logs (we'll log requests ourselves)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown events."""
    # Startup
    setup_logging()
    # Missing or malformed key material stops the app here, not on first request
    app.state.token_decryptor = TokenDecryptor.from_settings(settings)
    logger.info("Commit activity API starting up")
    yield
    # Shutdown
    await close_github_client()
    logger.info("Commit activity API shutting down")


app = FastAPI(
    title="Commit Activity API",
    description="Weekly per-day commit counts for the owner of an encrypted GitHub token",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["POST"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log failed HTTP requests, skipping OPTIONS preflight."""
    if request.method == "OPTIONS" or request.url.path == "/health":
        return await call_next(request)

    response = await call_next(request)

    if response.status_code >= 400:
        logger.info(f"{request.method} {request.url.path} → {response.status_code}")

    return response


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    """405 responses carry no body, only the Allow header."""
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return Response(status_code=exc.status_code, headers=exc.headers)
    return await http_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def invalid_body_handler(_request: Request, exc: RequestValidationError):
    """Malformed JSON or a missing/mistyped encryptedToken is a 400, not a 422."""
    logger.debug(f"Rejected request body: {len(exc.errors())} validation error(s)")
    return PlainTextResponse("Invalid request body", status_code=status.HTTP_400_BAD_REQUEST)


# Include API routes
app.include_router(api_router)

# Root alias: the endpoint is also served at "/" for single-route deployments
app.add_api_route(
    "/",
    get_commit_activity,
    methods=["POST"],
    response_model=list[DailyCount],
    include_in_schema=False,
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
