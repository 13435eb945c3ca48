import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.router import api_router
from app.config import settings
from app.services.interpreter import EmojiCatalog, EmojiInterpreter


def setup_logging() -> None:
    """Configure application logging."""
    # Format: timestamp - level - logger name - message
    log_format = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
    date_format = "%H:%M:%S"

    # Configure root logger
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("anthropic").setLevel(logging.WARNING)

    # Quieten uvicorn access logs (we'll log requests ourselves)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: load the catalog once, share one interpreter."""
    setup_logging()
    logger.info(f"{settings.app_name} API starting up")

    app.state.catalog = EmojiCatalog.from_directory(settings.emoji_data_dir)
    app.state.interpreter = EmojiInterpreter(app.state.catalog)
    if not settings.interpreter_configured:
        logger.warning("Interpreter not configured: set ANTHROPIC_API_KEY to enable it")

    yield
    logger.info(f"{settings.app_name} API shutting down")


app = FastAPI(
    title="KnowYourEmoji API",
    description="Contextual emoji meanings and AI message interpretation",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log HTTP requests, skipping OPTIONS preflight."""
    # Skip OPTIONS (CORS preflight) and health checks
    if request.method == "OPTIONS" or request.url.path == "/health":
        return await call_next(request)

    response = await call_next(request)

    # Only log failures and interpreter calls
    path = request.url.path
    if response.status_code >= 400 or "interpret" in path:
        logger.info(f"{request.method} {path} -> {response.status_code}")

    return response


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400 with per-field messages instead of FastAPI's default 422."""
    field_errors: dict[str, list[str]] = {}
    for error in exc.errors():
        if error["type"] == "json_invalid":
            field_errors.setdefault("body", []).append("Invalid JSON in request body")
            continue
        # Drop the "body"/"query" location prefix so keys are field names
        loc = [str(part) for part in error["loc"][1:]]
        field = loc[0] if loc else "body"
        # Surface our own ValueError text without pydantic's "Value error, " prefix
        ctx_error = error.get("ctx", {}).get("error")
        message = str(ctx_error) if ctx_error else error["msg"]
        field_errors.setdefault(field, []).append(message)

    first_message = next(iter(field_errors.values()))[0] if field_errors else "Validation failed"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": first_message, "field_errors": field_errors},
    )


# Include API routes
app.include_router(api_router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "interpreter": settings.interpreter_configured}
