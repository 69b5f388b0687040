import logging as _logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from .components.scoring.validation import ConversationValidationError
from .platform.brand import SERVICE_DESCRIPTION, SERVICE_NAME, SERVICE_VERSION
from .platform.config import settings
from .platform.logging import setup_logging
from .platform.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware

# Set up logging
logger = setup_logging()

_is_production = settings.is_production

# ---------------------------------------------------------------------------
# Disable interactive API docs in production (information disclosure)
# ---------------------------------------------------------------------------
_docs_url = None if _is_production else "/docs"
_openapi_url = None if _is_production else "/openapi.json"

AVAILABLE_ENDPOINTS = {
    "GET /health": "Service health check",
    "GET /dimensions": "Get scoring dimension descriptions",
    "POST /analyze": "Analyze conversation and return scores",
}


@asynccontextmanager
async def _lifespan(_app: FastAPI):
    # Startup
    logger.info(
        "%s API started | env=%s host=%s port=%s",
        SERVICE_NAME,
        settings.DEPLOYMENT_ENV,
        settings.HOST,
        settings.PORT,
    )
    yield
    # Shutdown (none needed currently)


app = FastAPI(
    title=f"{SERVICE_NAME} API",
    description=SERVICE_DESCRIPTION,
    version=SERVICE_VERSION,
    docs_url=_docs_url,
    openapi_url=_openapi_url,
    lifespan=_lifespan,
)

_val_logger = _logging.getLogger("engagement.validation")


def _sanitize_errors(errors: list) -> list:
    """Ensure validation error details are JSON-serializable."""

    def _json_safe(value):
        if isinstance(value, (str, int, float, bool)) or value is None:
            return value
        if isinstance(value, bytes):
            return value.decode("utf-8", errors="replace")
        if isinstance(value, dict):
            return {str(k): _json_safe(v) for k, v in value.items()}
        if isinstance(value, (list, tuple, set)):
            return [_json_safe(v) for v in value]
        return str(value)

    return [_json_safe(err) for err in errors]


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are client errors, reported in the same shape as our own checks."""
    _val_logger.warning(
        "Validation error on %s %s: %s",
        request.method,
        request.url.path,
        exc.errors(),
    )
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "error": "Invalid request body",
            "details": _sanitize_errors(exc.errors()),
        },
    )


@app.exception_handler(ConversationValidationError)
async def conversation_validation_handler(request: Request, exc: ConversationValidationError):
    _val_logger.warning(
        "Conversation rejected on %s: %s (index=%s field=%s)",
        request.url.path,
        exc,
        exc.index,
        exc.field,
    )
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": "Invalid conversation structure", "details": str(exc)},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return JSONResponse(
            status_code=404,
            content={
                "success": False,
                "error": "Endpoint not found",
                "availableEndpoints": AVAILABLE_ENDPOINTS,
            },
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        "Unhandled error on %s %s",
        request.method,
        request.url.path,
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "message": "Something went wrong" if _is_production else str(exc),
        },
    )


# Request logging (innermost)
app.add_middleware(RequestLoggingMiddleware, error_handler=unhandled_exception_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_origin_regex=settings.CORS_ALLOW_ORIGIN_REGEX,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-ID"],
)

app.add_middleware(SecurityHeadersMiddleware, hsts=_is_production)

# Sentry (optional)
if settings.SENTRY_DSN and settings.SENTRY_DSN.startswith("https://"):
    import sentry_sdk
    from sentry_sdk.integrations.fastapi import FastApiIntegration
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        traces_sample_rate=0.1,
        environment=settings.DEPLOYMENT_ENV,
        integrations=[FastApiIntegration()],
    )

# Include routers
from .api.analysis import router as analysis_router
from .api.health import router as health_router

app.include_router(health_router)
app.include_router(analysis_router)


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)
