"""Main FastAPI application for DocQA.

Entry point for the application. Configures:
- FastAPI app with settings
- CORS middleware
- Request ID / request logging middleware
- Exception handlers
- Route registration
"""

import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import get_app_config, get_cors_config, get_settings, setup_logging
from dependencies import get_file_storage
from errors import DocumentAssistantError
from responses import ResponseCode, error_dict, get_http_status
from router import router as api_router

# Setup logging
setup_logging(get_settings().log_level)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Management
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown."""
    # Startup
    logger.info("Starting DocQA...")

    settings = get_settings()
    logger.info("Environment: %s", settings.environment)
    logger.info("LLM Model: %s", settings.llm_model)

    if not settings.llm_configured:
        logger.warning(
            "ANTHROPIC_API_KEY is not set; chat, summarize and simplify will fail"
        )

    get_file_storage().ensure_dir()
    logger.info("DocQA started successfully")

    yield

    # Shutdown
    logger.info("Shutting down DocQA...")


# Create FastAPI app with lifespan
app_config = get_app_config()
app = FastAPI(lifespan=lifespan, **app_config)

# Add CORS middleware
cors_config = get_cors_config()
app.add_middleware(CORSMiddleware, **cors_config)


# =============================================================================
# Middleware
# =============================================================================


@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Add request ID to all requests for tracing."""
    request_id = str(uuid.uuid4())[:8]
    request.state.request_id = request_id
    logger.info("[%s] %s %s", request_id, request.method, request.url.path)

    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id

    return response


# =============================================================================
# Exception Handlers
# =============================================================================


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Handle Pydantic validation errors (missing or empty fields)."""
    errors = exc.errors()
    first_error = errors[0] if errors else {}
    field_name = first_error.get("loc", ["unknown"])[-1]

    return JSONResponse(
        status_code=400,
        content=error_dict(
            ResponseCode.INVALID_REQUEST,
            f"Missing or invalid field '{field_name}'",
        ),
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """Handle HTTP exceptions."""
    if exc.status_code == 404:
        return JSONResponse(
            status_code=404, content=error_dict(ResponseCode.ENDPOINT_NOT_FOUND)
        )

    code = ResponseCode.INVALID_REQUEST if exc.status_code < 500 else ResponseCode.INTERNAL_ERROR
    return JSONResponse(
        status_code=exc.status_code,
        content=error_dict(code, str(exc.detail)),
    )


@app.exception_handler(DocumentAssistantError)
async def domain_exception_handler(
    request: Request,
    exc: DocumentAssistantError,
) -> JSONResponse:
    """Map domain errors onto their response codes."""
    request_id = getattr(request.state, "request_id", "-")
    status_code = get_http_status(exc.code)
    log_fn = logger.warning if status_code < 500 else logger.error
    log_fn("[%s] %s: %s", request_id, type(exc).__name__, exc)

    # Not-found messages stay generic; the id is already in the request
    message = None if exc.code == ResponseCode.SESSION_NOT_FOUND else str(exc)

    return JSONResponse(status_code=status_code, content=error_dict(exc.code, message))


@app.exception_handler(Exception)
async def general_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Handle unhandled exceptions."""
    request_id = getattr(request.state, "request_id", "-")
    logger.exception("[%s] Unhandled exception: %s", request_id, exc)

    message = None if get_settings().is_production else str(exc)
    return JSONResponse(
        status_code=500, content=error_dict(ResponseCode.INTERNAL_ERROR, message)
    )


# =============================================================================
# Routes
# =============================================================================

# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint - service banner."""
    return {
        "message": "AI Document Assistant API",
        "status": "running",
        "version": app_config["version"],
    }


# =============================================================================
# Development Server
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
