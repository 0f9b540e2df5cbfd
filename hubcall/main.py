# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from .api.v1 import auth_router
from .core.config import get_settings
from .core.logging import configure_logging
from .di.container import get_container
from .domain.repositories.user_repository import UserRepository
from .infrastructure.db.mongo_connection import close_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Validates required settings, builds the DI container and creates the
    unique indexes on the users collection. A missing MONGO_URI or
    JWT_SECRET aborts startup.
    """
    settings = get_settings()
    settings.validate()

    container = get_container()
    await container.get(UserRepository).ensure_indexes()
    logger.info("User indexes ensured; application startup complete")

    yield

    close_database()
    logger.info("Application shutdown complete")


async def http_exception_handler(request: Request, exception: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as {success: false, message, ...}"""
    if exception.status_code == status.HTTP_404_NOT_FOUND and exception.detail == "Not Found":
        content = {
            "success": False,
            "message": "API endpoint not found",
            "requestedUrl": request.url.path,
        }
    elif isinstance(exception.detail, dict):
        content = {"success": False, **exception.detail}
    else:
        content = {"success": False, "message": exception.detail}
    return JSONResponse(
        status_code=exception.status_code,
        content=content,
        headers=getattr(exception, "headers", None),
    )


async def request_validation_exception_handler(
    request: Request, exception: RequestValidationError
) -> JSONResponse:
    """Report every malformed field at once with a 400"""
    errors = []
    for error in exception.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
        errors.append({
            "field": ".".join(location) or "body",
            "message": error.get("msg", "Invalid value"),
        })
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "errors": errors},
    )


async def unhandled_exception_handler(request: Request, exception: Exception) -> JSONResponse:
    """Generic 500; exception text only leaks in development"""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exception}", exc_info=True)
    content = {"success": False, "message": "Internal server error"}
    if get_settings().is_development:
        content["error"] = str(exception)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - Error handlers
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    configure_logging(settings.log_level)

    # Create FastAPI app
    application = FastAPI(
        title="HUB CALL Backend API",
        version="1.0.0",
        description="User registration, login and profile service",
        lifespan=lifespan
    )

    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)

    # Register API routers
    application.include_router(auth_router, prefix="/api/auth")

    @application.get("/")
    async def root() -> dict:
        return {
            "success": True,
            "message": "HUB CALL Backend API",
            "version": "1.0.0",
            "status": "Active",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "endpoints": {
                "auth": "/api/auth",
                "register": "/api/auth/register",
                "login": "/api/auth/login",
                "profile": "/api/auth/profile",
            },
        }

    @application.get("/health")
    async def health() -> dict:
        return {
            "success": True,
            "message": "Server is healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    return application


# Create application instance
app = create_application()
