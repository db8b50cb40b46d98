import logging
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from chemquiz.api.v1.services import seed_access
from chemquiz.core.bootstrap import bootstrap_app
from chemquiz.core.config import settings
from chemquiz.core.middlewares import request_logging_middleware
from chemquiz.core.models import BodyError, DatabaseError, ServiceError, UnknownCapabilityError, UrlError
from chemquiz.core.schemas import ApiResponse
from chemquiz.db import db_manager

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Handles application startup and shutdown, making sure the schema and the
    known access names exist and the connection pool is released on exit.
    """
    logger.info("Starting application...")

    if settings.CREATE_TABLES:
        logger.info("Creating database tables...")
        await db_manager.create_all()

    if settings.SEED_ACCESS:
        async with db_manager.session() as session:
            await seed_access(session)

    yield

    logger.info("Shutting down application...")
    logger.info("Disconnecting database pool...")
    await db_manager.disconnect()
    logger.info("Database pool disconnected.")


def error_response(status_code: int, kind: str, message: str) -> JSONResponse:
    body = ApiResponse(status_code=status_code, error=message, detail=kind)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


async def service_error_handler(request: Request, exc: ServiceError):
    """Typed failures raised by repositories, the search parser and the permission gate."""
    if isinstance(exc, UnknownCapabilityError):
        logger.error("Authorization misconfigured for %s %s", request.method, request.url.path)
    return error_response(exc.status_code, exc.kind.value, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Request bodies and parameters FastAPI could not validate."""
    errors = exc.errors()
    message = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in errors)
    # Only path and query failures are URL errors
    if all(err["loc"] and err["loc"][0] in ("path", "query") for err in errors):
        error = UrlError(message)
    else:
        error = BodyError(message)
    return error_response(error.status_code, error.kind.value, error.message)


async def database_error_handler(request: Request, exc: SQLAlchemyError):
    """Datastore failures outside the repositories' own handling, e.g. a dropped connection."""
    logger.error("Database failure on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    error = DatabaseError("Database unavailable", status_code=status.HTTP_503_SERVICE_UNAVAILABLE)
    return error_response(error.status_code, error.kind.value, error.message)


async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler with security considerations.
    """
    logger.error(f"Unhandled exception: {exc}", exc_info=exc)

    response_content = {
        "status": "error",
        "error_type": exc.__class__.__name__,
        "message": str(exc),
    }

    # Only include traceback in development
    if not settings.is_production:
        response_content["traceback"] = "".join(traceback.format_exception(exc))

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=response_content,
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        debug=settings.DEBUG,
        version=settings.VERSION,
        lifespan=lifespan,
        openapi_url=f"{settings.API_V1_STR}/openapi.json",
        docs_url=f"{settings.API_V1_STR}/docs",
        redoc_url=f"{settings.API_V1_STR}/redoc"
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.FRONTEND_URL],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        max_age=600,
    )

    # Request logging middleware
    app.middleware("http")(request_logging_middleware)

    # Exception handlers
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    bootstrap_app(app)

    @app.get("/health", tags=["health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": settings.VERSION}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")
