"""
Main application module for the Document Intelligence Engine.

This module initializes the FastAPI application and includes all routes.
It also sets up CORS middleware, request logging and error handlers.
"""
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from .routes import catalog, documents
from .schemas import ErrorDetail, ErrorResponse
from .services.catalog import get_catalog
from .services.redis import redis_service
from .utils.config import settings
from .utils.logger import app_logger as logger, configure_loggers


# Request logging middleware
class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging request information."""

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        logger.info(
            f"Incoming request: {request.method} {request.url.path} "
            f"Client: {request.client.host if request.client else 'unknown'}"
        )

        try:
            response = await call_next(request)
            process_time = time.time() - start_time

            logger.info(
                f"Request completed: {request.method} {request.url.path} "
                f"Status: {response.status_code} "
                f"Duration: {process_time:.3f}s"
            )

            return response

        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                f"Request failed: {request.method} {request.url.path} "
                f"Error: {str(e)} "
                f"Duration: {process_time:.3f}s"
            )
            raise


@asynccontextmanager
async def lifespan(app: FastAPI):
    # A malformed catalog must stop the service at startup.
    get_catalog()
    configure_loggers(settings.LOGS_DIR)
    logger.info(f"{settings.PROJECT_NAME} {settings.VERSION} started ({settings.ENVIRONMENT})")
    yield
    logger.info(f"Shutting down {settings.PROJECT_NAME}")
    await redis_service.close()


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="""
    Document Intelligence API

    Key Features:
    - Stage requirement catalog
    - Trust score and risk classification of startup documents
    - Investor-ready data room report
    """,
    version=settings.VERSION,
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(catalog.router, prefix="/api/catalog")
app.include_router(documents.router, prefix="/api/documents")


def _error_response(code: int, message: str, error_type: str, headers=None) -> JSONResponse:
    body = ErrorResponse(error=ErrorDetail(code=code, message=message, type=error_type))
    return JSONResponse(status_code=code, content=body.model_dump(), headers=headers)


# Custom exception handlers
@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions with detailed error responses."""
    logger.error(f"HTTP error: {exc.status_code} - {exc.detail}")
    return _error_response(exc.status_code, str(exc.detail), "http_error", getattr(exc, "headers", None))


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions with sanitized error messages."""
    logger.error(f"Unexpected error: {str(exc)}", exc_info=True)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred",
        "internal_error",
    )


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint with API information."""
    return {
        "name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "documentation": "/docs",
        "health": "/health"
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint: catalog loaded and cache reachable."""
    stage_catalog = get_catalog()
    cache_status = "disabled"
    if settings.CACHE_ENABLED:
        cache_status = "connected" if await redis_service.ping() else "disconnected"

    return {
        "status": "healthy" if cache_status != "disconnected" else "degraded",
        "version": settings.VERSION,
        "components": {
            "catalog": {
                "status": "loaded",
                "stages": [stage.value for stage in stage_catalog.stages],
            },
            "cache": {"status": cache_status},
        },
    }


# For local development
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("docintel.main:app", host="0.0.0.0", port=8000, reload=True)
