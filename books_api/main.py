"""FastAPI application entry point."""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from books_api.api import api_router
from books_api.config import settings
from books_api.core.exceptions import AppException
from books_api.core.logging import get_logger, setup_logging
from books_api.database import close_db, init_db
from books_api.schemas.common import StatusResponse

setup_logging(settings.log_level)
logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown."""
    # Startup
    await init_db()
    logger.info(f"{settings.app_name} started")
    yield
    # Shutdown
    await close_db()


app = FastAPI(
    title=settings.app_name,
    description="CRUD API over a books table keyed by ISBN",
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def error_response(status_code: int, message) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": {"message": message}})


# Exception handlers
@app.exception_handler(AppException)
async def app_exception_handler(request: Request, exc: AppException):
    """Handle application exceptions."""
    logger.debug(f"{exc.error_code} on {request.method} {request.url.path}: {exc}")
    return error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Handle bodies FastAPI could not parse."""
    messages = [error["msg"] for error in exc.errors()]
    return error_response(400, messages)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions."""
    return error_response(exc.status_code, exc.detail)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")

    if settings.debug:
        return error_response(500, f"{type(exc).__name__}: {exc}")

    return error_response(500, "Internal server error")


# Include API router
app.include_router(api_router)


# Health check endpoint
@app.get("/health", response_model=StatusResponse)
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "app": settings.app_name}


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs" if settings.debug else None,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "books_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
