"""
Main FastAPI application entry point.
Sets up the API, error handlers, and routes.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from banking.api import accounts, auth, customers
from banking.core.config import settings
from banking.core.exceptions import (
    ConstraintViolationError,
    DataIntegrityError,
    PersistenceError,
    UnsupportedOperationError,
    ValidationError,
)
from banking.core.logger import get_logger
from banking.database import SessionLocal, engine, init_db
from banking.seed import seed_sample_data

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create database tables
    init_db(engine)
    if settings.SEED_SAMPLE_DATA:
        seed_sample_data(SessionLocal)
    yield


# Initialize FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description=settings.DESCRIPTION,
    docs_url="/docs",  # Swagger UI
    redoc_url="/redoc",  # ReDoc UI
    lifespan=lifespan
)


def _error(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@app.exception_handler(ValidationError)
def handle_validation_error(request: Request, exc: ValidationError):
    return _error(status.HTTP_400_BAD_REQUEST, exc)


@app.exception_handler(UnsupportedOperationError)
def handle_unsupported_operation(request: Request, exc: UnsupportedOperationError):
    return _error(status.HTTP_409_CONFLICT, exc)


@app.exception_handler(ConstraintViolationError)
def handle_constraint_violation(request: Request, exc: ConstraintViolationError):
    return _error(status.HTTP_409_CONFLICT, exc)


@app.exception_handler(PersistenceError)
def handle_persistence_error(request: Request, exc: PersistenceError):
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return _error(status.HTTP_503_SERVICE_UNAVAILABLE, exc)


@app.exception_handler(DataIntegrityError)
def handle_data_integrity_error(request: Request, exc: DataIntegrityError):
    logger.error(f"{request.method} {request.url.path} hit corrupt data: {exc}")
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, exc)


@app.get("/")
def root():
    """
    Root endpoint - service summary.
    """
    return {
        "message": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "status": "running",
        "docs": "/docs",
        "endpoints": {
            "auth": f"{settings.API_V1_PREFIX}/auth",
            "customers": f"{settings.API_V1_PREFIX}/customers",
            "accounts": f"{settings.API_V1_PREFIX}/accounts"
        }
    }


@app.get("/health")
def health_check():
    """
    Health check endpoint for monitoring.
    """
    return {
        "status": "healthy"
    }


# Include API routers
app.include_router(auth.router, prefix=settings.API_V1_PREFIX)
app.include_router(customers.router, prefix=settings.API_V1_PREFIX)
app.include_router(accounts.router, prefix=settings.API_V1_PREFIX)
