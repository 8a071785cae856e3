"""Enterprise Service

Main FastAPI application entry point.
"""

import logging
from contextlib import asynccontextmanager

import sentry_sdk
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from enterprise_service.api import admins_router, auth_router, enterprises_router
from enterprise_service.config.settings import get_settings
from enterprise_service.database import close_db, init_db
from enterprise_service.events import EventPublisher, close_event_client, get_event_client
from enterprise_service.exceptions import ServiceError, UnauthorizedError
from enterprise_service.middleware.response import ResponseEnvelopeMiddleware

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn, environment=settings.environment)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    # Startup
    logger.info(f"Starting {settings.service_name} v{settings.service_version}")
    logger.info(f"Environment: {settings.environment}")

    if settings.db_sync:
        await init_db()
        logger.info("Database schema synchronized")

    if settings.events_enabled:
        event_client = await get_event_client()
        app.state.event_publisher = EventPublisher(
            event_client.get_client(),
            lookup_timeout=settings.cache_lookup_timeout_seconds,
        )
    else:
        logger.info("Event side-channel disabled")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.service_name}")
    await close_event_client()
    await close_db()


app = FastAPI(
    title="Enterprise Service API",
    version=settings.service_version,
    description="Management of administrators, enterprises and authentication",
    lifespan=lifespan,
)

# Envelope is added first so that CORS wraps it
app.add_middleware(ResponseEnvelopeMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)


@app.get("/health")
async def health():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": settings.service_name,
        "version": settings.service_version,
        "environment": settings.environment,
    }


@app.get("/")
async def root():
    """Root endpoint with service information"""
    return {
        "service": settings.service_name,
        "version": settings.service_version,
        "docs": "/docs",
        "health": "/health",
    }


app.include_router(auth_router)
app.include_router(admins_router)
app.include_router(enterprises_router)


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    """Map domain errors onto their HTTP status"""
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthorizedError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"statusCode": exc.status_code, "message": exc.message, "error": exc.error},
        headers=headers,
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report every invalid field as a 400 Bad Request"""
    messages = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"][1:]) or str(error["loc"][0])
        messages.append(f"{field}: {error['msg']}")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"statusCode": 400, "message": messages, "error": "Bad Request"},
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors"""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "statusCode": 500,
            "message": "An unexpected error occurred. Please try again later.",
            "error": "Internal Server Error",
        },
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "enterprise_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
