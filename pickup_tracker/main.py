"""
Hardware Pickup Tracker API - main application
"""
import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pickup_tracker.api.v1.api import api_router
from pickup_tracker.core.clock import Clock, utc_now
from pickup_tracker.core.config import Settings, get_settings
from pickup_tracker.core.exceptions import PickupTrackerError
from pickup_tracker.core.logging_config import setup_logging
from pickup_tracker.services.container import build_container

logger = structlog.get_logger()


def create_application(settings: Settings = None, clock: Clock = utc_now) -> FastAPI:
    """Create the FastAPI application with its own stores and services"""
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_JSON)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Pickup order tracking for the hardware counter",
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.DEBUG else [f"http://localhost:{settings.PORT}"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    container = build_container(settings, clock=clock)
    container.initialize()
    app.state.container = container

    app.include_router(api_router, prefix="/api/v1")

    @app.exception_handler(PickupTrackerError)
    async def domain_error_handler(request: Request, exc: PickupTrackerError):
        log = logger.error if exc.status_code >= 500 else logger.warning
        log("Request failed", path=request.url.path, error=exc.message, error_type=type(exc).__name__)
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": exc.message, "detail": exc.detail},
        )

    @app.on_event("startup")
    async def startup_event():
        logger.info("Starting Hardware Pickup Tracker API", version=settings.APP_VERSION)
        logger.info("Data directory", data_dir=str(settings.DATA_DIR))
        if settings.CLEANUP_SCHEDULER_ENABLED:
            container.cleanup_scheduler.start()

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("Shutting down Hardware Pickup Tracker API")
        if container.cleanup_scheduler.running:
            container.cleanup_scheduler.stop()

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "message": f"Welcome to {settings.APP_NAME}",
            "version": settings.APP_VERSION,
            "docs": "/docs" if settings.DEBUG else "Documentation disabled in production",
        }

    @app.get("/health")
    async def health_check():
        """Health check"""
        return {
            "status": "healthy",
            "version": settings.APP_VERSION,
            "cleanup_scheduler": container.cleanup_scheduler.running,
        }

    return app


def get_app() -> FastAPI:
    """uvicorn factory entry point"""
    return create_application()
