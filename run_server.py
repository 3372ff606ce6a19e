"""
Start the API server
"""
import uvicorn

from pickup_tracker.core.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    print(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    print(f"Data directory: {settings.DATA_DIR.resolve()}")
    print(f"Server will be available at: http://{settings.HOST}:{settings.PORT}")
    print("Press Ctrl+C to stop the server")

    uvicorn.run(
        "pickup_tracker.main:get_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
