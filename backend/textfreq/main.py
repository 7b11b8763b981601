"""
FastAPI application entry point.
"""
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
import structlog
import uvicorn

from textfreq.config import get_settings
from textfreq.routers import analysis

# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer(ensure_ascii=False)
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="텍스트에서 키워드 빈도를 분석하는 API (한국어 조사 제거 포함)",
        version="0.1.0",
        debug=settings.debug,
    )

    # Include routers
    app.include_router(analysis.router, prefix="/api", tags=["analysis"])

    # Health check endpoint
    @app.get("/health", tags=["health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    logger.info("Application created", mode=settings.normalization_mode.value)

    return app


# Create app instance
app = create_app()


def run() -> None:
    """Serve the API with uvicorn (host and port from TEXTFREQ_HOST / TEXTFREQ_PORT)."""
    settings = get_settings()
    logger.info("Starting server", host=settings.host, port=settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
