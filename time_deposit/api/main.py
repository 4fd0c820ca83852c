"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from time_deposit.api.errors import register_error_handlers
from time_deposit.api.middleware import RequestIDMiddleware, MetricsMiddleware
from time_deposit.api.v1 import deposits
from time_deposit.infrastructure.observability.logging import setup_logging
from time_deposit.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Time Deposit Service",
        description="Fixed-term deposit registration and reporting",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # 400 for validation, one error envelope for all HTTP errors
    register_error_handlers(app)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(deposits.router, prefix="/api", tags=["time-deposits"])

    return app


app = create_app()
