"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from mahr_estimator.api.middleware import RequestIDMiddleware, MetricsMiddleware
from mahr_estimator.api.v1 import advisory, estimate, options
from mahr_estimator.infrastructure.observability.logging import setup_logging
from mahr_estimator.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Mahr Estimator",
        description="Recommended Mahr range with audit breakdown and advisory notes",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(estimate.router, prefix="/v1", tags=["estimates"])
    app.include_router(advisory.router, prefix="/v1", tags=["advisory"])
    app.include_router(options.router, prefix="/v1", tags=["options"])

    return app


app = create_app()
