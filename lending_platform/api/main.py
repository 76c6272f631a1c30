"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from lending_platform.api.middleware import RequestIDMiddleware, MetricsMiddleware
from lending_platform.api.v1 import analytics, applications
from lending_platform.infrastructure.observability.logging import setup_logging
from lending_platform.infrastructure.repositories import ApplicationRepository
from lending_platform.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Lending Platform",
        description="Loan application decisions and lending analytics",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Each app instance owns its application store
    app.state.application_repository = ApplicationRepository()

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(applications.router, prefix="/v1", tags=["applications"])
    app.include_router(analytics.router, prefix="/v1", tags=["analytics"])

    return app


app = create_app()
