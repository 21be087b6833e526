import time
import logging
import structlog
from fastapi import FastAPI, Request

from .config import settings
from .infrastructure.db import Store
from .infrastructure.metrics import (
    metrics_endpoint,
    http_requests_total,
    http_request_duration_seconds
)
from .interfaces.http.errors import install_error_handlers
from .interfaces.http.routers import activities as activities_router
from .interfaces.http.routers import auth as auth_router

log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.make_filtering_bound_logger(log_level),
    context_class=dict,
    logger_factory=structlog.PrintLoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


def create_app(store: Store | None = None) -> FastAPI:
    app = FastAPI(title="Activity Service", version="0.1.0")

    app.state.store = store or Store(settings.DATABASE_URL)
    app.state.store.create_all()
    logger.info("store_ready", url=app.state.store.engine.url.render_as_string(hide_password=True))

    install_error_handlers(app)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        method = request.method
        path = request.url.path

        response = await call_next(request)

        if response.headers.get("content-type", "").startswith("application/json"):
            response.headers["content-type"] = "application/json; charset=utf-8"

        # route template keeps label cardinality bounded (/activities/{activity_id})
        route = request.scope.get("route")
        endpoint = getattr(route, "path", path)
        duration = time.time() - start_time
        status_code = response.status_code
        http_requests_total.labels(method=method, endpoint=endpoint, status=status_code).inc()
        http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(duration)

        logger.info(
            "http_request",
            method=method,
            path=path,
            status_code=status_code,
            duration_ms=round(duration * 1000, 2)
        )

        return response

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get("/metrics")
    def metrics():
        return metrics_endpoint()

    app.include_router(auth_router.router)
    app.include_router(activities_router.router)
    return app


app = create_app()
