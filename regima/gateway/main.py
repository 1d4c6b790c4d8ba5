"""
FastAPI app assembly: middleware and router wiring.

`create_app` builds a gateway around a loaded configuration. The ASGI `app`
used by uvicorn lives in the top-level `app.py`.
"""
import logging
import time
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from regima import __version__
from regima.utils.log import configure_logging

from .api.agents import router as agents_router
from .api.cognitive import router as cognitive_router
from .api.data import router as data_router
from .api.gateway import router as gateway_router
from .api.models import router as models_router
from .api.monitoring import router as monitoring_router
from .api.tools import router as tools_router
from .auth import AuthenticationError
from .config import GatewayConfig, GatewaySettings, load_gateway_config
from .stats import RequestStats

configure_logging()
logger = logging.getLogger(__name__)

CONTENT_SECURITY_POLICY = "; ".join(
    [
        "default-src 'self'",
        "script-src 'self' 'unsafe-inline'",
        "style-src 'self' 'unsafe-inline'",
        "img-src 'self' data: https:",
    ]
)

BODY_METHODS = {"POST", "PUT", "PATCH"}

SECURITY_HEADERS = {
    "Content-Security-Policy": CONTENT_SECURITY_POLICY,
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Opener-Policy": "same-origin",
}


def create_app(
    config: Optional[GatewayConfig] = None,
    settings: Optional[GatewaySettings] = None,
) -> FastAPI:
    config = config or load_gateway_config()
    settings = settings or GatewaySettings.from_env()
    logger.info("Initializing %s v%s", config.gateway.name, config.gateway.version)

    app = FastAPI(
        title=config.gateway.name,
        description=config.gateway.description,
        version=config.gateway.version or __version__,
        # /docs serves the gateway's own JSON reference
        docs_url="/openapi-docs",
        redoc_url=None,
    )
    app.router.redirect_slashes = False

    app.state.gateway_config = config
    app.state.gateway_settings = settings
    app.state.request_stats = RequestStats()
    app.state.started_at = datetime.now(timezone.utc)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def payload_too_large() -> JSONResponse:
        return JSONResponse(
            {
                "error": "Payload too large",
                "message": f"Request body exceeds {settings.max_body_bytes} bytes",
            },
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
        )

    # Middleware: reject oversized bodies before they reach a handler
    @app.middleware("http")
    async def limit_request_body(request: Request, call_next):
        raw_length = request.headers.get("content-length")
        declared = None
        if raw_length:
            try:
                declared = int(raw_length)
            except ValueError:
                declared = None
        if declared is not None:
            if declared > settings.max_body_bytes:
                return payload_too_large()
        elif request.method in BODY_METHODS:
            # chunked uploads carry no length header; measure the body itself
            body = await request.body()
            if len(body) > settings.max_body_bytes:
                return payload_too_large()
        return await call_next(request)

    # Middleware: request logging and statistics
    @app.middleware("http")
    async def track_requests(request: Request, call_next):
        stats: RequestStats = request.app.state.request_stats
        started = time.perf_counter()
        client = request.client.host if request.client else "-"
        stats.record_request()
        logger.info("%s %s - %s", request.method, request.url.path, client)
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            response = JSONResponse(
                {"error": str(exc)}, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
            )
        duration_ms = int((time.perf_counter() - started) * 1000)
        logger.info(
            "%s %s - %s (%dms)", request.method, request.url.path, response.status_code, duration_ms
        )
        stats.record_response(response.status_code)
        return response

    # Middleware: security headers on every response, error responses included (outermost)
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response = await call_next(request)
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        return response

    @app.exception_handler(AuthenticationError)
    async def authentication_error_handler(request: Request, exc: AuthenticationError):
        return JSONResponse(exc.to_dict(), status_code=exc.status_code)

    app.include_router(gateway_router)
    app.include_router(models_router)
    app.include_router(agents_router)
    app.include_router(data_router)
    app.include_router(tools_router)
    app.include_router(cognitive_router)
    app.include_router(monitoring_router)

    logger.info("%s initialized", config.gateway.name)
    return app
