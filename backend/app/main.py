import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.main import api_router
from app.api.routes import utils
from app.core.config import Settings, settings
from app.core.errors import register_exception_handlers
from app.core.logging import RequestLoggingMiddleware, configure_logging
from app.core.rate_limit import FixedWindowRateLimiter, RateLimitMiddleware

logger = logging.getLogger(__name__)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    app_settings = app_settings or settings
    configure_logging(app_settings.LOG_LEVEL)

    app = FastAPI(title=app_settings.PROJECT_NAME, version=app_settings.APP_VERSION)
    app.state.settings = app_settings
    app.state.llm = None

    if app_settings.RATE_LIMIT_ENABLED:
        limiter = FixedWindowRateLimiter(
            max_requests=app_settings.RATE_LIMIT_MAX,
            window_seconds=app_settings.RATE_LIMIT_WINDOW_SECONDS,
        )
        app.state.rate_limiter = limiter
        app.add_middleware(RateLimitMiddleware, limiter=limiter)
    app.add_middleware(RequestLoggingMiddleware)
    # Outermost, so 429 and 500 bodies still carry CORS headers.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type", "Authorization"],
    )

    register_exception_handlers(app, app_settings)

    app.include_router(utils.router)
    app.include_router(api_router, prefix="/api")

    logger.info(
        "%s %s ready (%s): POST /api/idea/submit, /api/idea/submit/stream, /api/chat, "
        "/api/prd/summarize, /api/prd/recommendation, /api/prd/sections/{section}[/restore], "
        "/api/agents/summarize; "
        "GET /api/prd/stages/{stage}/requirements, /health",
        app_settings.PROJECT_NAME,
        app_settings.APP_VERSION,
        app_settings.ENVIRONMENT,
    )
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=3001)
