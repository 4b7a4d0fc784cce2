import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import Settings

logger = logging.getLogger(__name__)


class AgentError(Exception):
    """A single agent's LLM call failed."""

    def __init__(self, agent: str, message: str):
        super().__init__(f"{agent} failed: {message}")
        self.agent = agent


class WorkflowError(Exception):
    """A chained workflow step failed; results of earlier steps are discarded."""

    def __init__(self, step: str, cause: Exception):
        super().__init__(f"Workflow failed at {step}: {cause}")
        self.step = step
        self.cause = cause


def error_body(error: str, **extra) -> dict:
    return {"success": False, "error": error, **extra}


def register_exception_handlers(app: FastAPI, app_settings: Settings) -> None:
    """Map every failure to the three envelopes the client understands: 400, 429, 500."""

    def _server_error(summary: str, exc: Exception) -> JSONResponse:
        extra = {"message": str(exc)} if app_settings.is_development else {}
        return JSONResponse(status_code=500, content=error_body(summary, **extra))

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Validation failed for %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(
            status_code=400,
            content=error_body("Validation Error", details=jsonable_encoder(exc.errors())),
        )

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(WorkflowError)
    async def _workflow_error(request: Request, exc: WorkflowError) -> JSONResponse:
        logger.error("Idea workflow failed at %s: %s", exc.step, exc.cause)
        return _server_error("Idea workflow failed", exc)

    @app.exception_handler(AgentError)
    async def _agent_error(request: Request, exc: AgentError) -> JSONResponse:
        logger.error("Agent request failed on %s: %s", request.url.path, exc)
        return _server_error("Agent request failed", exc)

    @app.exception_handler(Exception)
    async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _server_error("Internal Server Error", exc)
