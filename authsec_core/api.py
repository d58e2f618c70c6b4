"""
Security HTTP API
=================
FastAPI router exposing the engine, one endpoint per operation.

Every endpoint answers with the envelope `{success, data, error}`.
"""

from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import APIRouter, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
import structlog

from .engine import AuthSecurityEngine
from .errors import InvalidPresetError
from .events.models import SecurityEventKind, Severity
from .policy.models import OTPChannel, OTPConfig

logger = structlog.get_logger(__name__)


class ApiResponse(BaseModel):
    success: bool
    data: Optional[Any] = None
    error: Optional[str] = None


class UsageRequest(BaseModel):
    usage_seconds: float = Field(ge=0)


class EventRequest(BaseModel):
    kind: SecurityEventKind
    severity: Severity
    user_id: Optional[str] = None
    details: Dict[str, Any] = Field(default_factory=dict)


class ConfigRequest(BaseModel):
    expiry_seconds: int
    max_attempts: int
    resend_delay_seconds: int
    channel: OTPChannel


def _ok(data: Any = None) -> ApiResponse:
    return ApiResponse(success=True, data=data)


def _fail(error: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ApiResponse(success=False, error=error).model_dump(),
    )


def create_security_router(engine: AuthSecurityEngine) -> APIRouter:
    """
    Create the security router bound to an engine.

    Args:
        engine: The engine built by the application's composition root

    Returns:
        FastAPI router mounted under /security
    """
    router = APIRouter(prefix="/security", tags=["Security"])

    @router.post("/otp/generated", response_model=ApiResponse)
    async def otp_generated():
        return _ok(engine.report_otp_generated().to_dict())

    @router.post("/otp/expired", response_model=ApiResponse)
    async def otp_expired():
        return _ok(engine.report_otp_expired().to_dict())

    @router.post("/otp/succeeded", response_model=ApiResponse)
    async def otp_succeeded(body: UsageRequest):
        return _ok(engine.report_otp_succeeded(body.usage_seconds).to_dict())

    @router.post("/otp/failed", response_model=ApiResponse)
    async def otp_failed():
        return _ok(engine.report_otp_failed().to_dict())

    @router.post("/events", response_model=ApiResponse)
    async def log_event(body: EventRequest):
        event_id = engine.log_event(body.kind, body.severity, body.user_id, body.details)
        return _ok({"id": event_id})

    @router.get("/events/recent", response_model=ApiResponse)
    async def recent_events(hours_back: float = Query(24, gt=0)):
        return _ok([e.to_dict() for e in engine.get_recent_events(hours_back)])

    @router.get("/presets/{name}", response_model=ApiResponse)
    async def preset(name: str):
        try:
            return _ok(engine.get_preset(name).to_dict())
        except InvalidPresetError as e:
            return _fail(str(e), 404)

    @router.post("/config/validate", response_model=ApiResponse)
    async def validate_config(body: ConfigRequest):
        try:
            config = OTPConfig(**body.model_dump())
        except ValueError as e:
            return _fail(str(e), 400)
        return _ok(engine.validate_config(config).to_dict())

    @router.get("/report", response_model=ApiResponse)
    async def report():
        return _ok(engine.get_report().to_dict())

    @router.get("/metrics", response_model=ApiResponse)
    async def metrics():
        return _ok(engine.get_metrics_snapshot().to_dict())

    @router.post("/reset", response_model=ApiResponse)
    async def reset():
        engine.reset_metrics()
        return _ok()

    @router.get("/compliance", response_model=ApiResponse)
    async def compliance():
        result = await engine.check_compliance()
        return _ok(result.to_dict())

    return router


def create_app(engine: AuthSecurityEngine) -> FastAPI:
    """Standalone app with the security router and enveloped validation errors."""
    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        yield
        await engine.aclose()

    app = FastAPI(title="Auth Security", version="1.0.0", lifespan=lifespan)
    app.include_router(create_security_router(engine))

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        logger.info("security_api_bad_request", path=request.url.path, errors=len(exc.errors()))
        return _fail("Invalid request payload", 422)

    return app
