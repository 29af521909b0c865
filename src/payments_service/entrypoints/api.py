"""
FastAPI application exposing the payment service.

Routes are pass-through: they hand the raw request to PaymentService and
return its result string as plain text. Domain exceptions are mapped to
status codes here and nowhere else.
"""

from __future__ import annotations

import time
import uuid
from typing import TYPE_CHECKING, Any

import structlog
from fastapi import APIRouter, Depends, FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from starlette.concurrency import run_in_threadpool

from payments_service.application.payment_service import PaymentService
from payments_service.bootstrap import build_payment_service
from payments_service.config import get_settings
from payments_service.domain.exceptions import DomainException, InvalidRequestError

if TYPE_CHECKING:
    from payments_service.config import Settings

logger = structlog.get_logger(__name__)

payment_router = APIRouter(prefix="/api/payments", tags=["payments"])
monitoring_router = APIRouter(tags=["monitoring"])


def get_payment_service(request: Request) -> PaymentService:
    return request.app.state.payment_service


@payment_router.post("", response_class=PlainTextResponse, summary="Process a payment")
async def create_payment(
    request: Request,
    service: PaymentService = Depends(get_payment_service),
) -> str:
    """Run the payment pipeline on the raw request body."""
    try:
        body = (await request.body()).decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidRequestError("Request body must be UTF-8 text") from e
    return await run_in_threadpool(service.process, body)


@payment_router.get("/{payment_id}", response_class=PlainTextResponse, summary="Get a payment")
def get_payment(
    payment_id: str,
    service: PaymentService = Depends(get_payment_service),
) -> str:
    return service.find_by_id(payment_id)


@monitoring_router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


async def invalid_request_handler(request: Request, exc: Exception) -> PlainTextResponse:
    logger.info("invalid_request", path=request.url.path, error=str(exc))
    return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)


async def domain_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    logger.warning(
        "domain_error",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return PlainTextResponse(str(exc), status_code=status.HTTP_409_CONFLICT)


async def request_context_middleware(request: Request, call_next: Any) -> Any:
    """
    Bind a request id to the structlog context for the request's lifetime.

    Also logs request start and completion with timing.
    """
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    start_time = time.perf_counter()

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        request_id=request_id,
        method=request.method,
        path=request.url.path,
    )
    logger.info("request_started")

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    try:
        response = await call_next(request)
        status_code = response.status_code
        response.headers["X-Request-ID"] = request_id
        return response
    finally:
        logger.info(
            "request_completed",
            status_code=status_code,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        structlog.contextvars.clear_contextvars()


def create_app(
    service: PaymentService | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        service: Pre-built service. Built from settings when omitted.
        settings: Application settings. Loaded from the environment when omitted.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Payments Service",
        description="Accepts payment requests and runs validate -> save -> notify.",
        version="0.1.0",
    )
    app.state.settings = settings
    app.state.payment_service = service or build_payment_service(settings)

    app.middleware("http")(request_context_middleware)
    app.add_exception_handler(InvalidRequestError, invalid_request_handler)
    app.add_exception_handler(DomainException, domain_exception_handler)

    app.include_router(payment_router)
    app.include_router(monitoring_router)
    return app
