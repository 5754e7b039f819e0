# eshop/services/api/app.py
"""
FastAPI application for the marketplace REST API.

Every router is mounted under API_PREFIX (/api/v2):
- /user, /shop            accounts and sessions
- /product, /event        catalog and flash sales
- /coupon                 coupon codes
- /conversation, /message persisted chat
- /withdraw               seller payouts
- /order                  checkout and order lifecycle

Errors are returned as {"success": false, "error": "<message>"}.
"""

from __future__ import annotations

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from eshop.common.constants import TypeMsg
from eshop.common.exceptions import AppError
from eshop.common.logger import log_error, log_info, log_warning
from eshop.config import settings
from eshop.infra.database import close_db, get_db, init_db
from eshop.services.conversations.routes import router as conversation_router
from eshop.services.coupons.routes import router as coupon_router
from eshop.services.events.routes import router as event_router
from eshop.services.messages.routes import router as message_router
from eshop.services.orders.routes import router as order_router
from eshop.services.products.routes import router as product_router
from eshop.services.shops.routes import router as shop_router
from eshop.services.users.routes import router as user_router
from eshop.services.withdrawals.routes import router as withdraw_router
from eshop.shared.models.common import ErrorResponse, HealthStatus

SERVICE_NAME = "api"
_started_at = time.monotonic()


# === LIFESPAN ===

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle."""
    await log_info("Starting marketplace API...", type_msg=TypeMsg.INFO)
    await init_db()

    yield

    await log_info("Shutting down marketplace API...", type_msg=TypeMsg.INFO)
    await close_db()


# === APP ===

app = FastAPI(
    title="eshop API",
    description="Multi-vendor marketplace backend",
    version=settings.system.VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.deployment.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Logs method, path, status and duration of every request."""
    started = time.perf_counter()
    response = await call_next(request)
    duration_ms = round((time.perf_counter() - started) * 1000, 2)

    await log_info(
        f"{request.method} {request.url.path} -> {response.status_code} ({duration_ms} ms)",
        type_msg=TypeMsg.DEBUG if response.status_code < 400 else TypeMsg.WARNING,
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
            "client_ip": request.client.host if request.client else None,
        },
    )
    return response


# === ERROR HANDLERS ===

@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        await log_error(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=ErrorResponse(error=exc.message).model_dump())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())[1:])
        details.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))

    message = "; ".join(details) or "Invalid request"
    await log_warning(f"{request.method} {request.url.path}: {message}")
    return JSONResponse(status_code=400, content=ErrorResponse(error=message).model_dump())


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    await log_error(
        f"Unhandled error on {request.method} {request.url.path}: {exc}",
        exc_info=True,
    )
    message = str(exc) or "An unknown error occurred"
    return JSONResponse(status_code=500, content=ErrorResponse(error=message).model_dump())


# === HEALTH CHECK ===

@app.get("/health", response_model=HealthStatus, tags=["Health"])
async def health_check() -> HealthStatus:
    """Service health, including the database."""
    db_ok = await get_db().health_check()

    return HealthStatus(
        service=SERVICE_NAME,
        status="healthy" if db_ok else "degraded",
        version=settings.system.VERSION,
        uptime_seconds=round(time.monotonic() - _started_at, 2),
        dependencies={"postgres": "healthy" if db_ok else "unhealthy"},
    )


# === ROUTERS ===

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

for router in (
    user_router,
    shop_router,
    product_router,
    event_router,
    coupon_router,
    conversation_router,
    message_router,
    withdraw_router,
    order_router,
):
    app.include_router(router, prefix=settings.deployment.API_PREFIX, responses=ERROR_RESPONSES)
